# authtoken/main.py
from fastapi import FastAPI
from contextlib import asynccontextmanager

from authtoken.api.issuer import router as issuer_router
from authtoken.api.verifier import router as verifier_router

from authtoken.core.config import settings
from authtoken.core.logging import configure_logging, get_logger

@asynccontextmanager
async def lifespan(app: FastAPI):
    # === STARTUP ===
    configure_logging(settings.service_name, settings.log_level)
    get_logger(__name__).info("service_started", leeway=settings.leeway)
    yield

app = FastAPI(title="Claims tokens (RS256)", lifespan=lifespan)

app.include_router(issuer_router, prefix="/issuer", tags=["issuer"])
app.include_router(verifier_router, prefix="/verifier", tags=["verifier"])

@app.get("/")
def root():
    return {"ok": True}
