# authtoken/api/issuer.py
from fastapi import APIRouter, HTTPException
from pydantic import BaseModel, Field

from authtoken.core.crypto import load_private_key
from authtoken.core.errors import EncodeFailed
from authtoken.core.token import encode_client_token, encode_server_token

router = APIRouter()


def _raw(value: str | None) -> bytes | None:
    return None if value is None else value.encode("utf-8")


class ClientIssueInput(BaseModel):
    subject: str
    buffer: str | None = None
    reference: int = Field(..., ge=0)
    exp: int | None = None
    nbf: int | None = None
    iat: int | None = None


class ServerIssueInput(BaseModel):
    subject: str
    client: str | None = None
    server: str | None = None
    reference: int = Field(..., ge=0)
    exp: int | None = None
    nbf: int | None = None
    iat: int | None = None


@router.post("/client")
async def issue_client_token(body: ClientIssueInput):
    try:
        token = encode_client_token(
            load_private_key(),
            _raw(body.subject),
            _raw(body.buffer),
            body.reference,
            exp=body.exp,
            nbf=body.nbf,
            iat=body.iat,
        )
    except EncodeFailed as e:
        raise HTTPException(status_code=500, detail=str(e))
    return {"token": token}


@router.post("/server")
async def issue_server_token(body: ServerIssueInput):
    try:
        token = encode_server_token(
            load_private_key(),
            _raw(body.subject),
            _raw(body.client),
            _raw(body.server),
            body.reference,
            exp=body.exp,
            nbf=body.nbf,
            iat=body.iat,
        )
    except EncodeFailed as e:
        raise HTTPException(status_code=500, detail=str(e))
    return {"token": token}
