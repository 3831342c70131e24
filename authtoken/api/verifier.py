from fastapi import APIRouter
from pydantic import BaseModel

from authtoken.core.crypto import load_public_key
from authtoken.core.errors import DecodeFailed
from authtoken.core.token import decode_client_token, decode_server_token

router = APIRouter()


class VerifyInput(BaseModel):
    token: str


def _text(value: bytes | None) -> str | None:
    # Los campos opacos se devuelven como texto; bytes no UTF-8 se sustituyen
    return None if value is None else value.decode("utf-8", errors="replace")


@router.post("/client")
async def verify_client_token(body: VerifyInput):
    try:
        claims = decode_client_token(load_public_key(), body.token)
    except DecodeFailed as e:
        return {"valid": False, "reason": e.detail}
    except (OSError, ValueError) as e:
        # Clave pública ausente o ilegible
        return {"valid": False, "reason": f"verify-error: {e}"}

    return {
        "valid": True,
        "claims": {
            "sub": _text(claims.subject),
            "buffer": _text(claims.buffer),
            "reference": claims.reference,
            "iat": claims.issued_at,
            "nbf": claims.not_before,
            "exp": claims.expiry,
        },
    }


@router.post("/server")
async def verify_server_token(body: VerifyInput):
    try:
        claims = decode_server_token(load_public_key(), body.token)
    except DecodeFailed as e:
        return {"valid": False, "reason": e.detail}
    except (OSError, ValueError) as e:
        # Clave pública ausente o ilegible
        return {"valid": False, "reason": f"verify-error: {e}"}

    return {
        "valid": True,
        "claims": {
            "sub": _text(claims.subject),
            "client": _text(claims.client),
            "server": _text(claims.server),
            "reference": claims.reference,
            "iat": claims.issued_at,
            "nbf": claims.not_before,
            "exp": claims.expiry,
        },
    }
