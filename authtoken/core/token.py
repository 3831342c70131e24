# authtoken/core/token.py
"""
Emisión y verificación de tokens RS256 (JWT compacto) para claims de cliente
y de servidor.

Las claves las aporta el llamador: objeto RSA de `cryptography` o PEM
(bytes/str). El códec no las guarda ni las modifica.
"""
from __future__ import annotations

from typing import Optional, TypeVar, Union

import jwt
from jwt import InvalidTokenError
from pydantic import ValidationError
from cryptography.hazmat.primitives.asymmetric.rsa import RSAPrivateKey, RSAPublicKey

from authtoken.core.claims import ClientClaims, ServerClaims, TemporalClaims
from authtoken.core.config import settings
from authtoken.core.errors import DecodeFailed, EncodeFailed
from authtoken.core.logging import get_logger

ALGORITHM = "RS256"

ENCODE_CONTEXT = "Unable to encode token"
DECODE_CONTEXT = "Unable to decode token"

# exp/nbf obligatorios; iat viaja pero no se contrasta con el reloj.
# 'sub' es una secuencia de bytes, no un string: se desactiva esa comprobación de PyJWT.
DECODE_OPTIONS = {
    "require": ["exp", "nbf"],
    "verify_exp": True,
    "verify_nbf": True,
    "verify_iat": False,
    "verify_sub": False,
}

PrivateKey = Union[RSAPrivateKey, bytes, str]
PublicKey = Union[RSAPublicKey, bytes, str]

C = TypeVar("C", bound=TemporalClaims)

logger = get_logger(__name__)


def _encode(private_key: PrivateKey, claims_factory, kind: str) -> str:
    try:
        claims = claims_factory()
        token = jwt.encode(
            claims.to_payload(),
            private_key,
            algorithm=ALGORITHM,
            headers={"typ": "JWT"},
        )
    except Exception as e:
        logger.warning("token_encode_failed", kind=kind, detail=str(e))
        raise EncodeFailed(ENCODE_CONTEXT, str(e)) from e

    logger.debug("token_encoded", kind=kind, reference=claims.reference, exp=claims.expiry)
    return token


def _decode(public_key: PublicKey, token: str, claims_cls: type[C], kind: str, leeway: Optional[int]) -> C:
    if leeway is None:
        leeway = settings.leeway
    try:
        # Firma (solo RS256) + estructura + nbf/exp
        payload = jwt.decode(
            token,
            public_key,
            algorithms=[ALGORITHM],
            options=DECODE_OPTIONS,
            leeway=leeway,
        )
        claims = claims_cls.from_payload(payload)
    except (InvalidTokenError, ValidationError) as e:
        logger.warning("token_decode_failed", kind=kind, detail=str(e))
        raise DecodeFailed(DECODE_CONTEXT, str(e)) from e
    except Exception as e:
        # Clave inválida u otro fallo del backend
        logger.warning("token_decode_failed", kind=kind, detail=f"verify-error: {e}")
        raise DecodeFailed(DECODE_CONTEXT, f"verify-error: {e}") from e

    logger.debug("token_decoded", kind=kind, reference=claims.reference)
    return claims


def encode_client_token(
    private_key: PrivateKey,
    subject: bytes,
    buffer: Optional[bytes],
    reference: int,
    exp: Optional[int] = None,
    nbf: Optional[int] = None,
    iat: Optional[int] = None,
) -> str:
    """Firma unas ClientClaims. Lanza EncodeFailed si no se puede firmar."""
    return _encode(
        private_key,
        lambda: ClientClaims.new(subject, buffer, reference, exp=exp, nbf=nbf, iat=iat),
        "client",
    )


def decode_client_token(public_key: PublicKey, token: str, leeway: Optional[int] = None) -> ClientClaims:
    """Verifica firma y ventana temporal. Lanza DecodeFailed ante cualquier fallo."""
    return _decode(public_key, token, ClientClaims, "client", leeway)


def encode_server_token(
    private_key: PrivateKey,
    subject: bytes,
    client: Optional[bytes],
    server: Optional[bytes],
    reference: int,
    exp: Optional[int] = None,
    nbf: Optional[int] = None,
    iat: Optional[int] = None,
) -> str:
    return _encode(
        private_key,
        lambda: ServerClaims.new(subject, client, server, reference, exp=exp, nbf=nbf, iat=iat),
        "server",
    )


def decode_server_token(public_key: PublicKey, token: str, leeway: Optional[int] = None) -> ServerClaims:
    return _decode(public_key, token, ServerClaims, "server", leeway)
