# authtoken/core/errors.py
from __future__ import annotations


class TokenError(Exception):
    """
    Fallo al emitir o verificar un token.
    - context: mensaje fijo que identifica la operación ("Unable to decode token")
    - detail: diagnóstico devuelto por PyJWT/cryptography/pydantic
    """

    def __init__(self, context: str, detail: str):
        self.context = context
        self.detail = detail
        super().__init__(f"{context}: {detail}")


class EncodeFailed(TokenError):
    pass


class DecodeFailed(TokenError):
    pass
