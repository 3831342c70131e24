# authtoken/core/claims.py
from __future__ import annotations

import time
from typing import Any, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator

# Validez por defecto: 24 * 60 * 60
DEFAULT_VALIDITY_SECONDS = 86400

U64_MAX = 2**64 - 1
I64_MIN = -(2**63)
I64_MAX = 2**63 - 1


def current_unix_time_seconds() -> int:
    return int(time.time())


def _bytes_from_json(value: Any) -> Any:
    """
    En el payload JSON los bytes viajan como lista de enteros 0..255.
    Cualquier otro valor lo rechaza el campo (bytes en modo estricto).
    """
    if isinstance(value, list):
        if not all(isinstance(b, int) and not isinstance(b, bool) and 0 <= b <= 255 for b in value):
            raise ValueError("byte sequence must be a list of integers in 0..255")
        return bytes(value)
    return value


def _bytes_to_json(value: Optional[bytes]) -> Optional[list[int]]:
    return None if value is None else list(value)


T = TypeVar("T", bound="TemporalClaims")


class TemporalClaims(BaseModel):
    """
    Base común de ClientClaims y ServerClaims: sujeto, referencia y los tres
    timestamps (iat, nbf, exp). Inmutable una vez construida.

    Los nombres de campo son los del dominio; los alias son las claves del payload.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    subject: bytes = Field(alias="sub", strict=True)
    reference: int = Field(alias="_ref", ge=0, le=U64_MAX, strict=True)
    expiry: int = Field(alias="exp", ge=I64_MIN, le=I64_MAX, strict=True)
    not_before: int = Field(alias="nbf", ge=I64_MIN, le=I64_MAX, strict=True)
    issued_at: int = Field(alias="iat", ge=I64_MIN, le=I64_MAX, strict=True)

    @field_validator("subject", mode="before")
    @classmethod
    def subject_from_json(cls, value: Any) -> Any:
        return _bytes_from_json(value)

    @field_serializer("subject")
    def subject_to_json(self, value: bytes) -> list[int]:
        return list(value)

    @staticmethod
    def _timestamps(exp: Optional[int], nbf: Optional[int], iat: Optional[int]) -> dict[str, int]:
        # El orden importa: exp y nbf se derivan de iat
        if iat is None:
            iat = current_unix_time_seconds()
        if exp is None:
            exp = iat + DEFAULT_VALIDITY_SECONDS
        if nbf is None:
            nbf = iat
        # No se valida el orden entre valores explícitos (nbf <= exp, etc.)
        return {"issued_at": iat, "expiry": exp, "not_before": nbf}

    def to_payload(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True)

    @classmethod
    def from_payload(cls: type[T], payload: dict[str, Any]) -> T:
        return cls.model_validate(payload)


class ClientClaims(TemporalClaims):
    buffer: Optional[bytes] = Field(None, alias="_buf", strict=True)

    @field_validator("buffer", mode="before")
    @classmethod
    def buffer_from_json(cls, value: Any) -> Any:
        return _bytes_from_json(value)

    @field_serializer("buffer")
    def buffer_to_json(self, value: Optional[bytes]) -> Optional[list[int]]:
        return _bytes_to_json(value)

    @classmethod
    def new(
        cls,
        subject: bytes,
        buffer: Optional[bytes],
        reference: int,
        exp: Optional[int] = None,
        nbf: Optional[int] = None,
        iat: Optional[int] = None,
    ) -> "ClientClaims":
        return cls(
            subject=subject,
            buffer=buffer,
            reference=reference,
            **cls._timestamps(exp, nbf, iat),
        )


class ServerClaims(TemporalClaims):
    """Claims de servidor a servidor: qué par cliente/servidor avala el token."""

    client: Optional[bytes] = Field(None, alias="_client", strict=True)
    server: Optional[bytes] = Field(None, alias="_server", strict=True)

    @field_validator("client", "server", mode="before")
    @classmethod
    def ids_from_json(cls, value: Any) -> Any:
        return _bytes_from_json(value)

    @field_serializer("client", "server")
    def ids_to_json(self, value: Optional[bytes]) -> Optional[list[int]]:
        return _bytes_to_json(value)

    @classmethod
    def new(
        cls,
        subject: bytes,
        client: Optional[bytes],
        server: Optional[bytes],
        reference: int,
        exp: Optional[int] = None,
        nbf: Optional[int] = None,
        iat: Optional[int] = None,
    ) -> "ServerClaims":
        return cls(
            subject=subject,
            client=client,
            server=server,
            reference=reference,
            **cls._timestamps(exp, nbf, iat),
        )
