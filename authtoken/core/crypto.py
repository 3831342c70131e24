# authtoken/core/crypto.py
from __future__ import annotations

from pathlib import Path

from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import rsa

from authtoken.core.config import settings


def load_private_key(path: str | Path | None = None) -> rsa.RSAPrivateKey:
    return serialization.load_pem_private_key(
        Path(path or settings.private_key_path).read_bytes(), password=None
    )


def load_public_key(path: str | Path | None = None) -> rsa.RSAPublicKey:
    return serialization.load_pem_public_key(
        Path(path or settings.public_key_path).read_bytes()
    )


def generate_key_pair(keys_dir: str | Path) -> tuple[Path, Path]:
    """
    Genera un par RSA 2048 y lo escribe en PEM:
    - token_private.pem (TraditionalOpenSSL, sin cifrar)
    - token_public.pem  (SubjectPublicKeyInfo)
    Devuelve (ruta_privada, ruta_publica).
    """
    keys_dir = Path(keys_dir)
    keys_dir.mkdir(parents=True, exist_ok=True)

    private_key = rsa.generate_private_key(public_exponent=65537, key_size=2048)
    pem_priv = private_key.private_bytes(
        encoding=serialization.Encoding.PEM,
        format=serialization.PrivateFormat.TraditionalOpenSSL,
        encryption_algorithm=serialization.NoEncryption(),
    )
    priv_path = keys_dir / "token_private.pem"
    priv_path.write_bytes(pem_priv)

    pem_pub = private_key.public_key().public_bytes(
        encoding=serialization.Encoding.PEM,
        format=serialization.PublicFormat.SubjectPublicKeyInfo,
    )
    pub_path = keys_dir / "token_public.pem"
    pub_path.write_bytes(pem_pub)

    return priv_path, pub_path
