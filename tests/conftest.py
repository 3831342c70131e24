# tests/conftest.py
import os
import sys
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

# --- Asegurar que podemos importar 'authtoken' desde la raíz del repo ---
ROOT = Path(__file__).resolve().parent.parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from cryptography.hazmat.primitives.asymmetric import rsa


def _prepare_test_env() -> None:
    from authtoken.core.crypto import generate_key_pair

    tmp = (ROOT / ".pytest_tmp").absolute()
    tmp.mkdir(exist_ok=True)

    # Claves efímeras (ruta por ENV, consistente con los alias de Settings)
    priv_path, pub_path = generate_key_pair(tmp)
    os.environ["TOKEN_PRIVATE_KEY_PATH"] = priv_path.as_posix()
    os.environ["TOKEN_PUBLIC_KEY_PATH"] = pub_path.as_posix()
    os.environ["TOKEN_LEEWAY"] = "0"


@pytest.fixture(scope="session")
def client():
    """
    Cliente de pruebas con entorno efímero:
    - Claves RSA generadas al vuelo en .pytest_tmp/
    - ENV configurado sin depender de .env ni keys/
    """
    _prepare_test_env()
    from authtoken.core.config import settings
    # settings ya puede estar instanciado por otros tests: se alinea con el ENV
    settings.private_key_path = os.environ["TOKEN_PRIVATE_KEY_PATH"]
    settings.public_key_path = os.environ["TOKEN_PUBLIC_KEY_PATH"]

    from authtoken.main import app
    # Con 'with' forzamos lifespan (configuración de logging)
    with TestClient(app) as c:
        yield c


@pytest.fixture(scope="session")
def private_key():
    return rsa.generate_private_key(public_exponent=65537, key_size=2048)


@pytest.fixture(scope="session")
def public_key(private_key):
    return private_key.public_key()


@pytest.fixture(scope="session")
def other_public_key():
    """Clave pública que no corresponde a private_key."""
    return rsa.generate_private_key(public_exponent=65537, key_size=2048).public_key()


# --- Reset de settings después de cada test (autouse) ---
@pytest.fixture(autouse=True)
def _reset_settings_between_tests():
    from authtoken.core.config import settings
    snapshot = settings.leeway
    yield
    settings.leeway = snapshot
