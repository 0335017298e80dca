import base64
from pathlib import Path
from typing import AsyncGenerator, Callable

import pytest
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import ec, ed25519, rsa
from httpx import ASGITransport, AsyncClient

from main import app

# Ponto gerador da P-256 (chave pública da chave privada 1)
P256_GX_HEX = "6b17d1f2e12c4247f8bce6e563a440f277037d812deb33a0f4a13945d898c296"
P256_GY_HEX = "4fe342e2fe1a7f9b8ee7eb4a7c0f9e162bce33576b315ececbb6406837bf51f5"


def b64url_decode(value: str) -> bytes:
    return base64.urlsafe_b64decode(value + "=" * (-len(value) % 4))


def public_pem(key) -> bytes:
    return key.public_key().public_bytes(
        encoding=serialization.Encoding.PEM,
        format=serialization.PublicFormat.SubjectPublicKeyInfo,
    )


def private_pem(key) -> bytes:
    return key.private_bytes(
        encoding=serialization.Encoding.PEM,
        format=serialization.PrivateFormat.PKCS8,
        encryption_algorithm=serialization.NoEncryption(),
    )


# --- CHAVES DE TESTE ---

@pytest.fixture(scope="session")
def rsa_private_key() -> rsa.RSAPrivateKey:
    return rsa.generate_private_key(public_exponent=65537, key_size=2048)


@pytest.fixture(scope="session")
def ec_private_key() -> ec.EllipticCurvePrivateKey:
    return ec.generate_private_key(ec.SECP256R1())


@pytest.fixture(scope="session")
def p384_private_key() -> ec.EllipticCurvePrivateKey:
    return ec.generate_private_key(ec.SECP384R1())


@pytest.fixture(scope="session")
def generator_public_key() -> ec.EllipticCurvePublicKey:
    numbers = ec.EllipticCurvePublicNumbers(
        int(P256_GX_HEX, 16), int(P256_GY_HEX, 16), ec.SECP256R1()
    )
    return numbers.public_key()


@pytest.fixture
def rsa_public_pem(rsa_private_key) -> bytes:
    return public_pem(rsa_private_key)


@pytest.fixture
def rsa_private_pem(rsa_private_key) -> bytes:
    return private_pem(rsa_private_key)


@pytest.fixture
def ec_public_pem(ec_private_key) -> bytes:
    return public_pem(ec_private_key)


@pytest.fixture
def ec_private_pem(ec_private_key) -> bytes:
    return private_pem(ec_private_key)


@pytest.fixture
def p384_public_pem(p384_private_key) -> bytes:
    return public_pem(p384_private_key)


@pytest.fixture
def ed25519_public_pem() -> bytes:
    return public_pem(ed25519.Ed25519PrivateKey.generate())


@pytest.fixture
def write_key(tmp_path: Path) -> Callable[[bytes, str], Path]:
    """Writes key bytes into a temporary file and returns its path."""
    def _write(data: bytes, name: str = "key.pem") -> Path:
        path = tmp_path / name
        path.write_bytes(data)
        return path
    return _write


# --- CLIENTE HTTP DE TESTE ---

@pytest.fixture(scope="function")
async def async_client() -> AsyncGenerator[AsyncClient, None]:
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
