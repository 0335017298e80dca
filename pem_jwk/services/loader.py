# pem_jwk/services/loader.py
from pathlib import Path
from typing import Union

from cryptography.exceptions import UnsupportedAlgorithm
from cryptography.hazmat.primitives import serialization
from loguru import logger

from pem_jwk.core.config import settings
from pem_jwk.core.exceptions import FileReadException, KeyParseException

PEM_MARKER = b"-----BEGIN"


def read_key_file(path: Union[str, Path], max_bytes: int | None = None) -> bytes:
    """Lê o ficheiro da chave (PEM ou DER) para memória."""
    limit = max_bytes if max_bytes is not None else settings.MAX_KEY_BYTES
    key_path = Path(path)
    try:
        size = key_path.stat().st_size
        if size > limit:
            raise FileReadException(f"key file is too large ({size} bytes, limit {limit})")
        data = key_path.read_bytes()
    except OSError as e:
        raise FileReadException(f"could not read key file '{key_path}'") from e

    logger.debug(f"Ficheiro '{key_path}' lido ({len(data)} bytes).")
    return data


def is_pem(data: bytes) -> bool:
    # Texto antes do cabeçalho (ex: "Bag Attributes" do OpenSSL) é ignorado
    return PEM_MARKER in data


def load_key(data: bytes):
    """
    Converte PEM/DER num objeto de chave do 'cryptography'.
    Tenta primeiro como chave pública e depois como privada (sem password).
    """
    if is_pem(data):
        load_public, load_private = serialization.load_pem_public_key, serialization.load_pem_private_key
    else:
        load_public, load_private = serialization.load_der_public_key, serialization.load_der_private_key

    try:
        key = load_public(data)
        logger.debug(f"Chave pública carregada: {type(key).__name__}")
        return key
    except (ValueError, UnsupportedAlgorithm) as e:
        logger.debug(f"Não é uma chave pública válida ({e}); a tentar como chave privada.")

    try:
        key = load_private(data, password=None)
    except TypeError as e:
        # Chave cifrada com password
        raise KeyParseException("could not parse key: encrypted keys are not supported") from e
    except (ValueError, UnsupportedAlgorithm) as e:
        raise KeyParseException("could not parse key") from e

    logger.debug(f"Chave privada carregada: {type(key).__name__}")
    return key
