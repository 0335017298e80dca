# pem_jwk/core/encoding.py
import base64


def canonical_bytes(value: int) -> bytes:
    """
    Representação big-endian mínima de um inteiro não negativo.
    Sem byte de sinal e sem zeros à esquerda; 0 -> b"\\x00".
    """
    if value < 0:
        raise ValueError(f"Canonical encoding requires a non-negative integer, got {value}")
    length = (value.bit_length() + 7) // 8 or 1
    return value.to_bytes(length, "big")


def fixed_width_bytes(value: int, width: int) -> bytes:
    """Big-endian com largura fixa (zeros à esquerda), usado no ponto EC."""
    if value < 0:
        raise ValueError(f"Fixed-width encoding requires a non-negative integer, got {value}")
    if value.bit_length() > width * 8:
        raise ValueError(f"Integer does not fit in {width} bytes")
    return value.to_bytes(width, "big")


def b64url_encode(data: bytes) -> str:
    return base64.urlsafe_b64encode(data).rstrip(b"=").decode("ascii")


def b64url_uint(value: int) -> str:
    return b64url_encode(canonical_bytes(value))
