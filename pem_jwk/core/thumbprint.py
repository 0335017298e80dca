# pem_jwk/core/thumbprint.py
import hashlib
from enum import Enum

from pem_jwk.core.encoding import b64url_encode, canonical_bytes, fixed_width_bytes
from pem_jwk.core.exceptions import UnsupportedKeyTypeException
from pem_jwk.core.keys import EcPublic, KeyMaterial, RsaPrivate, RsaPublic

UNCOMPRESSED_POINT_MARKER = b"\x04"


class HashDomain(str, Enum):
    SHA1 = "sha1"
    SHA256 = "sha256"


def ec_point_bytes(material: EcPublic) -> bytes:
    """Codificação não comprimida do ponto: 0x04 || X || Y com largura do campo."""
    width = material.curve.field_width
    return (
        UNCOMPRESSED_POINT_MARKER
        + fixed_width_bytes(material.x, width)
        + fixed_width_bytes(material.y, width)
    )


def ec_thumbprint_sha1(material: EcPublic) -> str:
    return b64url_encode(hashlib.sha1(ec_point_bytes(material)).digest())


def ec_thumbprint_sha256(material: EcPublic) -> str:
    return b64url_encode(hashlib.sha256(ec_point_bytes(material)).digest())


def rsa_thumbprint_input(material: RsaPublic | RsaPrivate) -> bytes:
    # n || e [|| d], sem separadores nem prefixos de tamanho
    data = canonical_bytes(material.n) + canonical_bytes(material.e)
    if isinstance(material, RsaPrivate):
        data += canonical_bytes(material.d)
    return data


def rsa_thumbprint(material: RsaPublic | RsaPrivate) -> str:
    return b64url_encode(hashlib.sha256(rsa_thumbprint_input(material)).digest())


def compute_kid(material: KeyMaterial, ec_hash: HashDomain = HashDomain.SHA1) -> str:
    if isinstance(material, EcPublic):
        if HashDomain(ec_hash) is HashDomain.SHA256:
            return ec_thumbprint_sha256(material)
        return ec_thumbprint_sha1(material)
    if isinstance(material, (RsaPublic, RsaPrivate)):
        return rsa_thumbprint(material)
    raise UnsupportedKeyTypeException(f"cannot compute kid for {type(material).__name__}")
