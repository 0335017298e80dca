# pem_jwk/services/assembler.py
from typing import Optional

from pydantic import ValidationError

from pem_jwk.core.encoding import b64url_uint
from pem_jwk.core.exceptions import ExtractionException, SerializationException, UnsupportedKeyTypeException
from pem_jwk.core.keys import EcPublic, KeyMaterial, RsaPrivate, RsaPublic
from pem_jwk.schemas.jwk import EcPublicJwk, Jwk, RsaPrivateJwk, RsaPublicJwk


def assemble_jwk(
    material: KeyMaterial,
    kid: str,
    crv: Optional[str] = None,
    key_use: Optional[str] = None,
) -> Jwk:
    """Monta o registo JWK com o conjunto de campos certo para cada variante."""
    key_use = key_use or None
    if isinstance(material, EcPublic):
        if crv is None:
            raise ExtractionException("EC keys require a resolved curve name")
        return EcPublicJwk(
            x=b64url_uint(material.x),
            y=b64url_uint(material.y),
            crv=crv,
            kid=kid,
            use=key_use,
        )
    if isinstance(material, RsaPrivate):
        return RsaPrivateJwk(
            n=b64url_uint(material.n),
            e=b64url_uint(material.e),
            kid=kid,
            d=b64url_uint(material.d),
            use=key_use,
        )
    if isinstance(material, RsaPublic):
        return RsaPublicJwk(
            n=b64url_uint(material.n),
            e=b64url_uint(material.e),
            kid=kid,
            use=key_use,
        )
    raise UnsupportedKeyTypeException(f"cannot build a JWK for {type(material).__name__}")


def serialize_jwk(jwk: Jwk, indent: int = 2) -> str:
    try:
        return jwk.model_dump_json(indent=indent, exclude_none=True)
    except (ValueError, TypeError, ValidationError) as e:
        raise SerializationException("could not serialize JWK") from e
