# pem_jwk/schemas/jwk.py
from pydantic import BaseModel, Field
from typing import Literal, Optional, Union

from pem_jwk.core.keys import KeyKind
from pem_jwk.core.thumbprint import HashDomain

# A ordem dos campos abaixo é a ordem de saída do JSON.


class EcPublicJwk(BaseModel):
    """JWK de chave pública EC (ES256)."""
    x: str
    y: str
    kty: Literal["EC"] = "EC"
    alg: Literal["ES256"] = "ES256"
    crv: str
    kid: str
    use: Optional[str] = None


class RsaPublicJwk(BaseModel):
    """JWK de chave pública RSA (RS256)."""
    n: str
    e: str
    kty: Literal["RSA"] = "RSA"
    alg: Literal["RS256"] = "RS256"
    kid: str
    use: Optional[str] = None


class RsaPrivateJwk(BaseModel):
    """JWK de chave privada RSA: igual à pública mais 'd'."""
    n: str
    e: str
    kty: Literal["RSA"] = "RSA"
    alg: Literal["RS256"] = "RS256"
    kid: str
    d: str
    use: Optional[str] = None


Jwk = Union[EcPublicJwk, RsaPublicJwk, RsaPrivateJwk]


# --- Pedido HTTP ---

class ConvertRequest(BaseModel):
    pem: str = Field(min_length=1)
    key_type: Optional[KeyKind] = None
    ec_hash: Optional[HashDomain] = None
    strict_curves: Optional[bool] = None
