# pem_jwk/core/keys.py
from enum import Enum
from typing import Literal, Union

from pydantic import BaseModel, ConfigDict, Field, model_validator


class KeyKind(str, Enum):
    EC_PUBLIC = "ec-public"
    RSA_PUBLIC = "rsa-public"
    RSA_PRIVATE = "rsa-private"


class CurveId(BaseModel):
    """Identificador interno da curva (nome SEC + tamanho do campo em bits)."""
    model_config = ConfigDict(frozen=True)

    name: str
    key_size: int = Field(gt=0)

    @property
    def field_width(self) -> int:
        return (self.key_size + 7) // 8


P256 = CurveId(name="secp256r1", key_size=256)


# --- KeyMaterial: união discriminada por 'kind' ---

class EcPublic(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal[KeyKind.EC_PUBLIC] = KeyKind.EC_PUBLIC
    curve: CurveId
    x: int = Field(ge=0)
    y: int = Field(ge=0)

    @model_validator(mode="after")
    def check_coordinates_fit_field(self) -> "EcPublic":
        limit = self.curve.key_size
        if self.x.bit_length() > limit or self.y.bit_length() > limit:
            raise ValueError(f"Affine coordinates exceed the {self.curve.name} field size")
        return self


class RsaPublic(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal[KeyKind.RSA_PUBLIC] = KeyKind.RSA_PUBLIC
    n: int = Field(ge=0)
    e: int = Field(ge=0)


class RsaPrivate(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal[KeyKind.RSA_PRIVATE] = KeyKind.RSA_PRIVATE
    n: int = Field(ge=0)
    e: int = Field(ge=0)
    d: int = Field(ge=0)


KeyMaterial = Union[EcPublic, RsaPublic, RsaPrivate]
