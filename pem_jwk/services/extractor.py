# pem_jwk/services/extractor.py
from typing import Optional

from cryptography.hazmat.primitives.asymmetric import ec, rsa
from loguru import logger
from pydantic import ValidationError

from pem_jwk.core.curves import CURVE_NAMES
from pem_jwk.core.exceptions import ExtractionException, UnsupportedKeyTypeException
from pem_jwk.core.keys import CurveId, EcPublic, KeyKind, KeyMaterial, RsaPrivate, RsaPublic


def detect_kind(key) -> KeyKind:
    """Identifica o tipo da chave carregada; tipos não suportados dão erro."""
    if isinstance(key, ec.EllipticCurvePublicKey):
        return KeyKind.EC_PUBLIC
    if isinstance(key, rsa.RSAPublicKey):
        return KeyKind.RSA_PUBLIC
    if isinstance(key, rsa.RSAPrivateKey):
        return KeyKind.RSA_PRIVATE
    if isinstance(key, ec.EllipticCurvePrivateKey):
        raise UnsupportedKeyTypeException("elliptic curve private keys are not supported")
    raise UnsupportedKeyTypeException(f"unsupported key type: {type(key).__name__}")


def extract_key_material(
    key,
    declared: Optional[KeyKind] = None,
    *,
    strict_curves: bool = False,
) -> KeyMaterial:
    """
    Extrai os inteiros da chave (EC: curva, x, y; RSA: n, e [, d]) para
    o modelo KeyMaterial, sem objetos do 'cryptography'.
    """
    kind = detect_kind(key)
    if declared is not None and KeyKind(declared) is not kind:
        raise UnsupportedKeyTypeException(
            f"expected a {KeyKind(declared).value} key but got a {kind.value} key"
        )

    try:
        if kind is KeyKind.EC_PUBLIC:
            return _extract_ec_public(key, strict_curves=strict_curves)
        if kind is KeyKind.RSA_PUBLIC:
            numbers = key.public_numbers()
            return RsaPublic(n=numbers.n, e=numbers.e)
        if kind is KeyKind.RSA_PRIVATE:
            numbers = key.private_numbers()
            public = numbers.public_numbers
            return RsaPrivate(n=public.n, e=public.e, d=numbers.d)
    except (ValueError, TypeError, ValidationError) as e:
        raise ExtractionException(f"could not extract {kind.value} key parameters") from e

    raise UnsupportedKeyTypeException(f"unsupported key kind: {kind}")


def _extract_ec_public(key: ec.EllipticCurvePublicKey, *, strict_curves: bool) -> EcPublic:
    curve = CurveId(name=key.curve.name, key_size=key.curve.key_size)
    if strict_curves and curve.name not in CURVE_NAMES:
        raise UnsupportedKeyTypeException(f"unsupported elliptic curve: {curve.name}")

    numbers = key.public_numbers()
    logger.debug(f"Coordenadas afins extraídas na curva {curve.name}.")
    return EcPublic(curve=curve, x=numbers.x, y=numbers.y)
