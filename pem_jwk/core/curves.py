# pem_jwk/core/curves.py
from loguru import logger

from pem_jwk.core.exceptions import UnsupportedKeyTypeException
from pem_jwk.core.keys import CurveId

UNKNOWN_CURVE = "Unknown"

# Apenas P-256 tem nome JOSE suportado
CURVE_NAMES = {
    "secp256r1": "P-256",
}


def resolve_curve_name(curve: CurveId, strict: bool = False) -> str:
    """
    Converte a curva interna no valor 'crv' do JWK.
    Curvas desconhecidas dão "Unknown" (ou erro, em modo estrito).
    """
    crv = CURVE_NAMES.get(curve.name)
    if crv is not None:
        return crv

    if strict:
        raise UnsupportedKeyTypeException(f"unsupported elliptic curve: {curve.name}")

    logger.warning(f"Curva '{curve.name}' não suportada; crv será '{UNKNOWN_CURVE}'.")
    return UNKNOWN_CURVE
