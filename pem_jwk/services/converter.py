# pem_jwk/services/converter.py
from pathlib import Path
from typing import Optional, Union

from loguru import logger

from pem_jwk.core.config import Settings, settings as default_settings
from pem_jwk.core.curves import resolve_curve_name
from pem_jwk.core.keys import EcPublic, KeyKind
from pem_jwk.core.thumbprint import HashDomain, compute_kid
from pem_jwk.schemas.jwk import Jwk
from pem_jwk.services.assembler import assemble_jwk, serialize_jwk
from pem_jwk.services.extractor import extract_key_material
from pem_jwk.services.loader import load_key, read_key_file


def convert_key_bytes(
    data: bytes,
    declared: Optional[KeyKind] = None,
    *,
    ec_hash: Optional[HashDomain] = None,
    strict_curves: Optional[bool] = None,
    key_use: Optional[str] = None,
    config: Optional[Settings] = None,
) -> Jwk:
    """
    Pipeline completo: PEM/DER -> KeyMaterial -> kid/crv -> JWK.
    Argumentos explícitos têm prioridade sobre as settings.
    """
    cfg = config or default_settings
    if ec_hash is None:
        ec_hash = HashDomain(cfg.EC_THUMBPRINT_HASH)
    if strict_curves is None:
        strict_curves = cfg.STRICT_CURVES
    if not key_use:
        # "use" vazio conta como ausente
        key_use = (cfg.KEY_USE or None) if cfg.INCLUDE_KEY_USE else None

    key = load_key(data)
    material = extract_key_material(key, declared, strict_curves=strict_curves)
    kid = compute_kid(material, ec_hash=ec_hash)

    crv = None
    if isinstance(material, EcPublic):
        crv = resolve_curve_name(material.curve, strict=strict_curves)

    logger.info(f"Chave {material.kind.value} convertida (kid={kid}).")
    return assemble_jwk(material, kid, crv=crv, key_use=key_use)


def convert_key_file(
    path: Union[str, Path],
    declared: Optional[KeyKind] = None,
    *,
    ec_hash: Optional[HashDomain] = None,
    strict_curves: Optional[bool] = None,
    key_use: Optional[str] = None,
    config: Optional[Settings] = None,
) -> Jwk:
    cfg = config or default_settings
    data = read_key_file(path, max_bytes=cfg.MAX_KEY_BYTES)
    return convert_key_bytes(
        data,
        declared,
        ec_hash=ec_hash,
        strict_curves=strict_curves,
        key_use=key_use,
        config=cfg,
    )


def convert_key_file_to_json(path: Union[str, Path], declared: Optional[KeyKind] = None, **kwargs) -> str:
    cfg = kwargs.get("config") or default_settings
    jwk = convert_key_file(path, declared, **kwargs)
    return serialize_jwk(jwk, indent=cfg.JSON_INDENT)
