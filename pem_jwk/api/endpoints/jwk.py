# pem_jwk/api/endpoints/jwk.py
from typing import Any, Union

from fastapi import APIRouter, HTTPException, status
from loguru import logger

from pem_jwk.core.config import settings
from pem_jwk.schemas.jwk import ConvertRequest, EcPublicJwk, RsaPrivateJwk, RsaPublicJwk
from pem_jwk.services.converter import convert_key_bytes

router = APIRouter()


@router.post(
    "",
    response_model=Union[EcPublicJwk, RsaPrivateJwk, RsaPublicJwk],
    response_model_exclude_none=True,
    responses={
        status.HTTP_200_OK: {"description": "JWK gerado a partir da chave"},
        status.HTTP_400_BAD_REQUEST: {"description": "PEM inválido ou cifrado"},
        status.HTTP_413_REQUEST_ENTITY_TOO_LARGE: {"description": "Chave demasiado grande"},
        status.HTTP_422_UNPROCESSABLE_ENTITY: {"description": "Tipo de chave não suportado ou parâmetros inválidos"},
    },
)
def convert_pem_to_jwk(payload: ConvertRequest) -> Any:
    data = payload.pem.encode("utf-8")
    if len(data) > settings.MAX_KEY_BYTES:
        raise HTTPException(
            status_code=status.HTTP_413_REQUEST_ENTITY_TOO_LARGE,
            detail=f"Key is larger than {settings.MAX_KEY_BYTES} bytes.",
        )

    # Erros de conversão sobem para o handler registado em main.py
    jwk = convert_key_bytes(
        data,
        payload.key_type,
        ec_hash=payload.ec_hash,
        strict_curves=payload.strict_curves,
    )
    logger.info(f"JWK {jwk.kty} emitido via API (kid={jwk.kid}).")
    return jwk
