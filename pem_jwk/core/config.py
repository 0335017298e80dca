# pem_jwk/core/config.py
from pathlib import Path
from typing import Literal

from loguru import logger
from pydantic_settings import BaseSettings, SettingsConfigDict

BASE_DIR = Path(__file__).resolve().parent.parent.parent
ENV_FILE_PATH = BASE_DIR / ".env"


class Settings(BaseSettings):

    # Thumbprint EC: "sha1" (kid curto, igual à ferramenta antiga) ou "sha256"
    EC_THUMBPRINT_HASH: Literal["sha1", "sha256"] = "sha1"

    # Curvas diferentes de P-256: False -> crv "Unknown", True -> erro
    STRICT_CURVES: bool = False

    # Campo "use" opcional no JWK
    INCLUDE_KEY_USE: bool = False
    KEY_USE: str = "sig"

    # Saída
    JSON_INDENT: int = 2

    # Limite de tamanho do ficheiro / corpo PEM
    MAX_KEY_BYTES: int = 64 * 1024

    # Logging (CLI)
    LOG_LEVEL: str = "WARNING"

    # API HTTP
    API_PREFIX: str = "/api/v1"

    model_config = SettingsConfigDict(
        case_sensitive=True,
        env_file=ENV_FILE_PATH,
        env_file_encoding="utf-8",
        extra="ignore",
    )


try:
    settings = Settings()

    # Verificação adicional: com limite <= 0 nenhuma chave será aceite
    if settings.MAX_KEY_BYTES <= 0:
        logger.warning(
            f"MAX_KEY_BYTES ({settings.MAX_KEY_BYTES}) não é positivo. "
            f"Todas as chaves serão rejeitadas; defina MAX_KEY_BYTES no .env."
        )

except Exception as e:
    logger.error(f"FATAL: Erro ao carregar 'settings' a partir do .env em {ENV_FILE_PATH}: {e}")
    raise e
