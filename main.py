# main.py
from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from loguru import logger

from pem_jwk.api.endpoints import jwk
from pem_jwk.core.config import settings
from pem_jwk.core.exceptions import (
    ConversionException,
    ExtractionException,
    KeyParseException,
    UnsupportedKeyTypeException,
)

# --- Mapeamento etapa -> status HTTP ---
ERROR_STATUS = {
    KeyParseException: status.HTTP_400_BAD_REQUEST,
    UnsupportedKeyTypeException: status.HTTP_422_UNPROCESSABLE_ENTITY,
    ExtractionException: status.HTTP_422_UNPROCESSABLE_ENTITY,
}

app = FastAPI(
    title="PEM to JWK",
    description="Conversão de chaves EC P-256 / RSA em JSON Web Keys",
    version="1.0.0",
)


@app.exception_handler(ConversionException)
async def conversion_exception_handler(request: Request, exc: ConversionException):
    status_code = ERROR_STATUS.get(type(exc), status.HTTP_500_INTERNAL_SERVER_ERROR)
    logger.warning(f"Conversão falhou na etapa '{exc.stage}': {exc.message}")
    return JSONResponse(
        status_code=status_code,
        content={"detail": exc.message, "error": exc.stage, "causes": exc.causes()},
    )


app.include_router(
    jwk.router,
    prefix=f"{settings.API_PREFIX}/jwk",
    tags=["JWK"],
)


@app.get("/")
def read_root():
    return {"message": "PEM to JWK API is running!"}
