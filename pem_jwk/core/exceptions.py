# pem_jwk/core/exceptions.py
from typing import Iterator, List


class ConversionException(Exception):
    """Erro base da conversão chave -> JWK. Cada subclasse identifica a etapa."""

    stage = "convert"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def causes(self) -> List[str]:
        return [describe(cause) for cause in iter_causes(self)]


class FileReadException(ConversionException):
    stage = "read"


class KeyParseException(ConversionException):
    stage = "parse"


class UnsupportedKeyTypeException(ConversionException):
    stage = "unsupported"


class ExtractionException(ConversionException):
    stage = "extract"


class SerializationException(ConversionException):
    stage = "serialize"


def iter_causes(exc: BaseException) -> Iterator[BaseException]:
    """Percorre a cadeia __cause__ / __context__ (sem incluir exc)."""
    seen = {id(exc)}
    current = exc.__cause__ or exc.__context__
    while current is not None and id(current) not in seen:
        seen.add(id(current))
        yield current
        current = current.__cause__ or current.__context__


def describe(exc: BaseException) -> str:
    text = str(exc).strip()
    if not text:
        return type(exc).__name__
    if isinstance(exc, ConversionException):
        return text
    return f"{type(exc).__name__}: {text}"
