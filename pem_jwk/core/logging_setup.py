# pem_jwk/core/logging_setup.py
import click
from loguru import logger

LOG_FORMAT = "<level>{level: <8}</level> | {message}"
VERBOSITY_LEVELS = {0: None, 1: "INFO"}


def level_for_verbosity(verbose: int, default: str) -> str:
    if verbose >= 2:
        return "DEBUG"
    return VERBOSITY_LEVELS.get(verbose) or default


def _stderr_sink(message) -> None:
    # click.echo resolve o stderr atual em cada chamada (CliRunner incluído)
    click.echo(message, err=True, nl=False)


def configure_logging(level: str = "WARNING") -> int:
    """Substitui o sink padrão do loguru; stdout fica reservado ao JSON."""
    logger.remove()
    return logger.add(_stderr_sink, level=level.upper(), format=LOG_FORMAT, colorize=False)
