# pem_jwk/cli.py
import sys
from pathlib import Path
from typing import Optional

import click
from loguru import logger

from pem_jwk.core.config import settings
from pem_jwk.core.exceptions import ConversionException
from pem_jwk.core.keys import KeyKind
from pem_jwk.core.logging_setup import configure_logging, level_for_verbosity
from pem_jwk.core.thumbprint import HashDomain
from pem_jwk.services.converter import convert_key_file_to_json

KEY_PATH = click.Path(dir_okay=False, path_type=Path)

hash_option = click.option(
    "--hash",
    "ec_hash",
    type=click.Choice([d.value for d in HashDomain]),
    default=None,
    help="Hash do thumbprint EC (padrão: EC_THUMBPRINT_HASH).",
)
strict_option = click.option(
    "--strict-curves/--no-strict-curves",
    default=None,
    help="Falhar em curvas diferentes de P-256 em vez de crv 'Unknown'.",
)
use_option = click.option("--use", "key_use", default=None, help="Adiciona o campo 'use' (ex: sig).")


def report_error(exc: ConversionException) -> None:
    click.echo(f"Error: {exc.message}", err=True)
    for cause in exc.causes():
        click.echo(f"  caused by: {cause}", err=True)


def run_conversion(path: Path, declared: Optional[KeyKind], **options) -> None:
    ec_hash = options.pop("ec_hash", None)
    try:
        output = convert_key_file_to_json(
            path,
            declared,
            ec_hash=HashDomain(ec_hash) if ec_hash else None,
            **options,
        )
    except ConversionException as e:
        logger.debug(f"Falha na etapa '{e.stage}'.")
        report_error(e)
        sys.exit(1)

    click.echo(output)


@click.group(name="pem-to-jwk")
@click.option("-v", "--verbose", count=True, help="Mais logs no stderr (-v INFO, -vv DEBUG).")
def cli(verbose: int) -> None:
    """Converte chaves PEM/DER (EC P-256, RSA) em JWK."""
    configure_logging(level_for_verbosity(verbose, settings.LOG_LEVEL))


@cli.command()
@click.argument("key", type=KEY_PATH)
@hash_option
@strict_option
@use_option
def ec(key: Path, ec_hash, strict_curves, key_use) -> None:
    """Chave pública EC -> JWK (ES256)."""
    run_conversion(key, KeyKind.EC_PUBLIC, ec_hash=ec_hash, strict_curves=strict_curves, key_use=key_use)


@cli.command()
@click.argument("key", type=KEY_PATH)
@click.option("--private", "private", is_flag=True, help="A chave é privada (inclui 'd').")
@use_option
def rsa(key: Path, private: bool, key_use) -> None:
    """Chave RSA (pública ou privada) -> JWK (RS256)."""
    declared = KeyKind.RSA_PRIVATE if private else KeyKind.RSA_PUBLIC
    run_conversion(key, declared, key_use=key_use)


@cli.command()
@click.argument("key", type=KEY_PATH)
@hash_option
@strict_option
@use_option
def convert(key: Path, ec_hash, strict_curves, key_use) -> None:
    """Deteta o tipo da chave e converte para JWK."""
    run_conversion(key, None, ec_hash=ec_hash, strict_curves=strict_curves, key_use=key_use)


if __name__ == "__main__":
    cli()
