# tests/test_06_assembler.py
import json
from unittest.mock import patch

import pytest

from pem_jwk.core.exceptions import ExtractionException, SerializationException, UnsupportedKeyTypeException
from pem_jwk.core.keys import P256, EcPublic, RsaPrivate, RsaPublic
from pem_jwk.schemas.jwk import EcPublicJwk, RsaPrivateJwk, RsaPublicJwk
from pem_jwk.services.assembler import assemble_jwk, serialize_jwk


def test_assemble_ec_public_field_set_and_order():
    jwk = assemble_jwk(EcPublic(curve=P256, x=1, y=65537), kid="kid-ec", crv="P-256")
    assert isinstance(jwk, EcPublicJwk)
    data = json.loads(serialize_jwk(jwk))
    assert list(data) == ["x", "y", "kty", "alg", "crv", "kid"]
    # x/y usam a codificação canónica (sem padding até à largura do campo)
    assert data == {"x": "AQ", "y": "AQAB", "kty": "EC", "alg": "ES256", "crv": "P-256", "kid": "kid-ec"}


def test_assemble_ec_requires_crv():
    with pytest.raises(ExtractionException):
        assemble_jwk(EcPublic(curve=P256, x=1, y=2), kid="k")


def test_assemble_rsa_public_field_set_and_order():
    jwk = assemble_jwk(RsaPublic(n=3233, e=65537), kid="kid-rsa")
    assert isinstance(jwk, RsaPublicJwk)
    data = json.loads(serialize_jwk(jwk))
    assert list(data) == ["n", "e", "kty", "alg", "kid"]
    assert data["e"] == "AQAB"
    assert data["kty"] == "RSA"
    assert data["alg"] == "RS256"
    assert "d" not in data


def test_assemble_rsa_private_includes_d_last():
    jwk = assemble_jwk(RsaPrivate(n=3233, e=65537, d=2753), kid="kid-priv")
    assert isinstance(jwk, RsaPrivateJwk)
    data = json.loads(serialize_jwk(jwk))
    assert list(data) == ["n", "e", "kty", "alg", "kid", "d"]
    assert data["d"] == "CsE"


def test_assemble_ignores_crv_for_rsa():
    data = json.loads(serialize_jwk(assemble_jwk(RsaPublic(n=3233, e=3), kid="k", crv="P-256")))
    assert "crv" not in data


def test_assemble_optional_use_is_appended():
    data = json.loads(serialize_jwk(assemble_jwk(RsaPublic(n=3233, e=3), kid="k", key_use="sig")))
    assert list(data)[-1] == "use"
    assert data["use"] == "sig"


def test_assemble_rejects_unknown_material():
    with pytest.raises(UnsupportedKeyTypeException):
        assemble_jwk(object(), kid="k")


def test_serialize_is_pretty_printed():
    output = serialize_jwk(assemble_jwk(RsaPublic(n=3233, e=65537), kid="k"), indent=2)
    assert output.startswith("{\n  \"n\": ")


def test_serialize_failure_is_wrapped():
    jwk = assemble_jwk(RsaPublic(n=3233, e=65537), kid="k")
    with patch.object(RsaPublicJwk, "model_dump_json", side_effect=ValueError("boom")):
        with pytest.raises(SerializationException) as excinfo:
            serialize_jwk(jwk)
    assert str(excinfo.value.__cause__) == "boom"


def test_assemble_empty_use_is_omitted():
    data = json.loads(serialize_jwk(assemble_jwk(RsaPublic(n=3233, e=3), kid="k", key_use="")))
    assert "use" not in data
