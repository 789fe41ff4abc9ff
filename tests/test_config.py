import json

from pytest import raises

from sumcheckpoly.config import CONFIG_ENV_VAR, FieldConfig, Moduli, load_config
from sumcheckpoly.exceptions import ConfigurationError
from sumcheckpoly.field import GF


def test_default():
    config = FieldConfig.default()
    assert config.modulus == Moduli.BN254
    assert config.field() is GF(Moduli.BN254)


def test_from_json_curve():
    config = FieldConfig.from_json({"curve": "BLS12_381"})
    assert config.modulus == Moduli.BLS12_381


def test_from_json_modulus():
    assert FieldConfig.from_json({"modulus": 17}).field() is GF(17)
    assert FieldConfig.from_json({}).modulus == Moduli.BN254


def test_from_json_invalid():
    for bad in [
        {"curve": "secp256k1"},
        {"modulus": "17"},
        {"modulus": 1},
        {"curve": "bn254", "modulus": 17},
    ]:
        with raises(ConfigurationError):
            FieldConfig.from_json(bad)


def test_non_prime_modulus():
    with raises(ConfigurationError):
        FieldConfig.from_json({"modulus": 21}).field()


def test_load_config(tmp_path, monkeypatch):
    monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)
    assert load_config().modulus == Moduli.BN254

    path = tmp_path / "config.json"
    path.write_text(json.dumps({"modulus": 101}))
    monkeypatch.setenv(CONFIG_ENV_VAR, str(path))
    assert load_config().field() is GF(101)


def test_load_config_bad_file(tmp_path, monkeypatch):
    path = tmp_path / "config.json"
    path.write_text("not json")
    monkeypatch.setenv(CONFIG_ENV_VAR, str(path))
    with raises(ConfigurationError):
        load_config()

    path.write_text("[1, 2]")
    with raises(ConfigurationError):
        load_config()
