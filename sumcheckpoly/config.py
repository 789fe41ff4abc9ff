"""
Module for ``sumcheckpoly``'s configuration.

This module can be used to:

* define default configuration settings
* load a configuration
* validate a configuration

A configuration file is a JSON object naming the scalar field, either by
curve::

    {"curve": "bls12_381"}

or by modulus::

    {"modulus": 101}

``load_config`` reads the file named by ``SUMCHECKPOLY_CONFIG`` if it is set.
"""
import json
import logging
import os

from .exceptions import ConfigurationError
from .field import GF

CONFIG_ENV_VAR = "SUMCHECKPOLY_CONFIG"


class Moduli(object):
    BN254 = 21888242871839275222246405745257275088548364400416034343698204186575808495617
    BLS12_381 = (
        52435875175126190479447740508185965837690552500527637822603658699938581184513
    )


CURVES = {"bn254": Moduli.BN254, "bls12_381": Moduli.BLS12_381}


class FieldConfig(object):
    def __init__(self, modulus):
        self.modulus = modulus

    @classmethod
    def default(cls):
        return cls(modulus=Moduli.BN254)

    @classmethod
    def from_json(cls, json_config):
        res = cls.default()
        if "curve" in json_config and "modulus" in json_config:
            raise ConfigurationError("set either curve or modulus, not both")

        if "curve" in json_config:
            curve = str(json_config["curve"]).lower()
            if curve not in CURVES:
                raise ConfigurationError(f"curve must be in {sorted(CURVES)}")
            res.modulus = CURVES[curve]

        if "modulus" in json_config:
            modulus = json_config["modulus"]
            if type(modulus) is not int or modulus < 2:
                raise ConfigurationError(f"modulus must be an integer > 1: {modulus!r}")
            res.modulus = modulus

        return res

    @classmethod
    def from_file(cls, path):
        try:
            with open(path, "r") as f:
                json_config = json.load(f)
        except (OSError, ValueError) as e:
            raise ConfigurationError(f"cannot read config file {path}: {e}") from e
        if not isinstance(json_config, dict):
            raise ConfigurationError(f"{path} must hold a JSON object")
        return cls.from_json(json_config)

    def field(self):
        try:
            return GF(self.modulus)
        except ValueError as e:
            raise ConfigurationError(str(e)) from e


def load_config():
    path = os.environ.get(CONFIG_ENV_VAR)
    if not path:
        return FieldConfig.default()
    logging.debug("loading field config from %s", path)
    return FieldConfig.from_file(path)
