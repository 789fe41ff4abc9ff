"""sumcheckpoly: univariate round polynomials for the sum-check protocol."""

import logging.config
from pathlib import Path

import yaml

from .__version__ import __version__  # noqa: F401
from .field import GF, GFElement  # noqa: F401
from .polynomial import compressed_polynomials_over, polynomials_over  # noqa: F401
from .transcript import Transcript  # noqa: F401


CURRENT_DIR = Path(__file__).resolve().parent

with open(CURRENT_DIR / "logging.yaml", "r") as f:
    logging_config = yaml.safe_load(f.read())
    logging.config.dictConfig(logging_config)
