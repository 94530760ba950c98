# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2025 Waldiez and contributors.
"""Configuration module for argon2 passphrases."""

from ._argon2 import (
    DEFAULT_COST,
    DEFAULT_FACTOR,
    DEFAULT_PARALLELISM,
    DEFAULT_SIZE,
)
from ._common import ENV_PREFIX
from .settings import FACTOR_PATTERN, Argon2Settings

__all__ = [
    "Argon2Settings",
    "ENV_PREFIX",
    "FACTOR_PATTERN",
    "DEFAULT_COST",
    "DEFAULT_FACTOR",
    "DEFAULT_PARALLELISM",
    "DEFAULT_SIZE",
]
