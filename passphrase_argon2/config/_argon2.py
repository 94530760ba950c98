# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2025 Waldiez and contributors.
"""Argon2 default parameters.

Environment variables (with prefix PASSPHRASE_ARGON2_)
-----------------------------------------------------
COST (int) # default: 3
FACTOR (str) # default: 32M
PARALLELISM (int) # default: 1
SIZE (int) # default: 16

A value that cannot be parsed raises InvalidParameter.
"""

from ._common import get_value

DEFAULT_COST = 3
DEFAULT_FACTOR = "32M"
DEFAULT_PARALLELISM = 1
DEFAULT_SIZE = 16


def get_default_cost() -> int:
    """Get the default time cost.

    Returns
    -------
    int
        The default time cost.
    """
    return get_value("COST", int, DEFAULT_COST, strict=True)


def get_default_factor() -> str:
    """Get the default memory factor.

    Returns
    -------
    str
        The default memory factor.
    """
    return get_value("FACTOR", str, DEFAULT_FACTOR, strict=True)


def get_default_parallelism() -> int:
    """Get the default parallelism.

    Returns
    -------
    int
        The default parallelism.
    """
    return get_value("PARALLELISM", int, DEFAULT_PARALLELISM, strict=True)


def get_default_size() -> int:
    """Get the default digest size in bytes.

    Returns
    -------
    int
        The default digest size.
    """
    return get_value("SIZE", int, DEFAULT_SIZE, strict=True)
