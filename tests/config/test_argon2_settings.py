# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2025 Waldiez and contributors.

"""Test passphrase_argon2.config.settings."""
# pylint: disable=missing-return-doc,missing-param-doc

import os

import pytest

from passphrase_argon2.config import ENV_PREFIX, Argon2Settings
from passphrase_argon2.errors import InvalidParameter


def test_load_defaults() -> None:
    """Test loading the settings with no environment variables."""
    settings = Argon2Settings.load()

    assert settings.cost == 3
    assert settings.factor == "32M"
    assert settings.parallelism == 1
    assert settings.size == 16


def test_load_from_env() -> None:
    """Test loading the settings from environment variables."""
    os.environ[f"{ENV_PREFIX}COST"] = "2"
    os.environ[f"{ENV_PREFIX}FACTOR"] = "1G"
    os.environ[f"{ENV_PREFIX}PARALLELISM"] = "4"
    os.environ[f"{ENV_PREFIX}SIZE"] = "32"

    settings = Argon2Settings.load()

    assert settings.cost == 2
    assert settings.factor == "1G"
    assert settings.parallelism == 4
    assert settings.size == 32


def test_load_ignores_empty_env() -> None:
    """Test that empty environment variables are ignored."""
    os.environ[f"{ENV_PREFIX}FACTOR"] = ""

    assert Argon2Settings.load().factor == "32M"


@pytest.mark.parametrize(
    "key, value",
    [
        ("COST", "0"),
        ("COST", "many"),
        ("FACTOR", "32"),
        ("PARALLELISM", "-1"),
        ("SIZE", "2"),
    ],
)
def test_load_invalid_env(key: str, value: str) -> None:
    """Test that invalid environment variables are reported."""
    os.environ[f"{ENV_PREFIX}{key}"] = value

    with pytest.raises(InvalidParameter):
        Argon2Settings.load()


def test_explicit_values() -> None:
    """Test building the settings with explicit values."""
    settings = Argon2Settings(cost=1, factor="64k", parallelism=1, size=16)

    assert settings.factor == "64k"
    assert settings.cost == 1
