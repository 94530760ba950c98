# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2025 Waldiez and contributors.
# pylint: disable=missing-return-doc,missing-yield-doc,missing-param-doc
"""Shared fixtures for tests."""

import os
from collections.abc import Generator

import pytest

from passphrase_argon2.config import ENV_PREFIX, Argon2Settings

# the vector from the README: salt "abcdefg123", passphrase "abc", defaults
KNOWN_SALT = "abcdefg123"
KNOWN_PASSPHRASE = "abc"  # nosemgrep # nosec
KNOWN_CRYPT = (
    "$argon2id$v=19$m=32768,t=3,p=1$YWJjZGVmZzEyMw$FmPc1Fhq0MKi1wcuQ1v4ow"
)


@pytest.fixture(autouse=True, name="clear_env")
def clear_env_fixture() -> Generator[None, None, None]:
    """Clear the argon2 environment variables around each test."""
    original_envs = {
        key: os.environ.pop(key)
        for key in list(os.environ)
        if key.startswith(ENV_PREFIX)
    }
    yield
    for key in list(os.environ):
        if key.startswith(ENV_PREFIX):
            os.environ.pop(key, None)
    os.environ.update(original_envs)


@pytest.fixture(name="light_settings")
def light_settings_fixture() -> Argon2Settings:
    """Cheap argon2 parameters for tests that hash a lot."""
    return Argon2Settings(cost=1, factor="64k", parallelism=1, size=16)


@pytest.fixture(name="known_crypt")
def known_crypt_fixture() -> str:
    """A crypt string made with the default parameters."""
    return KNOWN_CRYPT
