# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2025 Waldiez and contributors.

"""Errors raised while building or re-encoding a passphrase."""

from typing import Iterable


class PassphraseError(ValueError):
    """Base class for passphrase errors."""


class RedundantSource(PassphraseError):
    """More than one value was given for a mutually exclusive group."""

    def __init__(self, group: str, keys: Iterable[str]) -> None:
        self.group = group
        self.keys = tuple(keys)
        super().__init__(
            f"{group} specified redundantly - {', '.join(self.keys)}"
        )


class MissingSalt(PassphraseError):
    """No salt source was given."""

    def __init__(self) -> None:
        super().__init__("salt not specified")


class MissingCredential(PassphraseError):
    """Neither a passphrase nor a stored hash was given."""

    def __init__(self) -> None:
        super().__init__("crypt not specified")


class InvalidEncoding(PassphraseError):
    """A value does not match the encoding it was given as."""

    def __init__(self, encoding: str, message: str) -> None:
        self.encoding = encoding
        super().__init__(message)


class InvalidParameter(PassphraseError):
    """A cost, memory factor, parallelism or size value is invalid."""


__all__ = [
    "PassphraseError",
    "RedundantSource",
    "MissingSalt",
    "MissingCredential",
    "InvalidEncoding",
    "InvalidParameter",
]
