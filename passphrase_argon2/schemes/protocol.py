# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2025 Waldiez and contributors.

# pylint: disable=unnecessary-ellipsis

"""Passphrase scheme protocols."""

from typing import Any, Mapping, Protocol, runtime_checkable


@runtime_checkable
class CredentialScheme(Protocol):  # pragma: no cover
    """Protocol for the key derivation behind a passphrase."""

    algorithm: str

    def compute_digest(
        self,
        passphrase: str | bytes,
        salt: bytes,
        cost: int,
        factor: str,
        parallelism: int,
        size: int,
    ) -> str:
        """Derive the crypt string of a plain passphrase.

        Parameters
        ----------
        passphrase : str | bytes
            The plain passphrase
        salt : bytes
            The raw salt
        cost : int
            The time cost
        factor : str
            The memory factor
        parallelism : int
            The number of lanes
        size : int
            The digest length in bytes
        """
        ...

    def verify(self, crypt: str, candidate: str | bytes) -> bool:
        """Check a candidate passphrase against a crypt string.

        Parameters
        ----------
        crypt : str
            The stored crypt string
        candidate : str | bytes
            The plain passphrase to check
        """
        ...

    def is_crypt(self, value: str | bytes) -> bool:
        """Check if a value already is a crypt string of this scheme.

        Parameters
        ----------
        value : str | bytes
            The value to check
        """
        ...


@runtime_checkable
class Passphrase(Protocol):  # pragma: no cover
    """Protocol for stored passphrases, whatever the scheme."""

    @property
    def algorithm(self) -> str:
        """The algorithm name."""
        ...

    def salt(self, value: str | bytes | None = None) -> bytes:
        """Get (or replace) the raw salt."""
        ...

    def salt_hex(self, value: str | bytes | None = None) -> str:
        """Get (or replace) the salt as hex."""
        ...

    def salt_base64(self, value: str | bytes | None = None) -> str:
        """Get (or replace) the salt as base64."""
        ...

    def hash(self, value: str | bytes | None = None) -> str:
        """Get (or re-derive) the stored hash."""
        ...

    def hash_hex(self, value: str | bytes | None = None) -> str:
        """Get (or re-derive) the stored hash as hex."""
        ...

    def hash_base64(self, value: str | bytes | None = None) -> str:
        """Get (or re-derive) the stored hash as base64."""
        ...

    def as_crypt(self, value: str | bytes | None = None) -> str:
        """Get (or re-derive) the crypt string."""
        ...

    def as_hex(self, value: str | bytes | None = None) -> str:
        """Get (or re-derive) the crypt string as hex."""
        ...

    def as_base64(self, value: str | bytes | None = None) -> str:
        """Get (or re-derive) the crypt string as base64."""
        ...

    def match(self, passphrase: str | bytes) -> bool:
        """Check whether a passphrase matches.

        Parameters
        ----------
        passphrase : str | bytes
            The plain passphrase to check
        """
        ...

    @classmethod
    def from_crypt(
        cls,
        passphrase: str | bytes,
        info: Mapping[str, Any] | None = None,
        **kwargs: Any,
    ) -> "Passphrase":
        """Build a passphrase from stored info and a passphrase.

        Parameters
        ----------
        passphrase : str | bytes
            The plain passphrase or crypt string
        info : Mapping[str, Any] | None
            The other constructor arguments
        **kwargs : Any
            Extra construction options
        """
        ...


__all__ = ["CredentialScheme", "Passphrase"]
