# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2025 Waldiez and contributors.

"""Argon2 key derivation through argon2-cffi."""

import logging
from dataclasses import dataclass

from argon2 import extract_parameters
from argon2.exceptions import VerifyMismatchError
from argon2.low_level import ARGON2_VERSION, Type, hash_secret, verify_secret

from ..crypt import factor_to_kib, is_crypt

LOG = logging.getLogger(__name__)


def _to_bytes(value: str | bytes) -> bytes:
    if isinstance(value, str):
        return value.encode("utf-8")
    return bytes(value)


@dataclass(frozen=True)
class Argon2Scheme:
    """Argon2 scheme"""

    algorithm: str = "Argon2"
    variant: Type = Type.ID
    version: int = ARGON2_VERSION

    def compute_digest(
        self,
        passphrase: str | bytes,
        salt: bytes,
        cost: int,
        factor: str,
        parallelism: int,
        size: int,
    ) -> str:
        """Derive the argon2 crypt string of a passphrase.

        Parameters
        ----------
        passphrase : str | bytes
            The plain passphrase, text is encoded as UTF-8.
        salt : bytes
            The raw salt.
        cost : int
            The time cost.
        factor : str
            The memory factor, e.g. ``32M``.
        parallelism : int
            The number of lanes.
        size : int
            The digest length in bytes.

        Returns
        -------
        str
            The encoded crypt string.
        """
        memory_kib = factor_to_kib(factor)
        LOG.debug(
            "Computing argon2 digest (m=%d, t=%d, p=%d, size=%d)",
            memory_kib,
            cost,
            parallelism,
            size,
        )
        encoded = hash_secret(
            _to_bytes(passphrase),
            salt,
            time_cost=cost,
            memory_cost=memory_kib,
            parallelism=parallelism,
            hash_len=size,
            type=self.variant,
            version=self.version,
        )
        return encoded.decode("ascii")

    def verify(self, crypt: str, candidate: str | bytes) -> bool:
        """Verify a passphrase against an argon2 crypt string.

        Parameters
        ----------
        crypt : str
            The stored crypt string.
        candidate : str | bytes
            The plain passphrase to check.

        Returns
        -------
        bool
            True if the passphrase matches, False otherwise.

        Raises
        ------
        argon2.exceptions.InvalidHashError
            If the crypt string cannot be parsed.
        argon2.exceptions.VerificationError
            If argon2 fails for any reason other than a mismatch.
        """
        variant = extract_parameters(crypt).type
        try:
            return verify_secret(
                crypt.encode("ascii"), _to_bytes(candidate), variant
            )
        except VerifyMismatchError:
            return False

    def is_crypt(self, value: str | bytes) -> bool:
        """Check if a value already is an argon2 crypt string.

        Parameters
        ----------
        value : str | bytes
            The value to check.

        Returns
        -------
        bool
            True if it is, False otherwise.
        """
        return is_crypt(value)


__all__ = ["Argon2Scheme"]
