# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2025 Waldiez and contributors.

# pylint: disable=line-too-long
# flake8: noqa: E501

"""Argon2 crypt string format.

    $argon2id$v=19$m=<memory KiB>,t=<cost>,p=<parallelism>$<salt>$<digest>

Salt and digest are standard base64 with the padding stripped.
"""

import base64
import binascii
import re
from dataclasses import dataclass

from .errors import InvalidEncoding, InvalidParameter

CRYPT_PREFIX = "$argon2"

_CRYPT_RE = re.compile(
    r"^\$(argon2(?:id|i|d))\$v=([0-9]+)\$m=([0-9]+),t=([0-9]+),p=([0-9]+)\$([A-Za-z0-9+/]+)\$([A-Za-z0-9+/]+)$"
)
_FACTOR_RE = re.compile(r"^([0-9]+)([kMG])$")
_FACTOR_UNITS = {"k": 1, "M": 1024, "G": 1024 * 1024}


def is_crypt(value: str | bytes) -> bool:
    """Check if a value already is an argon2 crypt string.

    Parameters
    ----------
    value : str | bytes
        The value to check.

    Returns
    -------
    bool
        True if the value starts with the argon2 marker.
    """
    if isinstance(value, (bytes, bytearray)):
        return bytes(value).startswith(CRYPT_PREFIX.encode("ascii"))
    return isinstance(value, str) and value.startswith(CRYPT_PREFIX)


def factor_to_kib(factor: str) -> int:
    """Convert a memory factor like ``32M`` to KiB.

    Parameters
    ----------
    factor : str
        An integer followed by ``k``, ``M`` or ``G``.

    Returns
    -------
    int
        The memory cost in KiB.

    Raises
    ------
    InvalidParameter
        If the factor is malformed or zero.
    """
    match = _FACTOR_RE.fullmatch(factor) if isinstance(factor, str) else None
    if not match:
        raise InvalidParameter(f"invalid memory factor: {factor!r}")
    kib = int(match.group(1)) * _FACTOR_UNITS[match.group(2)]
    if kib < 1:
        raise InvalidParameter(f"invalid memory factor: {factor!r}")
    return kib


def kib_to_factor(kib: int) -> str:
    """Convert a memory cost in KiB to the largest exact factor.

    Parameters
    ----------
    kib : int
        The memory cost in KiB.

    Returns
    -------
    str
        The memory factor, e.g. ``32M`` for 32768.
    """
    for unit in ("G", "M"):
        multiplier = _FACTOR_UNITS[unit]
        if kib % multiplier == 0:
            return f"{kib // multiplier}{unit}"
    return f"{kib}k"


def b64encode_unpadded(data: bytes) -> str:
    """Base64 encode without ``=`` padding."""
    return base64.b64encode(data).decode("ascii").rstrip("=")


def b64decode_unpadded(text: str) -> bytes:
    """Decode base64 that had its ``=`` padding stripped.

    Segments with non-zero trailing bits are rejected, so that every
    accepted segment encodes back to itself.
    """
    try:
        data = base64.b64decode(text + "=" * (-len(text) % 4), validate=True)
    except binascii.Error as error:
        raise InvalidEncoding(
            "base64", f"invalid base64 segment: {error}"
        ) from error
    if b64encode_unpadded(data) != text:
        raise InvalidEncoding("base64", "non-canonical base64 segment")
    return data


@dataclass(frozen=True)
class CryptFields:
    """The parts of an argon2 crypt string."""

    variant: str
    version: int
    memory_kib: int
    cost: int
    parallelism: int
    salt: bytes
    digest: bytes

    @property
    def factor(self) -> str:
        """The memory cost as a factor string."""
        return kib_to_factor(self.memory_kib)

    @property
    def size(self) -> int:
        """The digest length in bytes."""
        return len(self.digest)


def parse_crypt(crypt: str | bytes) -> CryptFields:
    """Split an argon2 crypt string into its fields.

    Parameters
    ----------
    crypt : str | bytes
        The crypt string.

    Returns
    -------
    CryptFields
        The parsed fields.

    Raises
    ------
    InvalidEncoding
        If the value is not a well-formed argon2 crypt string.
    """
    if isinstance(crypt, (bytes, bytearray)):
        crypt = bytes(crypt).decode("latin-1")
    m = _CRYPT_RE.fullmatch(crypt) if isinstance(crypt, str) else None
    if not m:
        raise InvalidEncoding("crypt", "not a valid argon2 crypt string")
    return CryptFields(
        variant=m.group(1),
        version=int(m.group(2)),
        memory_kib=int(m.group(3)),
        cost=int(m.group(4)),
        parallelism=int(m.group(5)),
        salt=b64decode_unpadded(m.group(6)),
        digest=b64decode_unpadded(m.group(7)),
    )


def format_crypt(fields: CryptFields) -> str:
    """Build the crypt string for the given fields.

    Parameters
    ----------
    fields : CryptFields
        The crypt string fields.

    Returns
    -------
    str
        The crypt string.
    """
    return (
        f"${fields.variant}$v={fields.version}"
        f"$m={fields.memory_kib},t={fields.cost},p={fields.parallelism}"
        f"${b64encode_unpadded(fields.salt)}"
        f"${b64encode_unpadded(fields.digest)}"
    )


__all__ = [
    "CRYPT_PREFIX",
    "CryptFields",
    "is_crypt",
    "factor_to_kib",
    "kib_to_factor",
    "b64encode_unpadded",
    "b64decode_unpadded",
    "parse_crypt",
    "format_crypt",
]
