# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2025 Waldiez and contributors.

"""Salt and hash input normalization.

Salts and stored hashes can be given raw, hex encoded or base64 encoded
(salts can also be generated). Every form is decoded to raw bytes.
"""

import base64
import binascii
import logging
import re
import uuid
from enum import Enum
from typing import Any

from .errors import InvalidEncoding

LOG = logging.getLogger(__name__)

_RAW_RE = re.compile(r"[\x00-\xff]*")
_HEX_RE = re.compile(r"(?:[0-9A-Fa-f]{2})*")


class SaltSource(str, Enum):
    """The accepted salt sources, keyed by constructor argument."""

    RAW = "salt"
    HEX = "salt_hex"
    BASE64 = "salt_base64"
    RANDOM = "salt_random"

    @property
    def encoding(self) -> str:
        """The encoding name of this source."""
        return self.name.lower()

    def decode(self, value: Any) -> bytes:
        """Decode a salt given in this source's encoding.

        Parameters
        ----------
        value : Any
            The salt value (ignored for random salts).

        Returns
        -------
        bytes
            The raw salt.
        """
        return decode_salt(self, value)


class HashSource(str, Enum):
    """The accepted stored hash sources, keyed by constructor argument."""

    RAW = "hash"
    HEX = "hash_hex"
    BASE64 = "hash_base64"

    @property
    def encoding(self) -> str:
        """The encoding name of this source."""
        return self.name.lower()

    def decode(self, value: Any) -> bytes:
        """Decode a stored hash given in this source's encoding.

        Parameters
        ----------
        value : Any
            The stored hash value.

        Returns
        -------
        bytes
            The raw crypt string bytes.
        """
        return decode_hash(self, value)


def decode_salt(source: SaltSource, value: Any) -> bytes:
    """Decode a salt to raw bytes.

    Parameters
    ----------
    source : SaltSource
        How the salt was given.
    value : Any
        The salt value.

    Returns
    -------
    bytes
        The raw salt.

    Raises
    ------
    InvalidEncoding
        If the value is not valid for the given source.
    """
    if source is SaltSource.RANDOM:
        LOG.debug("Generating a random salt")
        return str(uuid.uuid4()).encode("ascii")
    if source is SaltSource.HEX:
        return decode_hex(value, what="salt", allow_empty=False)
    if source is SaltSource.BASE64:
        return decode_base64(value, what="salt")
    return decode_raw(value, what="salt")


def decode_hash(source: HashSource, value: Any) -> bytes:
    """Decode a stored hash to raw bytes.

    Parameters
    ----------
    source : HashSource
        How the hash was given.
    value : Any
        The hash value.

    Returns
    -------
    bytes
        The raw crypt string bytes.

    Raises
    ------
    InvalidEncoding
        If the value is not valid for the given source.
    """
    if source is HashSource.HEX:
        return decode_hex(value, what="hash", allow_empty=False)
    if source is HashSource.BASE64:
        return decode_base64(value, what="hash")
    return decode_raw(value, what="hash")


def decode_raw(value: str | bytes, what: str = "value") -> bytes:
    """Validate a raw value and return it as bytes.

    Text is accepted as long as every character fits in a single byte.

    Parameters
    ----------
    value : str | bytes
        The raw value.
    what : str, optional
        What the value is, used in error messages.

    Returns
    -------
    bytes
        The value as bytes.

    Raises
    ------
    InvalidEncoding
        If the value has characters outside the single byte range.
    """
    if isinstance(value, (bytes, bytearray)):
        return bytes(value)
    if not isinstance(value, str) or not _RAW_RE.fullmatch(value):
        raise InvalidEncoding("raw", f"not a valid raw {what}")
    return value.encode("latin-1")


def decode_hex(
    value: str | bytes, what: str = "value", allow_empty: bool = True
) -> bytes:
    """Decode a string of hex digit pairs.

    Parameters
    ----------
    value : str | bytes
        The hex string.
    what : str, optional
        What the value is, used in error messages.
    allow_empty : bool, optional
        Whether an empty string is valid, by default True.

    Returns
    -------
    bytes
        The decoded bytes.

    Raises
    ------
    InvalidEncoding
        If the value has an odd length or non hex characters, or is
        empty when ``allow_empty`` is False.
    """
    text = _as_text(value, "hex", what)
    if not _HEX_RE.fullmatch(text) or (not text and not allow_empty):
        raise InvalidEncoding("hex", f"not a valid {what} hex")
    return bytes.fromhex(text)


def decode_base64(value: str | bytes, what: str = "value") -> bytes:
    """Decode standard base64, ignoring characters outside the alphabet.

    Parameters
    ----------
    value : str | bytes
        The base64 string.
    what : str, optional
        What the value is, used in error messages.

    Returns
    -------
    bytes
        The decoded bytes.

    Raises
    ------
    InvalidEncoding
        If the value cannot be decoded.
    """
    text = _as_text(value, "base64", what)
    try:
        return base64.b64decode(text.encode("ascii"))
    except (binascii.Error, UnicodeEncodeError) as error:
        raise InvalidEncoding(
            "base64", f"not a valid {what} base64: {error}"
        ) from error


def encode_hex(data: bytes) -> str:
    """Encode bytes as lowercase hex."""
    return data.hex()


def encode_base64(data: bytes) -> str:
    """Encode bytes as standard padded base64."""
    return base64.b64encode(data).decode("ascii")


def _as_text(value: str | bytes, encoding: str, what: str) -> str:
    if isinstance(value, str):
        return value
    if isinstance(value, (bytes, bytearray)):
        try:
            return bytes(value).decode("ascii")
        except UnicodeDecodeError as error:
            raise InvalidEncoding(
                encoding, f"not a valid {what} {encoding}"
            ) from error
    raise InvalidEncoding(encoding, f"not a valid {what} {encoding}")


__all__ = [
    "SaltSource",
    "HashSource",
    "decode_salt",
    "decode_hash",
    "decode_raw",
    "decode_hex",
    "decode_base64",
    "encode_hex",
    "encode_base64",
]
