# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2025 Waldiez and contributors.

# pylint: disable=too-many-instance-attributes,redefined-builtin

"""Store and check a passphrase using Argon2.

Example
-------
>>> ppr = Argon2Passphrase(salt="abcdefg123", passphrase="abc")
>>> ppr.as_crypt()
'$argon2id$v=19$m=32768,t=3,p=1$YWJjZGVmZzEyMw$FmPc1Fhq0MKi1wcuQ1v4ow'
>>> ppr.match("abc")
True

The term *hash* is used loosely: ``hash``, ``hash_hex`` and ``hash_base64``
return the whole crypt string, exactly like ``as_crypt``, ``as_hex`` and
``as_base64``.
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Mapping, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, ValidationError
from typing_extensions import Annotated

from .config import FACTOR_PATTERN, Argon2Settings
from .crypt import CryptFields, factor_to_kib, is_crypt, parse_crypt
from .encodings import HashSource, SaltSource, encode_base64, encode_hex
from .errors import (
    InvalidEncoding,
    InvalidParameter,
    MissingCredential,
    MissingSalt,
    RedundantSource,
)
from .schemes import CredentialScheme, argon2_scheme

LOG = logging.getLogger(__name__)

StrOrBytes = str | bytes

STORED_SOURCES: Tuple[Tuple[str, HashSource], ...] = (
    ("stored_hash", HashSource.RAW),
    ("stored_base64", HashSource.BASE64),
    ("stored_hex", HashSource.HEX),
)
PARAMETER_KEYS = {"cost", "factor", "parallelism", "size"}


class PassphraseOptions(BaseModel):
    """The arguments accepted when building a passphrase."""

    # salt sources, exactly one
    salt: Optional[StrOrBytes] = None
    salt_hex: Optional[StrOrBytes] = None
    salt_base64: Optional[StrOrBytes] = None
    salt_random: Any = None
    # hash sources, exactly one
    passphrase: Optional[StrOrBytes] = None
    hash: Optional[StrOrBytes] = None
    hash_hex: Optional[StrOrBytes] = None
    hash_base64: Optional[StrOrBytes] = None
    # stored hash, replaces the passphrase
    stored_hash: Optional[StrOrBytes] = None
    stored_base64: Optional[StrOrBytes] = None
    stored_hex: Optional[StrOrBytes] = None
    # argon2 parameters
    cost: Optional[Annotated[int, Field(ge=1)]] = None
    factor: Optional[Annotated[str, Field(pattern=FACTOR_PATTERN)]] = None
    parallelism: Optional[Annotated[int, Field(ge=1, le=0xFFFFFF)]] = None
    size: Optional[Annotated[int, Field(ge=4)]] = None

    model_config = ConfigDict(extra="forbid")

    @classmethod
    def parse(cls, values: Mapping[str, Any]) -> "PassphraseOptions":
        """Validate the given arguments.

        Parameters
        ----------
        values : Mapping[str, Any]
            The constructor arguments.

        Returns
        -------
        PassphraseOptions
            The validated options.

        Raises
        ------
        InvalidParameter
            If an argument is unknown or has an invalid value.
        """
        try:
            return cls.model_validate(dict(values))
        except ValidationError as error:
            raise InvalidParameter(
                f"invalid passphrase arguments: {error}"
            ) from error


@dataclass(frozen=True)
class ResolvedSources:
    """The salt and hash sources of a passphrase, decoded."""

    salt: bytes
    passphrase: Optional[StrOrBytes]
    crypt: Optional[str]


def resolve_sources(options: PassphraseOptions) -> ResolvedSources:
    """Pick and decode the salt and hash sources of the options.

    Every exclusivity rule is checked before anything is decoded.

    Parameters
    ----------
    options : PassphraseOptions
        The validated options.

    Returns
    -------
    ResolvedSources
        The raw salt plus either the passphrase or the stored crypt string.

    Raises
    ------
    RedundantSource
        If more than one salt or hash source is given.
    MissingSalt
        If no salt source is given.
    MissingCredential
        If neither a passphrase nor a hash source is given.
    """
    salt_sources = [
        source
        for source in SaltSource
        if getattr(options, source.value) is not None
    ]
    if len(salt_sources) > 1:
        raise RedundantSource("salt", [source.value for source in salt_sources])
    if not salt_sources:
        raise MissingSalt()

    passphrase = options.passphrase
    hashes: List[Tuple[str, HashSource, Any]] = [
        (source.value, source, getattr(options, source.value))
        for source in HashSource
        if getattr(options, source.value) is not None
    ]
    stored = [
        (key, source, getattr(options, key))
        for key, source in STORED_SOURCES
        if getattr(options, key) is not None
    ]
    if stored:
        # a stored hash wins over the passphrase
        if len(stored) > 1 or hashes:
            raise RedundantSource(
                "hash", [key for key, _, _ in stored + hashes]
            )
        hashes = stored
        passphrase = None
    if len(hashes) > 1 or (hashes and passphrase is not None):
        keys = [key for key, _, _ in hashes]
        if passphrase is not None:
            keys.insert(0, "passphrase")
        raise RedundantSource("hash", keys)
    if passphrase is None and not hashes:
        raise MissingCredential()

    salt_source = salt_sources[0]
    LOG.debug("Reading salt from %s", salt_source.value)
    salt = salt_source.decode(getattr(options, salt_source.value))
    crypt: Optional[str] = None
    if hashes:
        key, hash_source, value = hashes[0]
        LOG.debug("Reading crypt string from %s", key)
        crypt = hash_source.decode(value).decode("latin-1")
    return ResolvedSources(salt=salt, passphrase=passphrase, crypt=crypt)


class Argon2Passphrase:
    """Passphrase stored as an Argon2 crypt string.

    Accepts the arguments of ``PassphraseOptions``, either as a mapping or
    as keyword arguments:

    - one salt source: ``salt``, ``salt_hex``, ``salt_base64`` or
      ``salt_random``
    - one hash source: ``passphrase``, ``hash``, ``hash_hex`` or
      ``hash_base64``; ``stored_hash``, ``stored_base64`` and ``stored_hex``
      map to the matching hash source and drop any passphrase
    - optional ``cost`` (default 3), ``factor`` (default ``32M``),
      ``parallelism`` (default 1) and ``size`` (default 16); the defaults
      can be changed with ``PASSPHRASE_ARGON2_*`` environment variables.
    """

    def __init__(
        self,
        options: Optional[Mapping[str, Any]] = None,
        /,
        *,
        scheme: Optional[CredentialScheme] = None,
        settings: Optional[Argon2Settings] = None,
        **kwargs: Any,
    ) -> None:
        """Build the passphrase.

        Parameters
        ----------
        options : Optional[Mapping[str, Any]]
            The arguments as a mapping, merged with ``kwargs``.
        scheme : Optional[CredentialScheme]
            The key derivation to use, argon2-cffi by default.
        settings : Optional[Argon2Settings]
            The default parameters, loaded from the environment if not given.
        **kwargs : Any
            The arguments as keywords.

        Raises
        ------
        RedundantSource
            If more than one salt or hash source is given.
        MissingSalt
            If no salt source is given.
        MissingCredential
            If neither a passphrase nor a hash source is given.
        InvalidEncoding
            If a salt or hash value is not valid for its encoding.
        InvalidParameter
            If an argument is unknown or a parameter is invalid.
        """
        parsed = PassphraseOptions.parse({**(options or {}), **kwargs})
        resolved = resolve_sources(parsed)
        self._scheme = scheme if scheme is not None else argon2_scheme
        self._salt = resolved.salt
        params = parsed.model_dump(include=PARAMETER_KEYS, exclude_none=True)
        if len(params) < len(PARAMETER_KEYS):
            # the environment is only read for missing parameters
            defaults = (
                settings if settings is not None else Argon2Settings.load()
            )
            params = {**defaults.model_dump(), **params}
        self.cost: int = params["cost"]
        self.factor: str = params["factor"]
        self.parallelism: int = params["parallelism"]
        self.size: int = params["size"]
        # fail early on a factor argon2 cannot use
        factor_to_kib(self.factor)
        if resolved.passphrase is not None:
            self._crypt = self._hash_of(resolved.passphrase)
        else:
            self._crypt = resolved.crypt or ""

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(cost={self.cost}, "
            f"factor={self.factor!r}, parallelism={self.parallelism}, "
            f"size={self.size})"
        )

    def _hash_of(self, value: StrOrBytes) -> str:
        if self._scheme.is_crypt(value):
            LOG.debug("Value already is a crypt string, not hashing it")
            if isinstance(value, str):
                return value
            return bytes(value).decode("latin-1")
        return self._scheme.compute_digest(
            value,
            self._salt,
            self.cost,
            self.factor,
            self.parallelism,
            self.size,
        )

    @property
    def algorithm(self) -> str:
        """The algorithm, always ``Argon2``."""
        return "Argon2"

    def salt(self, value: Optional[StrOrBytes] = None) -> bytes:
        """Get the raw salt, replacing it first if a value is given.

        Parameters
        ----------
        value : Optional[StrOrBytes]
            A new raw salt.

        Returns
        -------
        bytes
            The raw salt.

        Raises
        ------
        InvalidEncoding
            If the new salt has characters outside the single byte range.
        """
        if value is not None:
            self._salt = SaltSource.RAW.decode(value)
        return self._salt

    def salt_hex(self, value: Optional[StrOrBytes] = None) -> str:
        """Get the salt as hex, replacing it first if a value is given.

        Parameters
        ----------
        value : Optional[StrOrBytes]
            A new hex encoded salt.

        Returns
        -------
        str
            The salt as hex digits.

        Raises
        ------
        InvalidEncoding
            If the new salt is not valid hex.
        """
        if value is not None:
            self._salt = SaltSource.HEX.decode(value)
        return encode_hex(self._salt)

    def salt_base64(self, value: Optional[StrOrBytes] = None) -> str:
        """Get the salt as base64, replacing it first if a value is given.

        Parameters
        ----------
        value : Optional[StrOrBytes]
            A new base64 encoded salt.

        Returns
        -------
        str
            The salt as base64.

        Raises
        ------
        InvalidEncoding
            If the new salt cannot be decoded.
        """
        if value is not None:
            self._salt = SaltSource.BASE64.decode(value)
        return encode_base64(self._salt)

    def as_crypt(self, value: Optional[StrOrBytes] = None) -> str:
        """Get the crypt string.

        If a value is given, it replaces the crypt string first: a plain
        passphrase is hashed with the current salt and parameters, a value
        that already is a crypt string is stored as is.

        Parameters
        ----------
        value : Optional[StrOrBytes]
            A new passphrase or crypt string.

        Returns
        -------
        str
            The crypt string.
        """
        if value is not None:
            self._crypt = self._hash_of(value)
        return self._crypt

    def as_hex(self, value: Optional[StrOrBytes] = None) -> str:
        """Get the crypt string as hex (see ``as_crypt``)."""
        return encode_hex(self.as_crypt(value).encode("latin-1"))

    def as_base64(self, value: Optional[StrOrBytes] = None) -> str:
        """Get the crypt string as base64 (see ``as_crypt``)."""
        return encode_base64(self.as_crypt(value).encode("latin-1"))

    def hash(self, value: Optional[StrOrBytes] = None) -> str:
        """Alias of ``as_crypt``."""
        return self.as_crypt(value)

    def hash_hex(self, value: Optional[StrOrBytes] = None) -> str:
        """Alias of ``as_hex``."""
        return self.as_hex(value)

    def hash_base64(self, value: Optional[StrOrBytes] = None) -> str:
        """Alias of ``as_base64``."""
        return self.as_base64(value)

    def match(self, passphrase: StrOrBytes) -> bool:
        """Check whether a passphrase matches the crypt string.

        Parameters
        ----------
        passphrase : StrOrBytes
            The plain passphrase to check.

        Returns
        -------
        bool
            True if it matches, False otherwise.
        """
        return self._scheme.verify(self._crypt, passphrase)

    @property
    def parameters(self) -> CryptFields:
        """The fields of the stored crypt string.

        Raises
        ------
        InvalidEncoding
            If the stored value is not a well-formed crypt string.
        """
        return parse_crypt(self._crypt)

    def needs_rehash(self, settings: Optional[Argon2Settings] = None) -> bool:
        """Check if the crypt string was made with other parameters.

        Parameters
        ----------
        settings : Optional[Argon2Settings]
            The wanted parameters, loaded from the environment if not given.

        Returns
        -------
        bool
            True if the cost, memory, parallelism or size of the stored
            crypt string differ from the wanted ones, or if it cannot
            be parsed.

        Raises
        ------
        InvalidParameter
            If the settings are loaded and an environment variable holds
            an invalid value.
        """
        wanted = settings if settings is not None else Argon2Settings.load()
        try:
            fields = self.parameters
        except InvalidEncoding:
            return True
        return (
            (fields.cost != wanted.cost)
            or (fields.memory_kib != factor_to_kib(wanted.factor))
            or (fields.parallelism != wanted.parallelism)
            or (fields.size != wanted.size)
        )

    @classmethod
    def from_crypt_string(
        cls,
        crypt: StrOrBytes,
        *,
        scheme: Optional[CredentialScheme] = None,
    ) -> "Argon2Passphrase":
        """Rebuild a passphrase from a stored crypt string.

        The salt and parameters are read from the crypt string, which is
        kept as is.

        Parameters
        ----------
        crypt : StrOrBytes
            The stored crypt string.
        scheme : Optional[CredentialScheme]
            The key derivation to use.

        Returns
        -------
        Argon2Passphrase
            The passphrase.

        Raises
        ------
        InvalidEncoding
            If the value is not a well-formed crypt string.
        """
        fields = parse_crypt(crypt)
        return cls(
            salt=fields.salt,
            hash=crypt,
            cost=fields.cost,
            factor=fields.factor,
            parallelism=fields.parallelism,
            size=fields.size,
            scheme=scheme,
        )

    @classmethod
    def from_crypt(
        cls,
        passphrase: StrOrBytes,
        info: Optional[Mapping[str, Any]] = None,
        **kwargs: Any,
    ) -> "Argon2Passphrase":
        """Build a passphrase from the given info and passphrase.

        With no info and a crypt string as passphrase, this is
        ``from_crypt_string``.

        Parameters
        ----------
        passphrase : StrOrBytes
            The plain passphrase or crypt string.
        info : Optional[Mapping[str, Any]]
            The other constructor arguments.
        **kwargs : Any
            Passed to the constructor (``scheme``, ``settings``).

        Returns
        -------
        Argon2Passphrase
            The passphrase.
        """
        if not info and is_crypt(passphrase):
            return cls.from_crypt_string(
                passphrase, scheme=kwargs.get("scheme")
            )
        merged: Dict[str, Any] = {**(info or {}), "passphrase": passphrase}
        return cls(merged, **kwargs)


__all__ = [
    "Argon2Passphrase",
    "PassphraseOptions",
    "ResolvedSources",
    "resolve_sources",
]
