# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2025 Waldiez and contributors.

"""Store and check passphrases using Argon2."""

from ._version import __version__
from .config import Argon2Settings
from .crypt import CryptFields, format_crypt, is_crypt, parse_crypt
from .encodings import HashSource, SaltSource, decode_hash, decode_salt
from .errors import (
    InvalidEncoding,
    InvalidParameter,
    MissingCredential,
    MissingSalt,
    PassphraseError,
    RedundantSource,
)
from .passphrase import Argon2Passphrase, PassphraseOptions
from .schemes import Argon2Scheme, CredentialScheme, Passphrase

__all__ = [
    "__version__",
    "Argon2Passphrase",
    "Argon2Scheme",
    "Argon2Settings",
    "CredentialScheme",
    "CryptFields",
    "HashSource",
    "InvalidEncoding",
    "InvalidParameter",
    "MissingCredential",
    "MissingSalt",
    "Passphrase",
    "PassphraseError",
    "PassphraseOptions",
    "RedundantSource",
    "SaltSource",
    "decode_hash",
    "decode_salt",
    "format_crypt",
    "is_crypt",
    "parse_crypt",
]
