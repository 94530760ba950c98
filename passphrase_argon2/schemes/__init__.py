# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2025 Waldiez and contributors.

"""Passphrase schemes."""

from ._argon_scheme import Argon2Scheme
from .protocol import CredentialScheme, Passphrase

argon2_scheme: CredentialScheme = Argon2Scheme()

__all__ = ["argon2_scheme", "Argon2Scheme", "CredentialScheme", "Passphrase"]
