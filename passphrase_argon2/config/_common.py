# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2025 Waldiez and contributors.

"""Common configuration constants and functions."""

import os
from typing import Callable, Optional, TypeVar

from ..errors import InvalidParameter

ENV_PREFIX = "PASSPHRASE_ARGON2_"
T = TypeVar("T")


def get_value(
    env_key: str,
    cast: Callable[[str], T],
    fallback: T,
    skip_prefix: bool = False,
    strict: bool = False,
) -> T:
    """Get a value from env vars or fallback, with type casting.

    Parameters
    ----------
    env_key : str
        The environment variable key
    cast : Callable[[str], T]
        The casting function
    fallback : T
        The fallback value
    skip_prefix : bool, optional
        Whether to skip the prefix for the env var, by default False
    strict : bool, optional
        Whether a value that cannot be cast is an error instead of
        falling back, by default False
    Returns
    -------
    T
        The value

    Raises
    ------
    InvalidParameter
        If ``strict`` is set and the value cannot be cast.
    """
    value_str: Optional[str] = None
    env_var = f"{ENV_PREFIX}{env_key}" if not skip_prefix else env_key

    from_env = os.environ.get(env_var)
    if from_env:
        value_str = from_env.strip()

    # pylint: disable=too-many-try-statements
    if value_str:
        try:
            casted = cast(value_str)
            if cast is str and not casted:  # pragma: no cover
                return fallback
            return casted
        except (ValueError, TypeError) as error:
            if strict:
                raise InvalidParameter(
                    f"invalid value for {env_var}: {value_str!r}"
                ) from error

    return fallback
