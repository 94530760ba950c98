# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2025 Waldiez and contributors.

"""Argon2 passphrase settings module."""

import logging

from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict
from typing_extensions import Annotated

from ..errors import InvalidParameter
from ._argon2 import (
    get_default_cost,
    get_default_factor,
    get_default_parallelism,
    get_default_size,
)
from ._common import ENV_PREFIX

LOG = logging.getLogger(__name__)

FACTOR_PATTERN = r"^[0-9]+[kMG]$"


class Argon2Settings(BaseSettings):
    """Default argon2 parameters."""

    cost: Annotated[int, Field(ge=1, default_factory=get_default_cost)]
    factor: Annotated[
        str, Field(pattern=FACTOR_PATTERN, default_factory=get_default_factor)
    ]
    parallelism: Annotated[
        int, Field(ge=1, le=0xFFFFFF, default_factory=get_default_parallelism)
    ]
    size: Annotated[int, Field(ge=4, default_factory=get_default_size)]

    model_config = SettingsConfigDict(
        env_prefix=ENV_PREFIX,
        env_ignore_empty=True,
        case_sensitive=False,
        extra="ignore",
    )

    @classmethod
    def load(cls) -> "Argon2Settings":
        """Load the settings from the environment.

        Returns
        -------
        Argon2Settings
            The settings instance

        Raises
        ------
        InvalidParameter
            If an environment variable holds an invalid value.
        """
        try:
            instance = cls()
        except ValidationError as error:
            raise InvalidParameter(
                f"invalid argon2 settings: {error}"
            ) from error
        LOG.debug(
            "Loaded argon2 settings (t=%d, factor=%s, p=%d, size=%d)",
            instance.cost,
            instance.factor,
            instance.parallelism,
            instance.size,
        )
        return instance
