"""Configuration for the hsjwt command-line interface.

The library itself takes no configuration: every call is given its key
directly.  The command-line interface reads its shared secret and logging
settings from environment variables so that the secret never has to appear
on the command line.
"""

from __future__ import annotations

from enum import StrEnum

from pydantic import Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict
from safir.logging import LogLevel, Profile, configure_logging

from .constants import ENV_PREFIX, LOGGER_NAME

__all__ = ["Algorithm", "Config"]


class Algorithm(StrEnum):
    """Supported signing algorithms."""

    HS256 = "HS256"
    HS384 = "HS384"
    HS512 = "HS512"


class Config(BaseSettings):
    """Configuration for the command-line interface."""

    model_config = SettingsConfigDict(env_prefix=ENV_PREFIX, extra="forbid")

    secret: SecretStr | None = Field(
        None,
        title="Shared secret",
        description="Key used to sign and verify tokens",
    )

    algorithm: Algorithm = Field(
        Algorithm.HS256,
        title="Signing algorithm",
        description="Algorithm used when no algorithm is given on the command",
    )

    log_level: LogLevel = Field(
        LogLevel.INFO,
        title="Log level",
        description="Level of log messages to report",
    )

    log_profile: Profile = Field(
        Profile.development,
        title="Logging profile",
        description="Whether to log in human-readable or JSON format",
    )

    def configure_logging(self) -> None:
        """Configure logging based on the configuration."""
        configure_logging(
            name=LOGGER_NAME,
            profile=self.log_profile,
            log_level=self.log_level,
        )
