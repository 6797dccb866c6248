"""
Configuration for the Intervals.icu MCP server.

Settings are read once at startup and passed explicitly to the client
and to every tool module. Nothing reads the process environment at call time.

Environment variables:
- INTERVALS_API_BASE_URL: API base URL (e.g. https://intervals.icu/api/v1)
- INTERVALS_API_KEY: Personal API key from Intervals.icu settings
- INTERVALS_ATHLETE_ID: Default athlete ID (123456 or i123456)
- DEBUG: 'true' to log every request and response
"""

import os
import re
from dataclasses import dataclass
from typing import Mapping, Optional


ATHLETE_ID_PATTERN = re.compile(r"^i?\d+$")


class ConfigError(ValueError):
    """Raised when required configuration is missing or malformed."""


@dataclass(frozen=True)
class Settings:
    """Process-wide configuration, immutable once built."""
    api_base_url: str
    api_key: str
    athlete_id: str
    debug: bool = False

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        """Build settings from environment variables.

        Args:
            environ: Mapping to read from (default: os.environ)

        Returns:
            Validated Settings instance

        Raises:
            ConfigError: If a required variable is unset or the athlete ID is malformed
        """
        env = os.environ if environ is None else environ

        base_url = env.get("INTERVALS_API_BASE_URL")
        if not base_url:
            raise ConfigError("INTERVALS_API_BASE_URL environment variable is not set")
        api_key = env.get("INTERVALS_API_KEY")
        if not api_key:
            raise ConfigError("INTERVALS_API_KEY environment variable is not set")
        athlete_id = env.get("INTERVALS_ATHLETE_ID")
        if not athlete_id:
            raise ConfigError("INTERVALS_ATHLETE_ID environment variable is not set")

        settings = cls(
            api_base_url=base_url.rstrip("/"),
            api_key=api_key,
            athlete_id=athlete_id,
            debug=env.get("DEBUG", "").lower() == "true",
        )
        settings.validate()
        return settings

    def validate(self) -> None:
        """Check the athlete ID format.

        Raises:
            ConfigError: If the athlete ID is not all digits or 'i' followed by digits
        """
        if not ATHLETE_ID_PATTERN.match(self.athlete_id):
            raise ConfigError(
                "INTERVALS_ATHLETE_ID must be all digits (e.g. 123456) "
                "or start with 'i' followed by digits (e.g. i123456)"
            )

    def resolve_athlete_id(self, athlete_id: Optional[str] = None) -> str:
        """Return the explicit athlete ID, falling back to the configured default.

        Raises:
            ValueError: If neither is available
        """
        resolved = athlete_id or self.athlete_id
        if not resolved:
            raise ValueError(
                "INTERVALS_ATHLETE_ID is not set and no athlete_id provided"
            )
        return resolved
