"""Configuration for the linter.

Supports explicit instantiation and environment variable fallback, in the
same layered manner as other service configurations:
1. Explicit properties (highest priority)
2. Environment variables (fallback)
3. Defaults (lowest priority)
"""

from __future__ import annotations

import os
import re
from typing import Any, Self

from pydantic import BaseModel, ConfigDict, Field, field_validator

LOCALE_ENV_VAR = "TYPOLINT_LOCALE"
DEFAULT_LOCALE = "en"

_REGION_SEPARATOR = re.compile(r"[-_]")


class LinterConfiguration(BaseModel):
    """Validated linter configuration.

    Attributes:
        locale: Language code whose typographic conventions are enforced

    Example:
        ```python
        config = LinterConfiguration(locale="fr_FR")
        assert config.locale == "fr"

        # Zero-config (reads TYPOLINT_LOCALE, defaults to "en")
        config = LinterConfiguration.from_properties({})
        ```

    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    locale: str = Field(
        default=DEFAULT_LOCALE,
        min_length=1,
        description="Locale code, e.g. 'en' or 'fr'",
    )

    @field_validator("locale")
    @classmethod
    def normalise_locale(cls, v: str) -> str:
        """Normalise a locale tag to its lowercase language code.

        Args:
            v: Raw locale value such as "FR", "fr_FR" or "fr-CA"

        Returns:
            The language part, lowercased (e.g. "fr")

        Raises:
            ValueError: If no language code remains after normalisation

        """
        language = _REGION_SEPARATOR.split(v.strip(), maxsplit=1)[0].lower()
        if not language:
            raise ValueError(f"Locale must contain a language code, got: {v!r}")
        return language

    @classmethod
    def from_properties(cls, properties: dict[str, Any]) -> Self:
        """Create configuration from properties with environment fallback.

        Environment variables used:
        - TYPOLINT_LOCALE: Locale code (default: "en")

        Args:
            properties: Configuration properties dictionary

        Returns:
            Validated configuration instance

        Raises:
            ValidationError: If configuration is invalid

        """
        config_data = properties.copy()

        if "locale" not in config_data:
            config_data["locale"] = os.getenv(LOCALE_ENV_VAR, DEFAULT_LOCALE)

        return cls.model_validate(config_data)
