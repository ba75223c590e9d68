"""Configuration for one merge invocation."""

import os
from collections.abc import Mapping
from pathlib import Path

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from wms_themes.core.config import PUBLIC_URL_ENV


class MergeConfig(BaseModel):
    """Arguments and environment settings of a single merge run."""

    model_config = ConfigDict(frozen=True)

    capabilities_url: str
    theme_key: str
    themes_template: Path
    themes_config_template: Path
    themes_output: Path
    themes_config_output: Path
    public_url: str | None = None

    @field_validator("capabilities_url")
    @classmethod
    def _check_capabilities_url(cls, value: str) -> str:
        if not value.lower().startswith(("http://", "https://")):
            raise ValueError(f"Capabilities URL must use http or https: {value}")
        return value

    @field_validator("theme_key")
    @classmethod
    def _check_theme_key(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("Theme key must not be empty")
        return value

    @field_validator("public_url")
    @classmethod
    def _blank_public_url(cls, value: str | None) -> str | None:
        # An exported but empty variable means no override
        if value is not None and not value.strip():
            return None
        return value

    @classmethod
    def from_sources(cls, args, environ: Mapping[str, str] | None = None) -> "MergeConfig":
        """
        Assemble the configuration from parsed arguments and the environment.

        The environment is only consulted for the public URL override.

        Args:
            args: argparse namespace with the six positional arguments
            environ: Environment mapping (defaults to os.environ)

        Returns:
            MergeConfig instance

        Raises:
            ValueError: If the configuration is invalid
        """
        if environ is None:
            environ = os.environ

        try:
            return cls(
                capabilities_url=args.capabilities_url,
                theme_key=args.theme_key,
                themes_template=args.themes_template,
                themes_config_template=args.themes_config_template,
                themes_output=args.themes_output,
                themes_config_output=args.themes_config_output,
                public_url=environ.get(PUBLIC_URL_ENV),
            )
        except ValidationError as e:
            # Convert Pydantic errors to ValueError for consistency
            raise ValueError(f"Configuration validation failed: {e.errors()[0]['msg']}") from e
