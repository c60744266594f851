"""Configuration management for nbtohtml."""

from typing import Literal

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from nbtohtml import ConfigurationError
from nbtohtml.styles import available_styles


class NbToHtmlConfig(BaseSettings):
    """Application configuration loaded from environment variables.

    Environment variables should be prefixed with NBTOHTML_
    Example: NBTOHTML_CODE_DARK_STYLE=dracula

    Attributes:
        code_light_style: Pygments style for light mode
        code_dark_style: Pygments style for dark mode
        include_code_css: Prepend syntax highlighting CSS to the output
        include_notebook_css: Prepend notebook layout CSS to the output
        highlight_css_class: CSS class of highlighted code blocks
        strict: Fail on unrecognized cell and output types
        log_level: Logging level for diagnostics
    """

    # Style Configuration
    code_light_style: str = Field(
        default="default",
        description="Pygments style for syntax highlighting in light mode",
    )
    code_dark_style: str = Field(
        default="monokai",
        description="Pygments style for syntax highlighting in dark mode",
    )
    include_code_css: bool = Field(
        default=False,
        description="Include syntax highlighting styles in the HTML",
    )
    include_notebook_css: bool = Field(
        default=False,
        description="Include notebook layout styles in the HTML",
    )
    highlight_css_class: str = Field(
        default="highlight",
        pattern=r"^[A-Za-z_][A-Za-z0-9_-]*$",
        description="CSS class of highlighted code blocks",
    )

    # Conversion Configuration
    strict: bool = Field(
        default=False,
        description="Treat unrecognized cell and output types as errors",
    )
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="WARNING",
        description="Logging level",
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="NBTOHTML_",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("code_light_style", "code_dark_style")
    @classmethod
    def validate_style(cls, v: str) -> str:
        """Validate that the Pygments style is installed."""
        if v not in available_styles():
            raise ValueError(f"Unknown Pygments style: {v}")
        return v

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        """Accept log levels in any case."""
        return v.upper() if isinstance(v, str) else v


# Global config instance (lazy-loaded)
_config: NbToHtmlConfig | None = None


def get_config() -> NbToHtmlConfig:
    """Get or create the global configuration instance.

    Returns:
        NbToHtmlConfig: The configuration object

    Raises:
        ConfigurationError: If an environment variable holds an invalid value
    """
    global _config
    if _config is None:
        try:
            _config = NbToHtmlConfig()
        except ValidationError as e:
            raise ConfigurationError(f"Invalid configuration: {e}") from e
    return _config


def reset_config() -> None:
    """Reset the global configuration (useful for testing)."""
    global _config
    _config = None
