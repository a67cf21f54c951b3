"""Configuration management for jsl-lint."""
import json
from pathlib import Path

from pydantic import BaseModel, Field, field_validator

from jsl_lint.options import DEFAULT_OPTIONS
from jsl_lint.validation import validate_options

CONFIG_FILENAME = ".jsl-lint.json"


class Config(BaseModel):
    """Configuration for jsl-lint with validation."""

    executable: str | None = Field(default=None, description="Path to the jsl executable")
    config_dir: str | None = Field(
        default=None, description="Directory for temporary configuration files"
    )
    timeout_seconds: float | None = Field(
        default=None, gt=0, description="Kill the linter after this many seconds"
    )
    options: dict[str, bool] = Field(
        default_factory=dict, description="JavaScript Lint option overrides"
    )
    show_progress: bool = Field(default=True, description="Show a spinner while linting")

    @field_validator("options")
    @classmethod
    def validate_option_names(cls, v: dict[str, bool]) -> dict[str, bool]:
        """Ensure every option override names a JavaScript Lint option."""
        validate_options(v, DEFAULT_OPTIONS)
        return v

    @field_validator("executable", "config_dir")
    @classmethod
    def validate_non_empty_path(cls, v: str | None) -> str | None:
        """Ensure configured paths are not blank."""
        if v is not None and not v.strip():
            raise ValueError("paths cannot be empty strings")
        return v

    model_config = {"validate_assignment": True}  # CLI flags override loaded values


def get_default_config() -> Config:
    """Return default configuration.

    Returns:
        Config with default values
    """
    return Config(
        executable=None,
        config_dir=None,
        timeout_seconds=None,
        options={},
        show_progress=True,
    )


def load_config(config_path: Path) -> Config:
    """Load configuration from file or return defaults.

    Supports both snake_case (preferred) and camelCase keys.

    Args:
        config_path: Path to .jsl-lint.json file

    Returns:
        Config object with loaded or default values

    Raises:
        ValueError: If configuration values are invalid
    """
    if not config_path.exists():
        return get_default_config()

    with config_path.open(encoding="utf-8") as f:
        data = json.load(f)

    if not isinstance(data, dict):
        raise ValueError(f"Configuration file must contain a JSON object: {config_path}")

    defaults = get_default_config()

    config_data = {
        "executable": data.get("executable", defaults.executable),
        "config_dir": data.get("config_dir", data.get("configDir", defaults.config_dir)),
        "timeout_seconds": data.get(
            "timeout_seconds", data.get("timeoutSeconds", defaults.timeout_seconds)
        ),
        "options": data.get("options", defaults.options),
        "show_progress": data.get(
            "show_progress", data.get("showProgress", defaults.show_progress)
        ),
    }

    return Config(**config_data)
