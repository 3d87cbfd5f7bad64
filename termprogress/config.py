"""Configuration management for termprogress with multi-source loading."""

import logging
import os
from enum import Enum
from pathlib import Path
from typing import Any, Dict, List, Optional

import toml
from pydantic import BaseModel, Field, ValidationError, field_validator

from .errors import ConfigurationError

logger = logging.getLogger(__name__)

ENV_PREFIX = "TERMPROGRESS_"


class LogLevel(str, Enum):
    """Available logging levels."""

    DEBUG = "debug"
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"


class OutputStream(str, Enum):
    """Streams an indicator can draw on."""

    STDOUT = "stdout"
    STDERR = "stderr"


class ProgressConfig(BaseModel):
    """Display settings shared by every indicator a program creates."""

    enabled: bool = Field(default=True, description="Draw indicators at all")
    bar_width: int = Field(default=50, ge=0, description="Cells in a progress bar")
    max_width: Optional[int] = Field(
        default=None, gt=0, description="Fixed maximum line width"
    )
    detect_width: bool = Field(
        default=True, description="Query the terminal for its width"
    )
    stream: OutputStream = Field(
        default=OutputStream.STDOUT, description="Stream indicators draw on"
    )
    wheel: str = Field(default="/-\\|", description="Spinner glyph cycle")
    log_level: LogLevel = Field(default=LogLevel.WARNING, description="Logging level")

    @field_validator("wheel")
    @classmethod
    def validate_wheel(cls, v):
        """A spinner needs at least one glyph."""
        if not v:
            raise ValueError("wheel must contain at least one glyph")
        return v

    @field_validator("log_level", "stream", mode="before")
    @classmethod
    def normalize_case(cls, v):
        """Accept enum values in any case."""
        if isinstance(v, str):
            return v.strip().lower()
        return v


def get_config_paths() -> List[Path]:
    """Get configuration file paths in priority order."""
    paths = []

    # User config directory
    paths.append(Path.home() / ".termprogress" / "config.toml")

    # System config directory
    if os.name == "posix":
        paths.append(Path("/etc/termprogress/config.toml"))
    elif os.name == "nt":
        paths.append(
            Path(os.environ.get("ProgramData", "C:/ProgramData"))
            / "termprogress"
            / "config.toml"
        )

    return paths


def load_config_file(config_path: Path) -> Dict[str, Any]:
    """Load configuration from a TOML file.

    Missing files yield an empty mapping. Unreadable or malformed files
    are logged and skipped.
    """
    if not config_path.exists():
        return {}
    try:
        with open(config_path, "r", encoding="utf-8") as f:
            return toml.load(f)
    except (OSError, toml.TomlDecodeError) as e:
        logger.warning("Ignoring config file %s: %s", config_path, e)
        return {}


def load_environment_variables() -> Dict[str, Any]:
    """Load configuration from ``TERMPROGRESS_*`` environment variables."""
    config = {}

    for key, value in os.environ.items():
        if key.startswith(ENV_PREFIX):
            config_key = key[len(ENV_PREFIX) :].lower()

            # Handle boolean values
            if value.lower() in ("true", "yes", "on"):
                config[config_key] = True
            elif value.lower() in ("false", "no", "off"):
                config[config_key] = False
            else:
                # Try to convert to int, fallback to string
                try:
                    config[config_key] = int(value)
                except ValueError:
                    config[config_key] = value

    return config


def load_configuration(
    config_file: Optional[str] = None,
    quiet: bool = False,
    debug: bool = False,
) -> ProgressConfig:
    """Load configuration from multiple sources with priority handling.

    Priority order (highest to lowest):
    1. Function parameters (quiet, debug)
    2. Environment variables (TERMPROGRESS_*)
    3. Explicit config file
    4. User config file (~/.termprogress/config.toml)
    5. System config file (/etc/termprogress/config.toml)
    6. Default values

    Raises:
        ConfigurationError: If ``config_file`` was given and the merged
            settings are invalid.
    """
    merged_config: Dict[str, Any] = {}

    config_paths = get_config_paths()
    if config_file:
        config_path = Path(config_file)
        if not config_path.exists():
            raise ConfigurationError(f"Config file not found: {config_file}")
        config_paths.insert(0, config_path)

    for path in reversed(config_paths):  # Reverse to maintain priority
        merged_config.update(load_config_file(path))

    merged_config.update(load_environment_variables())

    if quiet:
        merged_config["enabled"] = False
    if debug:
        merged_config["log_level"] = LogLevel.DEBUG

    try:
        return ProgressConfig(**merged_config)
    except ValidationError as e:
        if config_file:
            raise ConfigurationError(f"Invalid configuration: {e}") from e
        logger.warning("Invalid configuration, using defaults: %s", e)
        config = ProgressConfig()
        if quiet:
            config.enabled = False
        if debug:
            config.log_level = LogLevel.DEBUG
        return config


def save_config(config: ProgressConfig, config_path: Optional[Path] = None) -> bool:
    """Save configuration to a TOML file."""
    if config_path is None:
        config_path = Path.home() / ".termprogress" / "config.toml"

    try:
        config_path.parent.mkdir(parents=True, exist_ok=True)

        config_dict = config.model_dump(mode="json", exclude_none=True)

        with open(config_path, "w", encoding="utf-8") as f:
            toml.dump(config_dict, f)

        return True

    except OSError as e:
        logger.warning("Could not save config to %s: %s", config_path, e)
        return False
