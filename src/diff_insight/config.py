"""Configuration loading and management for Diff Insight.

Configuration sources are merged in priority order:
    1. Defaults (defined in InsightSettings)
    2. Global config (~/.diff-insight.toml)
    3. Project config (./diff-insight.toml)
    4. Explicit config file
    5. Environment variables (DIFF_INSIGHT_* prefix)
    6. CLI overrides (passed as kwargs)

A config file may hold the settings at top level or under a
``[diff-insight]`` table.

Example:
    >>> settings = load_settings(theme="mono", quiet=True)
    >>> settings.theme
    'mono'
    >>> settings.verbosity
    'quiet'
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Literal, Optional, get_args, get_type_hints

from .exceptions import ConfigurationError, InvalidConfigError

Verbosity = Literal["quiet", "normal", "verbose"]
OutputFormat = Literal["text", "json", "github"]

ENV_PREFIX = "DIFF_INSIGHT_"
CONFIG_FILENAME = "diff-insight.toml"
CONFIG_TABLE = "diff-insight"


@dataclass(frozen=True)
class InsightSettings:
    """Settings for rendering insight reports.

    Detection itself has no options; these only shape output.

    Attributes:
        theme: Name of the color theme (see ``diff-insight themes``)
        color: Emit ANSI colors; False renders plain text with any theme
        output_format: One of "text", "json", "github"
        verbosity: Logging verbosity level
        log_file: Optional path that also receives log records
    """

    theme: str = "default"
    color: bool = True
    output_format: OutputFormat = "text"
    verbosity: Verbosity = "normal"
    log_file: Optional[str] = None

    def __post_init__(self) -> None:
        """Validate settings after initialization."""
        if self.output_format not in get_args(OutputFormat):
            raise ValueError(
                f"output_format must be one of {', '.join(get_args(OutputFormat))}"
            )
        if self.verbosity not in get_args(Verbosity):
            raise ValueError(f"verbosity must be one of {', '.join(get_args(Verbosity))}")
        if not self.theme:
            raise ValueError("theme must not be empty")

    @property
    def verbose(self) -> bool:
        return self.verbosity == "verbose"

    @property
    def quiet(self) -> bool:
        return self.verbosity == "quiet"


default_settings = InsightSettings()


def load_settings(config_file: Optional[Path] = None, **overrides) -> InsightSettings:
    """Load settings with auto-discovery and merging.

    Args:
        config_file: Optional explicit config file path
        **overrides: Direct overrides (typically from CLI flags). ``None``
            values are ignored so unset CLI options don't mask files.

    Returns:
        Validated InsightSettings instance

    Raises:
        ConfigurationError: If a config file is missing or unreadable
        InvalidConfigError: If a value fails validation
    """
    merged: dict = {}

    global_config = Path.home() / f".{CONFIG_FILENAME}"
    if global_config.exists():
        merged.update(_read_config(global_config, "global config"))

    project_config = Path.cwd() / CONFIG_FILENAME
    if project_config.exists():
        merged.update(_read_config(project_config, "project config"))

    if config_file is not None:
        if not config_file.exists():
            raise ConfigurationError(
                f"Config file not found: {config_file}", details={"path": str(config_file)}
            )
        merged.update(_read_config(config_file, "config file"))

    merged.update(_load_env_vars())

    # Verbosity boolean flags collapse into the verbosity field
    if overrides.pop("verbose", False):
        overrides["verbosity"] = "verbose"
    if overrides.pop("quiet", False):
        overrides["verbosity"] = "quiet"

    merged.update({k: v for k, v in overrides.items() if v is not None})

    unknown = sorted(set(merged) - set(InsightSettings.__dataclass_fields__))
    if unknown:
        raise InvalidConfigError(unknown[0], merged[unknown[0]], "unknown setting")

    try:
        return InsightSettings(**merged)
    except ValueError as e:
        key = _field_from_message(str(e))
        raise InvalidConfigError(key, merged.get(key), str(e))


def _read_config(path: Path, label: str) -> dict:
    try:
        data = _load_toml_file(path)
    except ConfigurationError:
        raise
    except Exception as e:
        raise ConfigurationError(f"Invalid {label} '{path}': {e}", details={"path": str(path)})
    section = data.get(CONFIG_TABLE)
    if isinstance(section, dict):
        return dict(section)
    return data


def _field_from_message(message: str) -> str:
    for name in InsightSettings.__dataclass_fields__:
        if message.startswith(name):
            return name
    return "settings"


def _load_env_vars() -> dict[str, Any]:
    """Load settings from DIFF_INSIGHT_* environment variables.

    Supported environment variables:
        DIFF_INSIGHT_THEME: str
        DIFF_INSIGHT_COLOR: bool (true/false/1/0)
        DIFF_INSIGHT_OUTPUT_FORMAT: text/json/github
        DIFF_INSIGHT_VERBOSITY: quiet/normal/verbose
        DIFF_INSIGHT_LOG_FILE: str

    Returns:
        Dict of field_name -> parsed_value for any DIFF_INSIGHT_* vars found.
    """
    type_hints = get_type_hints(InsightSettings)

    result: dict[str, Any] = {}

    for field_name in InsightSettings.__dataclass_fields__:
        env_key = f"{ENV_PREFIX}{field_name.upper()}"
        env_value = os.environ.get(env_key)

        if env_value is None:
            continue

        type_hint = type_hints.get(field_name)
        if type_hint is None:
            continue

        try:
            parsed = _parse_env_value(env_value, type_hint)
        except ValueError as e:
            raise InvalidConfigError(env_key, env_value, str(e))
        if parsed is not None:
            result[field_name] = parsed

    return result


def _parse_env_value(value: str, type_hint: Any) -> Any:
    """Parse environment variable string to the correct type.

    Raises:
        ValueError: If value can't be parsed to expected type
    """
    origin = getattr(type_hint, "__origin__", None)

    # Optional[X] is Union[X, None]
    args = getattr(type_hint, "__args__", ())
    if type(None) in args:
        non_none_types = [t for t in args if t is not type(None)]
        if non_none_types:
            type_hint = non_none_types[0]
            origin = getattr(type_hint, "__origin__", None)

    if type_hint is bool:
        lower = value.lower()
        if lower in ("true", "1", "yes", "on"):
            return True
        elif lower in ("false", "0", "no", "off"):
            return False
        else:
            raise ValueError(f"expected true/false, got '{value}'")

    if type_hint is str or origin is Literal:
        return value

    return None


def _load_toml_file(path: Path) -> dict:
    """Load TOML file and return parsed dict.

    Raises:
        ConfigurationError: If no TOML parser is available
        Exception: If TOML parsing fails
    """
    try:
        # Python 3.11+ has tomllib in stdlib
        import tomllib
    except ModuleNotFoundError:
        try:
            # Fallback to tomli for Python 3.9-3.10
            import tomli as tomllib  # type: ignore
        except ImportError:
            raise ConfigurationError(
                "TOML support requires Python 3.11+ or 'tomli' package. "
                "Install with: pip install tomli"
            )

    with open(path, "rb") as f:
        return tomllib.load(f)
