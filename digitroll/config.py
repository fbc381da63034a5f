"""Format and animation configuration, plus YAML-backed defaults."""

import logging
import os
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Callable, Dict, Mapping, Optional

import yaml

from .easing import CURVES
from .errors import InvalidConfig

_log = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = "~/.config/digitroll/config.yaml"


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _require(cls_name: str, name: str, value: Any, kind: type) -> None:
    if not isinstance(value, kind):
        raise InvalidConfig(
            f"{cls_name}.{name} must be {kind.__name__}, got {value!r}"
        )


@dataclass(frozen=True)
class FormatConfig:
    """How a number becomes a row of slot characters.

    ``custom_formatter`` receives the fully assembled display string and its
    return value replaces it verbatim.
    """

    fraction_digits: int = 0
    enable_grouping: bool = False
    grouping_symbol: str = ","
    group_size: int = 3
    decimal_separator: str = "."
    loop: bool = True
    custom_formatter: Optional[Callable[[str], str]] = None

    def __post_init__(self) -> None:
        if not _is_int(self.group_size) or self.group_size < 1:
            raise InvalidConfig(
                f"group_size must be an integer >= 1, got {self.group_size!r}"
            )
        if not _is_int(self.fraction_digits) or self.fraction_digits < 0:
            raise InvalidConfig(
                f"fraction_digits must be an integer >= 0, got {self.fraction_digits!r}"
            )
        if self.grouping_symbol is None:
            object.__setattr__(self, "grouping_symbol", "")
        for name in ("enable_grouping", "loop"):
            _require("FormatConfig", name, getattr(self, name), bool)
        for name in ("grouping_symbol", "decimal_separator"):
            _require("FormatConfig", name, getattr(self, name), str)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "FormatConfig":
        """Build from config-file keys, ignoring unknown ones."""
        return cls(**_known_fields(cls, data))


@dataclass(frozen=True)
class AnimationConfig:
    """Timing and geometry for slot transitions.

    ``slot_height`` is the distance between two adjacent digits on a slot's
    strip; the host supplies it, the engine never measures text.
    """

    duration: float = 0.3
    curve: str = "ease_in_out"
    slot_height: float = 1.0
    slot_width: float = 1.0
    prefix: str = ""
    suffix: str = ""

    def __post_init__(self) -> None:
        for name in ("duration", "slot_height", "slot_width"):
            if not _is_number(getattr(self, name)):
                raise InvalidConfig(
                    f"AnimationConfig.{name} must be a number, got {getattr(self, name)!r}"
                )
        for name in ("curve", "prefix", "suffix"):
            _require("AnimationConfig", name, getattr(self, name), str)
        if self.duration < 0:
            raise InvalidConfig(f"duration must be >= 0, got {self.duration!r}")
        if self.slot_height <= 0 or self.slot_width <= 0:
            raise InvalidConfig("slot size must be positive")
        if self.curve not in CURVES:
            raise InvalidConfig(
                f"unknown curve {self.curve!r}; expected one of {', '.join(CURVES)}"
            )

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "AnimationConfig":
        """Build from config-file keys, ignoring unknown ones."""
        return cls(**_known_fields(cls, data))


def _known_fields(cls, data: Mapping[str, Any]) -> Dict[str, Any]:
    names = {f.name for f in fields(cls)}
    return {k: v for k, v in data.items() if k in names}


class ConfigManager:
    """Manage digitroll defaults from YAML."""

    def __init__(self, config_path: Optional[str] = None):
        self.config_path = Path(config_path or DEFAULT_CONFIG_PATH).expanduser()
        self.data = self._load_config()

    def _load_config(self) -> Dict[str, Any]:
        """Load configuration from YAML file."""
        if not self.config_path.exists():
            self._create_default_config()
        return self._read_yaml()

    def _read_yaml(self) -> Dict[str, Any]:
        """Read and parse YAML file."""
        try:
            with open(self.config_path, "r") as f:
                content = yaml.safe_load(f)
                return content or {}
        except (OSError, yaml.YAMLError) as e:
            _log.warning("Error reading config %s: %s", self.config_path, e)
            return {}

    def _create_default_config(self) -> None:
        """Create default configuration file."""
        self.config_path.parent.mkdir(parents=True, exist_ok=True)

        default_config = {
            "format": {
                "fraction_digits": 0,
                "enable_grouping": False,
                "grouping_symbol": ",",
                "group_size": 3,
                "decimal_separator": ".",
                "loop": True,
            },
            "animation": {
                "duration": 0.3,
                "curve": "ease_in_out",
                "slot_height": 1.0,
                "slot_width": 1.0,
                "prefix": "",
                "suffix": "",
            },
        }

        with open(self.config_path, "w") as f:
            yaml.dump(default_config, f, default_flow_style=False)

    def _resolve_env_var(self, value: Any) -> Any:
        """Resolve environment variable references like ${VAR_NAME}."""
        if not isinstance(value, str):
            return value
        if not value.startswith("${") or not value.endswith("}"):
            return value
        raw = os.getenv(value[2:-1])
        if raw is None:
            return None
        # Environment values are strings; read booleans and numbers as YAML does.
        try:
            parsed = yaml.safe_load(raw)
        except yaml.YAMLError:
            return raw
        return parsed if isinstance(parsed, (bool, int, float)) else raw

    def _section(self, name: str, overrides: Mapping[str, Any]) -> Dict[str, Any]:
        section = self.data.get(name) or {}
        merged = {k: self._resolve_env_var(v) for k, v in section.items()}
        # Blank keys and unset variables fall back to the dataclass defaults.
        merged = {k: v for k, v in merged.items() if v is not None}
        merged.update({k: v for k, v in overrides.items() if v is not None})
        return merged

    def get_format_config(self, **overrides: Any) -> FormatConfig:
        """Format configuration from the file, with keyword overrides.

        Raises:
            InvalidConfig: the merged values are rejected.
        """
        return FormatConfig.from_dict(self._section("format", overrides))

    def get_animation_config(self, **overrides: Any) -> AnimationConfig:
        """Animation configuration from the file, with keyword overrides."""
        return AnimationConfig.from_dict(self._section("animation", overrides))

    def save(self) -> None:
        """Save configuration to file."""
        with open(self.config_path, "w") as f:
            yaml.dump(self.data, f, default_flow_style=False)
