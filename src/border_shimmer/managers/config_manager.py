"""
Config Manager

Resolves the runtime configuration from three layers:
factory defaults (bundled YAML) < user config.yaml < command-line flags.
"""

import os
import yaml
from pathlib import Path
from typing import Any, Dict, List, Optional

from border_shimmer.errors import ConfigParseError
from border_shimmer.models.config import ShimmerConfig
from border_shimmer.models.enums import SinkType
from border_shimmer.utils.logger import get_logger, LogCategory

log = get_logger().for_category(LogCategory.CONFIG)

APP_DIR_NAME = "border-shimmer"
CONFIG_FILE_NAME = "config.yaml"
FACTORY_DEFAULTS_PATH = Path(__file__).parent.parent / "config" / "factory_defaults.yaml"


def default_config_path() -> Path:
    """$XDG_CONFIG_HOME/border-shimmer/config.yaml, or ~/.config/... when unset"""
    config_dir = os.environ.get("XDG_CONFIG_HOME")
    if not config_dir:
        config_dir = str(Path.home() / ".config")
    return Path(config_dir) / APP_DIR_NAME / CONFIG_FILE_NAME


class ConfigManager:
    """
    Main configuration manager

    A value from a higher layer only replaces the lower one when it is "set":
    non-empty color list, positive number, glow enabled. This means a config
    file can never turn glow back off, and width cannot be set to 0.

    Example:
        manager = ConfigManager()
        config = manager.load()
        config = manager.apply_cli(args)
    """

    def __init__(
        self,
        config_path: Optional[Path] = None,
        defaults_path: Path = FACTORY_DEFAULTS_PATH,
    ):
        """
        Initialize ConfigManager

        Args:
            config_path: User config.yaml (default: XDG location)
            defaults_path: Bundled factory defaults
        """
        self.config_path = Path(config_path) if config_path else default_config_path()
        self.factory_defaults_path = Path(defaults_path)
        self.data: Dict[str, Any] = {}
        self.config: Optional[ShimmerConfig] = None

    # ===== Loading =====

    def _read_yaml(self, path: Path) -> Dict[str, Any]:
        try:
            with open(path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as ex:
            raise ConfigParseError(f"error parsing config file {path}: {ex}", path=str(path)) from ex
        except OSError as ex:
            raise ConfigParseError(f"error reading config file {path}: {ex}", path=str(path)) from ex

        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ConfigParseError(f"config file {path} must contain a mapping", path=str(path))
        return data

    def load(self) -> ShimmerConfig:
        """
        Load factory defaults, then merge the user config file over them

        A missing user file is not an error. A present but broken one is.

        Returns:
            Resolved ShimmerConfig (before CLI overrides)
        """
        defaults = self._read_yaml(self.factory_defaults_path)
        config = self._merge(self._base_from_defaults(defaults), defaults, source="defaults")

        if self.config_path.is_file():
            self.data = self._read_yaml(self.config_path)
            config = self._merge(config, self.data, source=str(self.config_path))
            log.info("Loaded config file", path=str(self.config_path))
        else:
            log.info("No config file found, using defaults", path=str(self.config_path))

        self.config = config
        return config

    @staticmethod
    def _base_from_defaults(defaults: Dict[str, Any]) -> ShimmerConfig:
        colors = (defaults.get("active") or {}).get("colors") or []
        return ShimmerConfig(active_colors=list(colors))

    # ===== Merging =====

    @staticmethod
    def _section(data: Dict[str, Any], name: str, source: str) -> Dict[str, Any]:
        section = data.get(name) or {}
        if not isinstance(section, dict):
            raise ConfigParseError(f"[{name}] in {source} must be a mapping", path=source)
        return section

    @staticmethod
    def _colors(section: Dict[str, Any], key: str, source: str) -> List[str]:
        value = section.get(key) or []
        if not isinstance(value, list) or not all(isinstance(c, str) for c in value):
            raise ConfigParseError(f"'{key}' in {source} must be a list of color strings", path=source)
        return list(value)

    @staticmethod
    def _number(section: Dict[str, Any], key: str, source: str) -> float:
        value = section.get(key, 0)
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise ConfigParseError(f"'{key}' in {source} must be a number, got {value!r}", path=source)
        return float(value)

    def _merge(self, config: ShimmerConfig, data: Dict[str, Any], source: str) -> ShimmerConfig:
        active = self._section(data, "active", source)
        inactive = self._section(data, "inactive", source)
        changes: Dict[str, Any] = {}

        active_colors = self._colors(active, "colors", source)
        if active_colors:
            changes["active_colors"] = active_colors

        inactive_colors = self._colors(inactive, "colors", source)
        if inactive_colors:
            changes["inactive_colors"] = inactive_colors

        for key in ("secs", "fps", "width"):
            value = self._number(active, key, source)
            if value > 0:
                changes[key] = value

        if active.get("glow") is True:
            changes["active_glow"] = True
        if inactive.get("glow") is True:
            changes["inactive_glow"] = True

        return config.with_overrides(**changes)

    def apply_cli(self, args) -> ShimmerConfig:
        """
        Apply command-line flags over the loaded config

        Args:
            args: argparse Namespace from cli.build_parser()

        Returns:
            Final ShimmerConfig
        """
        if self.config is None:
            self.load()

        changes: Dict[str, Any] = {}

        if args.colors:
            changes["active_colors"] = split_colors(args.colors)
        if args.inactive_colors:
            changes["inactive_colors"] = split_colors(args.inactive_colors)

        for key in ("secs", "fps", "width"):
            value = getattr(args, key)
            if value is not None and value > 0:
                changes[key] = value

        if args.glow:
            changes["active_glow"] = True
        if args.inactive_glow:
            changes["inactive_glow"] = True
        if args.command:
            changes["sink_command"] = args.command
        if args.dry_run:
            changes["sink_type"] = SinkType.VIRTUAL
        if args.frames and args.frames > 0:
            changes["max_frames"] = args.frames

        self.config = self.config.with_overrides(**changes)
        if changes:
            log.debug("Applied command-line overrides", keys=", ".join(sorted(changes)))
        return self.config


def split_colors(value: str) -> List[str]:
    """'#FF0000FF, #0000FFFF' -> ['#FF0000FF', '#0000FFFF']"""
    return [part.strip() for part in value.split(",") if part.strip()]
