"""Configuration management for the Chip CLI application."""

import logging
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path("~/.chip/config.yaml")


@dataclass
class ConfigModel:
    """Global configuration model for Chip CLI."""

    # Storage
    data_file: str = "./data/chip.txt"
    backup_corrupt_files: bool = True

    # Display preferences
    separator_width: int = 60
    no_color: bool = False
    suggest_commands: bool = True

    # Diagnostics
    log_level: str = "WARNING"

    def to_dict(self) -> Dict[str, Any]:
        return {f.name: getattr(self, f.name) for f in fields(self)}

    def to_yaml(self) -> str:
        """Serialize config to YAML."""
        return yaml.dump(self.to_dict(), default_flow_style=False, sort_keys=False)

    @classmethod
    def from_yaml(cls, yaml_str: str) -> "ConfigModel":
        """Deserialize config from YAML, ignoring keys this version does not know.

        A value whose type differs from the field's default is replaced by
        that default.

        Raises:
            ValueError: If the document is not a mapping
            yaml.YAMLError: If the document is not valid YAML
        """
        data = yaml.safe_load(yaml_str) or {}
        if not isinstance(data, dict):
            raise ValueError("configuration must be a YAML mapping")

        defaults = cls().to_dict()
        unknown = sorted(str(key) for key in data if key not in defaults)
        if unknown:
            logger.warning(f"Ignoring unknown configuration keys: {', '.join(unknown)}")

        values = {}
        for key, value in data.items():
            if key not in defaults:
                continue
            # bool is an int subclass, so compare exact types
            if type(value) is not type(defaults[key]):
                logger.warning(
                    f"Invalid value {value!r} for {key}, "
                    f"using default {defaults[key]!r}"
                )
                continue
            values[key] = value
        return cls(**values)


def resolve_config_path(config_path: Optional[Path] = None) -> Path:
    return Path(config_path or DEFAULT_CONFIG_PATH).expanduser()


def load_config(config_path: Optional[Path] = None) -> ConfigModel:
    """Load configuration from file, falling back to defaults.

    A missing file is not an error. An unreadable or invalid file is logged
    and the defaults are used instead.
    """
    path = resolve_config_path(config_path)
    if not path.exists():
        logger.debug(f"No configuration at {path}, using defaults")
        return ConfigModel()

    try:
        with open(path, "r", encoding="utf-8") as f:
            config = ConfigModel.from_yaml(f.read())
        logger.debug(f"Loaded configuration from {path}")
        return config
    except (OSError, ValueError, TypeError, yaml.YAMLError) as e:
        logger.warning(f"Failed to load config from {path}: {e}. Using default configuration.")
        return ConfigModel()


def save_config(config: ConfigModel, config_path: Optional[Path] = None) -> Path:
    """Save configuration to file.

    Raises:
        OSError: If the file cannot be written
    """
    path = resolve_config_path(config_path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        f.write(config.to_yaml())
    logger.info(f"Configuration saved to {path}")
    return path
