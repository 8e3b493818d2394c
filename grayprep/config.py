"""Configuration management."""

from pathlib import Path
from typing import Any, Callable, Dict, Optional, Tuple
import copy
import os

import yaml

from grayprep.core.logging_utils import get_logger

DEFAULTS: Dict[str, Any] = {
    'lut': {
        'bit_depth': 12,
        'gamma': 1.0,
    },
    'scan': {
        'workers': 1,
    },
    'acquisition': {
        'binning': 'Unbinned',
    },
    'output': {
        'folder': None,
        'save_info': True,
    },
    'image': {
        'extensions': ['.png', '.tif', '.tiff', '.bmp'],
    },
}

# env var -> (config path, converter)
ENV_MAPPINGS: Dict[str, Tuple[Tuple[str, ...], Callable[[str], Any]]] = {
    'GRAYPREP_BIT_DEPTH': (('lut', 'bit_depth'), int),
    'GRAYPREP_GAMMA': (('lut', 'gamma'), float),
    'GRAYPREP_SCAN_WORKERS': (('scan', 'workers'), int),
    'GRAYPREP_BINNING': (('acquisition', 'binning'), str),
    'GRAYPREP_OUTPUT_FOLDER': (('output', 'folder'), str),
}


class Config:
    """Defaults, overridden by a YAML file, overridden by environment variables."""

    def __init__(self, config_file: Optional[Path] = None):
        """
        Initialize configuration.

        Args:
            config_file: Path to YAML config file (optional)
        """
        self.config = copy.deepcopy(DEFAULTS)

        if config_file and Path(config_file).exists():
            self.load_from_file(Path(config_file))

        self._load_from_env()

    def load_from_file(self, config_file: Path) -> None:
        """Merge a YAML file into the current configuration.

        Unreadable or malformed files are reported and ignored.
        """
        try:
            with open(config_file, 'r', encoding='utf-8') as f:
                file_config = yaml.safe_load(f)
        except (OSError, yaml.YAMLError) as e:
            get_logger().warning(f"Could not load config file {config_file}: {e}")
            return

        if isinstance(file_config, dict):
            self._merge_config(self.config, file_config)

    def _merge_config(self, base: Dict, override: Dict) -> None:
        """Recursively merge configuration dictionaries."""
        for key, value in override.items():
            if key in base and isinstance(base[key], dict) and isinstance(value, dict):
                self._merge_config(base[key], value)
            else:
                base[key] = value

    def _load_from_env(self) -> None:
        for env_var, (config_path, convert) in ENV_MAPPINGS.items():
            value = os.getenv(env_var)
            if not value:
                continue
            try:
                self.set('.'.join(config_path), convert(value))
            except ValueError:
                get_logger().warning(f"Ignoring invalid value for {env_var}: {value!r}")

    def get(self, key: str, default: Any = None) -> Any:
        """Get a value by dotted key, e.g. ``lut.gamma``."""
        value = self.config
        for k in key.split('.'):
            if isinstance(value, dict) and k in value:
                value = value[k]
            else:
                return default
        return value

    def set(self, key: str, value: Any) -> None:
        """Set a value by dotted key, creating intermediate sections."""
        keys = key.split('.')
        config = self.config
        for k in keys[:-1]:
            config = config.setdefault(k, {})
        config[keys[-1]] = value


def load_config(config_file: Optional[Path] = None) -> Config:
    """
    Load configuration.

    Args:
        config_file: Path to config file (optional)

    Returns:
        Config instance
    """
    return Config(config_file)
