import os
import yaml
from pathlib import Path
from typing import Any, Dict

class UNSDGConfigError(Exception):
    """Custom exception for unsdg configuration errors."""
    pass

class Config:
    _instance = None

    def __new__(cls):
        if not cls._instance:
            cls._instance = super(Config, cls).__new__(cls)
            cls._instance._initialized = False
        return cls._instance

    def __init__(self):
        if self._initialized:
            return
        self.load()
        self._initialized = True

    def load(self):
        """Loads configuration from available sources and applies overrides."""
        self.data = self._load_from_files()
        self._apply_env_overrides()

    def reload(self):
        """Reloads the configuration."""
        self.load()

    def _default_config(self) -> Dict[str, Any]:
        """Returns the default baseline configuration."""
        return {
            "badge": {
                "goal": "circle",
                "width": 200,
                "color_only": False
            },
            "assets": {
                "base_url": "lib/svg"
            },
            # Official UN SDG colors, keyed by goal number
            "palette": {
                "1": "#E5243B", "2": "#DDA63A", "3": "#4C9F38", "4": "#C5192D",
                "5": "#FF3A21", "6": "#26BDE2", "7": "#FCC30B", "8": "#A21942",
                "9": "#FD6925", "10": "#DD1367", "11": "#FD9D24", "12": "#BF8B2E",
                "13": "#3F7E44", "14": "#0A97D9", "15": "#56C02B", "16": "#00689D",
                "17": "#19486A"
            },
            "logging": {
                "level": "WARNING"
            },
            "server": {
                "host": "127.0.0.1",
                "port": 8080
            }
        }

    def _load_from_files(self) -> Dict[str, Any]:
        """Resolves configuration from tiered file paths."""
        merged_config = self._default_config()

        # defaults < user < local < env_var
        paths_to_load = [
            Path.home() / ".unsdg" / "config.yaml",
            Path.cwd() / "unsdg.config.yaml"
        ]
        if os.getenv("UNSDG_CONFIG"):
            paths_to_load.append(Path(os.getenv("UNSDG_CONFIG")))

        for path in paths_to_load:
            if path.is_file():
                try:
                    with open(path, "r", encoding="utf-8") as f:
                        file_data = yaml.safe_load(f)
                except (OSError, yaml.YAMLError) as e:
                    raise UNSDGConfigError(f"Failed to load config from {path}: {e}")
                if isinstance(file_data, dict):
                    self._deep_update(merged_config, file_data)
                elif file_data is not None:
                    raise UNSDGConfigError(f"Configuration file {path} must be a dictionary.")

        return merged_config

    def _deep_update(self, base_dict: Dict[str, Any], update_dict: Dict[str, Any]):
        """Recursively updates a dictionary."""
        for key, value in update_dict.items():
            if isinstance(value, dict) and key in base_dict and isinstance(base_dict[key], dict):
                self._deep_update(base_dict[key], value)
            else:
                base_dict[key] = value

    def _apply_env_overrides(self):
        """Applies environment variable overrides."""
        mapping = {
            "UNSDG_GOAL": "badge.goal",
            "UNSDG_WIDTH": "badge.width",
            "UNSDG_COLOR_ONLY": "badge.color_only",
            "UNSDG_ASSET_BASE": "assets.base_url",
            "UNSDG_LOG_LEVEL": "logging.level",
            "UNSDG_HOST": "server.host",
            "UNSDG_PORT": "server.port"
        }

        for env_var, config_key in mapping.items():
            value = os.getenv(env_var)
            if value is not None:
                if config_key == "server.port":
                    try:
                        value = int(value)
                    except ValueError:
                        pass
                elif config_key == "badge.width":
                    try:
                        value = float(value)
                        if value.is_integer():
                            value = int(value)
                    except ValueError:
                        pass
                elif config_key == "badge.color_only":
                    value = value.lower() in ("true", "1", "yes")

                self.set(config_key, value)

    def get(self, key: str, default: Any = None) -> Any:
        """Gets a configuration value using dot-notation."""
        parts = key.split(".")
        value = self.data
        for part in parts:
            if isinstance(value, dict) and part in value:
                value = value[part]
            else:
                return default
        return value

    def set(self, key: str, value: Any):
        """Sets a configuration value using dot-notation."""
        parts = key.split(".")
        target = self.data
        for part in parts[:-1]:
            if part not in target or not isinstance(target[part], dict):
                target[part] = {}
            target = target[part]
        target[parts[-1]] = value

    def to_yaml(self) -> str:
        """Returns the configuration as a YAML string."""
        return yaml.safe_dump(self.data, default_flow_style=False, sort_keys=False)

# Singleton instance
config = Config()
