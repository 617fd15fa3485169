"""
Configuration management for code generation.

Merges per-language defaults, an optional JSON config file and
explicit overrides into a GeneratorConfig.
"""

import json
from pathlib import Path
from typing import Dict, Any, Optional, Union
from dataclasses import dataclass, field, fields


class ConfigError(Exception):
    """Exception raised for configuration-related errors."""

    pass


@dataclass
class GeneratorConfig:
    """Base configuration for code generators."""

    # Output settings
    namespace: Optional[str] = None  # Overrides the schema namespace

    # Code style settings
    indent_size: int = 4
    use_tabs: bool = False

    # Documentation
    add_comments: bool = True

    # Custom settings (language-specific)
    custom: Dict[str, Any] = field(default_factory=dict)


class ConfigManager:
    """Manages configuration loading and merging."""

    def __init__(self):
        """Initialize configuration manager."""
        self._configs: Dict[str, Dict[str, Any]] = {}
        self._load_defaults()

    def _load_defaults(self):
        """Load default configurations for supported languages."""
        self._configs["java"] = {
            "indent_size": 4,
            "use_tabs": False,
            "add_comments": True,
            "custom": {
                "lazy_type": "java.util.function.Supplier",
                "optional_type": "java.util.Optional",
                "serializable_type": "java.io.Serializable",
            },
        }

    def get_config(
        self,
        language: str,
        custom_config: Optional[Dict[str, Any]] = None,
        config_file: Optional[Union[str, Path]] = None,
    ) -> GeneratorConfig:
        """
        Get complete configuration for a language.

        Args:
            language: Target language name
            custom_config: Custom configuration overrides
            config_file: Path to JSON configuration file

        Returns:
            Merged configuration for the language
        """
        base_config = self._copy(self._configs.get(language.lower(), {}))

        if config_file:
            self._merge(base_config, self._load_config_file(config_file))

        if custom_config:
            self._merge(base_config, custom_config)

        return config_from_dict(base_config)

    @staticmethod
    def _copy(config: Dict[str, Any]) -> Dict[str, Any]:
        copied = dict(config)
        copied["custom"] = dict(config.get("custom", {}))
        return copied

    @staticmethod
    def _merge(base: Dict[str, Any], overrides: Dict[str, Any]):
        """Merge overrides into base; ``custom`` dicts are merged key-wise."""
        for key, value in overrides.items():
            if key == "custom" and isinstance(value, dict):
                base.setdefault("custom", {}).update(value)
            else:
                base[key] = value

    def _load_config_file(self, config_path: Union[str, Path]) -> Dict[str, Any]:
        """Load configuration from JSON file."""
        path = Path(config_path)

        if not path.exists():
            raise ConfigError(f"Configuration file not found: {path}")

        if not path.suffix.lower() == ".json":
            raise ConfigError(f"Configuration file must be JSON: {path}")

        try:
            with open(path, "r", encoding="utf-8") as f:
                config = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigError(f"Invalid JSON in configuration file {path}: {e}")
        except OSError as e:
            raise ConfigError(f"Failed to load configuration file {path}: {e}")

        if not isinstance(config, dict):
            raise ConfigError(f"Configuration file must contain a JSON object: {path}")

        return config


def config_from_dict(config_dict: Dict[str, Any]) -> GeneratorConfig:
    """
    Convert dictionary to GeneratorConfig instance.

    Unknown top-level keys are collected into ``custom``.
    """
    known_fields = {f.name for f in fields(GeneratorConfig)}

    config_args = {}
    custom_args = {}

    for key, value in config_dict.items():
        if key in known_fields:
            config_args[key] = value
        else:
            custom_args[key] = value

    if custom_args:
        existing_custom = dict(config_args.get("custom") or {})
        existing_custom.update(custom_args)
        config_args["custom"] = existing_custom

    try:
        return GeneratorConfig(**config_args)
    except TypeError as e:
        raise ConfigError(f"Invalid configuration: {e}")


# Global configuration manager instance
_config_manager = None


def get_config_manager() -> ConfigManager:
    """Get the global configuration manager instance."""
    global _config_manager
    if _config_manager is None:
        _config_manager = ConfigManager()
    return _config_manager


def load_config(
    language: str,
    custom_config: Optional[Dict[str, Any]] = None,
    config_file: Optional[Union[str, Path]] = None,
) -> GeneratorConfig:
    """
    Convenience function to load configuration.

    Args:
        language: Target language name
        custom_config: Custom configuration overrides
        config_file: Path to JSON configuration file

    Returns:
        Merged configuration for the language
    """
    manager = get_config_manager()
    return manager.get_config(language, custom_config, config_file)

