"""
Java-specific configuration and validation.

Extends the base configuration system with the container types the
generated code depends on.
"""

import re
from dataclasses import dataclass
from typing import Dict, Any

from ...core.config import ConfigError, GeneratorConfig

_QUALIFIED_NAME = re.compile(r"^[A-Za-z_$][A-Za-z0-9_$]*(\.[A-Za-z_$][A-Za-z0-9_$]*)*$")


@dataclass(frozen=True)
class JavaConfig:
    """Java-specific configuration."""

    # Must expose a no-argument get()
    lazy_type: str = "java.util.function.Supplier"
    optional_type: str = "java.util.Optional"
    serializable_type: str = "java.io.Serializable"

    def __post_init__(self):
        """Validate Java-specific settings."""
        for name in ("lazy_type", "optional_type", "serializable_type"):
            value = getattr(self, name)
            if not isinstance(value, str) or not _QUALIFIED_NAME.match(value):
                raise ConfigError(f"Invalid {name}: {value!r}")

    @classmethod
    def from_generator_config(cls, config: GeneratorConfig) -> "JavaConfig":
        """Read Java settings from the ``custom`` section of a config."""
        custom: Dict[str, Any] = config.custom or {}
        known = {
            key: custom[key]
            for key in ("lazy_type", "optional_type", "serializable_type")
            if custom.get(key) is not None
        }
        return cls(**known)


def get_library_config(lazy_type: str, optional_type: str) -> Dict[str, Any]:
    """Generator config targeting a runtime library's own containers."""
    return {
        "custom": {
            "lazy_type": lazy_type,
            "optional_type": optional_type,
        }
    }
