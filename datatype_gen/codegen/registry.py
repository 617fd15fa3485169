"""
Registry of the target languages the generator can emit.

Maps language names and aliases to generator classes and builds
configured generator instances for them.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple, Type, Union

from ..logging_config import get_logger
from .core.config import GeneratorConfig, load_config
from .core.generator import CodeGenerator

logger = get_logger(__name__)

ConfigSource = Optional[Union[GeneratorConfig, Dict[str, Any], str, Path]]


class RegistryError(Exception):
    """Exception raised for registry-related errors."""

    pass


@dataclass(frozen=True)
class LanguageEntry:
    """A registered target language."""

    name: str
    generator_class: Type[CodeGenerator]
    aliases: Tuple[str, ...] = ()


class GeneratorRegistry:
    """Target languages by primary name, reachable through their aliases."""

    def __init__(self):
        self._entries: Dict[str, LanguageEntry] = {}
        self._names: Dict[str, str] = {}  # name or alias -> primary name

    def register(
        self,
        language: str,
        generator_class: Type[CodeGenerator],
        aliases: Optional[List[str]] = None,
    ):
        """
        Register a generator class under a language name and its aliases.

        Raises:
            RegistryError: If the class is not a CodeGenerator or a name is taken
        """
        if not isinstance(generator_class, type) or not issubclass(
            generator_class, CodeGenerator
        ):
            raise RegistryError("Generator class must inherit from CodeGenerator")

        name = language.lower()
        alias_keys = tuple(sorted({a.lower() for a in aliases or []} - {name}))

        for key in (name,) + alias_keys:
            if key in self._names:
                raise RegistryError(
                    f"Name '{key}' conflicts with registered language '{self._names[key]}'"
                )

        self._entries[name] = LanguageEntry(name, generator_class, alias_keys)
        for key in (name,) + alias_keys:
            self._names[key] = name

        logger.debug("Registered %s generator: %s", name, generator_class.__name__)

    def resolve(self, language: str) -> str:
        """
        Resolve a language name or alias to its primary name.

        Raises:
            RegistryError: If no generator is registered under that name
        """
        try:
            return self._names[language.lower()]
        except KeyError:
            raise RegistryError(
                f"No generator registered for language: {language}. "
                f"Available: {', '.join(self.list_languages())}"
            ) from None

    def is_supported(self, language: str) -> bool:
        return language.lower() in self._names

    def list_languages(self) -> List[str]:
        """Registered primary language names, sorted."""
        return sorted(self._entries)

    def create_generator(self, language: str, config: ConfigSource = None) -> CodeGenerator:
        """
        Create a configured generator.

        ``config`` may be a ready GeneratorConfig, a path to a JSON config
        file, a dict of overrides, or None for the language defaults. Files
        and dicts are merged over the language defaults.

        Raises:
            RegistryError: If the language is unknown or the generator
                rejects its configuration
        """
        entry = self._entries[self.resolve(language)]

        if config is not None and not isinstance(config, (GeneratorConfig, dict, str, Path)):
            raise RegistryError(f"Invalid config type: {type(config)}")

        try:
            return entry.generator_class(self._load(entry.name, config))
        except Exception as e:
            raise RegistryError(f"Failed to create {language} generator: {e}") from e

    @staticmethod
    def _load(language: str, config: ConfigSource) -> GeneratorConfig:
        if isinstance(config, GeneratorConfig):
            return config
        if isinstance(config, dict):
            return load_config(language, custom_config=config)
        return load_config(language, config_file=config)

    def get_language_info(self, language: str) -> Dict[str, Any]:
        """
        Describe a registered language for listings.

        Returns:
            Dict with name, class, file_extension and aliases
        """
        entry = self._entries[self.resolve(language)]
        generator = self.create_generator(entry.name)
        return {
            "name": generator.language_name,
            "class": entry.generator_class.__name__,
            "file_extension": generator.file_extension,
            "aliases": list(entry.aliases),
        }


_global_registry: Optional[GeneratorRegistry] = None


def get_registry() -> GeneratorRegistry:
    """Get the global generator registry with the built-in languages."""
    global _global_registry
    if _global_registry is None:
        from .languages.java import JavaGenerator

        _global_registry = GeneratorRegistry()
        _global_registry.register("java", JavaGenerator, aliases=["jvm"])
    return _global_registry


def get_generator(language: str, config: ConfigSource = None) -> CodeGenerator:
    """Create a generator from the global registry."""
    return get_registry().create_generator(language, config)


def list_supported_languages() -> List[str]:
    return get_registry().list_languages()


def get_language_info(language: str) -> Dict[str, Any]:
    return get_registry().get_language_info(language)


def list_all_language_info() -> Dict[str, Dict[str, Any]]:
    """Information about every supported language, keyed by name."""
    registry = get_registry()
    return {name: registry.get_language_info(name) for name in registry.list_languages()}
