"""
Datatype Code Generation Module

Generates source code in various languages from a datatype schema.
"""

from .registry import (
    GeneratorRegistry,
    RegistryError,
    get_generator,
    get_language_info,
    list_all_language_info,
    list_supported_languages,
)
from .core.generator import (
    CodeGenerator,
    GeneratorError,
    MissingDefaultValueError,
    UnitNameCollisionError,
    GenerationResult,
    generate_code,
)
from .core.schema import (
    Schema,
    Enumeration,
    Record,
    Protocol,
    Field,
    TypeReference,
    VersionNumber,
    SchemaError,
    parse_schema,
)
from .core.config import GeneratorConfig, ConfigManager, ConfigError, load_config


def generate_from_document(document, language="java", config=None):
    """
    Generate code from a parsed schema document.

    Args:
        document: Parsed JSON schema document (dict)
        language: Target language name
        config: Generator configuration dict or path

    Returns:
        GenerationResult with generated units
    """
    schema = parse_schema(document)
    generator = get_generator(language, config)
    return generate_code(generator, schema)


# Export main interfaces
__all__ = [
    "GeneratorRegistry",
    "RegistryError",
    "CodeGenerator",
    "GeneratorError",
    "MissingDefaultValueError",
    "UnitNameCollisionError",
    "GenerationResult",
    "Schema",
    "Enumeration",
    "Record",
    "Protocol",
    "Field",
    "TypeReference",
    "VersionNumber",
    "SchemaError",
    "GeneratorConfig",
    "ConfigManager",
    "ConfigError",
    "generate_code",
    "generate_from_document",
    "get_generator",
    "get_language_info",
    "list_all_language_info",
    "list_supported_languages",
    "load_config",
    "parse_schema",
]
