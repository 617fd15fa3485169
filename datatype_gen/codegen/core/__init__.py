"""
Core code generation components.

Provides the schema model, the indentation-aware emitter, constructor
versioning and the base generator used by all language targets.
"""

from .generator import (
    CodeGenerator,
    GeneratorError,
    MissingDefaultValueError,
    UnitNameCollisionError,
    GenerationResult,
    generate_code,
    merge_units,
)
from .schema import (
    Schema,
    Definition,
    Enumeration,
    EnumerationValue,
    Record,
    Protocol,
    Field,
    Message,
    MessageArgument,
    TypeReference,
    VersionNumber,
    SchemaError,
    parse_schema,
)
from .emitter import IndentationAwareBuffer
from .versioning import (
    ConstructorPlan,
    FieldValue,
    distinct_versions,
    flatten_fields,
    partition_fields,
    plan_constructors,
)
from .naming import NameSanitizer, upper_first
from .config import GeneratorConfig, ConfigManager, ConfigError, load_config
from .templates import TemplateEngine, TemplateError, create_template_engine

__all__ = [
    # Base generator interface
    "CodeGenerator",
    "GeneratorError",
    "MissingDefaultValueError",
    "UnitNameCollisionError",
    "GenerationResult",
    "generate_code",
    "merge_units",
    # Schema model
    "Schema",
    "Definition",
    "Enumeration",
    "EnumerationValue",
    "Record",
    "Protocol",
    "Field",
    "Message",
    "MessageArgument",
    "TypeReference",
    "VersionNumber",
    "SchemaError",
    "parse_schema",
    # Emitter and versioning
    "IndentationAwareBuffer",
    "ConstructorPlan",
    "FieldValue",
    "distinct_versions",
    "flatten_fields",
    "partition_fields",
    "plan_constructors",
    # Naming utilities
    "NameSanitizer",
    "upper_first",
    # Configuration system
    "GeneratorConfig",
    "ConfigManager",
    "ConfigError",
    "load_config",
    # Template system
    "TemplateEngine",
    "TemplateError",
    "create_template_engine",
]
