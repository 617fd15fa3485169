"""
Base generator interface for all code generation targets.

Defines the contract that all language generators must implement and
the dispatch over definition kinds shared by every target.
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Dict, List, Any, Optional, Union

from ...logging_config import get_logger
from .config import GeneratorConfig, config_from_dict
from .emitter import IndentationAwareBuffer
from .schema import (
    Schema,
    Definition,
    Enumeration,
    Record,
    Protocol,
    Field,
    VersionNumber,
)
from .templates import TemplateEngine, create_template_engine

logger = get_logger(__name__)

Units = Dict[str, str]


class GeneratorError(Exception):
    """Base exception for code generation errors."""

    pass


class MissingDefaultValueError(GeneratorError):
    """A field introduced after some version has no default value."""

    def __init__(self, field: Field, owner: str, era: VersionNumber):
        self.field = field
        self.owner = owner
        self.era = era
        super().__init__(
            f"Need a default value for field {owner}.{field.name} "
            f"(since {field.since}) to generate the constructor for version {era}"
        )


class UnitNameCollisionError(GeneratorError):
    """Two definitions produced the same unit name."""

    def __init__(self, unit_name: str):
        self.unit_name = unit_name
        super().__init__(f"Generated unit name collision: {unit_name}")


def merge_units(target: Units, units: Units) -> Units:
    """Merge ``units`` into ``target``, refusing to overwrite any unit."""
    for name, code in units.items():
        if name in target:
            raise UnitNameCollisionError(name)
        target[name] = code
    return target


class CodeGenerator(ABC):
    """Abstract base class for all code generators."""

    def __init__(self, config: Optional[Union[GeneratorConfig, Dict[str, Any]]] = None):
        """Initialize generator with optional configuration."""
        if isinstance(config, GeneratorConfig):
            self.config = config
        else:
            self.config = config_from_dict(config or {})
        self._template_engine = None
        self._setup_templates()

    def _setup_templates(self):
        """Setup template engine for this generator."""
        self._template_engine = create_template_engine(self.get_template_directory())

    @property
    @abstractmethod
    def language_name(self) -> str:
        """Return the name of the target language (e.g., 'java')."""
        pass

    @property
    @abstractmethod
    def file_extension(self) -> str:
        """Return the file extension for generated units (e.g., '.java')."""
        pass

    def get_template_directory(self) -> Optional[Path]:
        """
        Return the directory containing templates for this generator.

        Return None to use in-memory templates only.
        """
        return None

    @property
    def template_engine(self) -> TemplateEngine:
        """Get the template engine for this generator."""
        if self._template_engine is None:
            self._setup_templates()
        return self._template_engine

    # Indentation

    @property
    def indent(self) -> str:
        """Indent unit used by the buffers of this generator."""
        if self.config.use_tabs:
            return "\t"
        return " " * self.config.indent_size

    @abstractmethod
    def augment_indent_trigger(self, line: str) -> bool:
        """True if depth increases after ``line``."""
        pass

    @abstractmethod
    def reduce_indent_trigger(self, line: str) -> bool:
        """True if depth decreases before ``line``."""
        pass

    def new_buffer(self) -> IndentationAwareBuffer:
        """Create a fresh, unshared output buffer."""
        return IndentationAwareBuffer(
            self.indent, self.augment_indent_trigger, self.reduce_indent_trigger
        )

    # Generation

    @abstractmethod
    def generate(self, schema: Schema) -> Units:
        """
        Generate every unit of a schema.

        Args:
            schema: Validated schema model

        Returns:
            Mapping of unit name to namespaced source text

        Raises:
            MissingDefaultValueError: If a constructor needs an absent default
            UnitNameCollisionError: If two definitions share a unit name
        """
        pass

    def generate_definition(
        self,
        definition: Definition,
        parent: Optional[Protocol] = None,
        super_fields: Optional[List[Field]] = None,
    ) -> Units:
        """
        Generate the units of one definition within its hierarchy context.

        Args:
            definition: Definition to generate
            parent: Enclosing protocol, if any
            super_fields: Fields of all ancestors, outermost first
        """
        super_fields = list(super_fields or [])

        if isinstance(definition, Protocol):
            return self.generate_protocol(definition, parent, super_fields)
        elif isinstance(definition, Record):
            return self.generate_record(definition, parent, super_fields)
        elif isinstance(definition, Enumeration):
            return self.generate_enumeration(definition)
        else:
            raise GeneratorError(f"Unsupported definition: {definition!r}")

    @abstractmethod
    def generate_protocol(
        self, protocol: Protocol, parent: Optional[Protocol], super_fields: List[Field]
    ) -> Units:
        """Generate a protocol and, recursively, all of its children."""
        pass

    @abstractmethod
    def generate_record(
        self, record: Record, parent: Optional[Protocol], super_fields: List[Field]
    ) -> Units:
        """Generate a record."""
        pass

    @abstractmethod
    def generate_enumeration(self, enumeration: Enumeration) -> Units:
        """Generate an enumeration."""
        pass

    def unit_name(self, definition: Definition) -> str:
        """Name of the unit generated for ``definition``."""
        return f"{definition.name}{self.file_extension}"

    def validate_schema(self, schema: Schema) -> List[str]:
        """
        Validate a schema for basic structural issues.

        Language generators should override this to add language-specific
        validation.

        Returns:
            List of warning messages (empty if no issues)
        """
        warnings = []

        for definition, inherited in schema.walk():
            if isinstance(definition, Enumeration):
                if not definition.values:
                    warnings.append(f"Enumeration '{definition.name}' has no values")
                continue

            all_fields = inherited + list(definition.fields)
            if not all_fields and isinstance(definition, Record):
                warnings.append(f"Record '{definition.name}' has no fields")

            seen = set()
            for f in all_fields:
                if f.name in seen:
                    warnings.append(
                        f"Duplicate field name in {definition.name}: {f.name}"
                    )
                seen.add(f.name)

        return warnings

    # Template helper methods

    def render_template(self, template_name: str, context: Dict[str, Any]) -> str:
        """Render a template with context."""
        return self.template_engine.render_template(template_name, context)


class GenerationResult:
    """Container for generation results and metadata."""

    def __init__(
        self,
        units: Units,
        warnings: List[str] = None,
        metadata: Dict[str, Any] = None,
    ):
        """
        Initialize generation result.

        Args:
            units: Generated units keyed by unit name
            warnings: Any warnings from generation
            metadata: Additional metadata about generation
        """
        self.units = units
        self.warnings = warnings or []
        self.metadata = metadata or {}
        self.success = True
        self.error_message = None
        self.exception = None

    @classmethod
    def error(cls, message: str, exception: Exception = None) -> "GenerationResult":
        """Create a failed generation result."""
        result = cls(units={})
        result.success = False
        result.error_message = message
        result.exception = exception
        return result


def generate_code(generator: CodeGenerator, schema: Schema) -> GenerationResult:
    """
    Generate code using the specified generator with error handling.

    Generation errors are reported in the result instead of raised; no
    unit is returned when generation fails.

    Args:
        generator: Code generator instance
        schema: Schema to generate code for

    Returns:
        GenerationResult with units, warnings, and metadata
    """
    warnings = generator.validate_schema(schema)
    for warning in warnings:
        logger.warning(warning)

    try:
        units = generator.generate(schema)
    except GeneratorError as e:
        logger.error("Code generation failed for %s: %s", schema.namespace, e)
        return GenerationResult.error(f"Code generation failed: {e}", exception=e)

    metadata = {
        "language": generator.language_name,
        "file_extension": generator.file_extension,
        "namespace": generator.config.namespace or schema.namespace,
        "unit_count": len(units),
        "definition_count": len(schema.walk()),
    }
    logger.info(
        "Generated %d %s unit(s) for %s",
        len(units),
        generator.language_name,
        schema.namespace,
    )
    return GenerationResult(units, warnings, metadata)
