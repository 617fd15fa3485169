"""
Java code generator implementation.

Generates one Java source unit per enumeration, record and protocol,
with versioned constructors, accessors and structural methods.
"""

from pathlib import Path
from typing import Dict, List, Optional, Any, Union

from ...core.config import GeneratorConfig
from ...core.generator import CodeGenerator, Units, merge_units
from ...core.schema import (
    Schema,
    Enumeration,
    Record,
    Protocol,
    Field,
    Message,
    ClassLike,
)
from ...core.versioning import ConstructorPlan, flatten_fields, plan_constructors
from .config import JavaConfig, get_library_config
from .methods import equals_body, hash_code_body, to_string_body
from .naming import create_java_sanitizer
from .types import JavaTypeMapper

COMMENT_PREFIXES = ("/*", "*", "//")


def _is_comment(line: str) -> bool:
    """Javadoc, block and line comments never open a block."""
    return line.startswith(COMMENT_PREFIXES)


class JavaGenerator(CodeGenerator):
    """Code generator for Java classes and enums."""

    def __init__(self, config: Optional[Union[GeneratorConfig, Dict[str, Any]]] = None):
        """Initialize Java generator with configuration."""
        super().__init__(config)

        self.sanitizer = create_java_sanitizer()
        self.java_config = JavaConfig.from_generator_config(self.config)
        self.type_mapper = JavaTypeMapper(self.java_config)

    def get_template_directory(self) -> Optional[Path]:
        """Return the Java templates directory."""
        return Path(__file__).parent / "templates"

    @property
    def language_name(self) -> str:
        """Return the language name."""
        return "java"

    @property
    def file_extension(self) -> str:
        """Return Java file extension."""
        return ".java"

    def augment_indent_trigger(self, line: str) -> bool:
        return line.endswith("{") and not _is_comment(line)

    def reduce_indent_trigger(self, line: str) -> bool:
        return line.startswith("}")

    def _comments(self, doc: Optional[str]) -> Optional[str]:
        """Doc passed to templates; None when comments are disabled."""
        return doc if self.config.add_comments else None

    def _render(self, template_name: str, context: Dict[str, Any]) -> str:
        """Render a template and re-indent every non-blank line."""
        rendered = self.render_template(template_name, context)
        buffer = self.new_buffer()
        buffer += (line for line in rendered.splitlines() if line.strip())
        return str(buffer)

    def generate(self, schema: Schema) -> Units:
        """Generate every unit of a schema, each under its package declaration."""
        namespace = self.config.namespace or schema.namespace
        package_line = self.render_template("package.java.j2", {"namespace": namespace})

        units: Units = {}
        for definition in schema.definitions:
            merge_units(units, self.generate_definition(definition, None, []))

        result = {}
        for unit_name, code in units.items():
            buffer = self.new_buffer()
            buffer += package_line
            buffer += code.splitlines()
            result[unit_name] = str(buffer)
        return result

    def generate_enumeration(self, enumeration: Enumeration) -> Units:
        context = {
            "name": enumeration.name,
            "doc": self._comments(enumeration.doc),
            "values": [
                {"name": value.name, "doc": self._comments(value.doc)}
                for value in enumeration.values
            ],
            "extra": list(enumeration.extra),
        }
        return {self.unit_name(enumeration): self._render("enumeration.java.j2", context)}

    def generate_record(
        self, record: Record, parent: Optional[Protocol], super_fields: List[Field]
    ) -> Units:
        context = self._class_context(record, parent, super_fields)
        context.update(
            modifier="final",
            with_methods=self._with_methods(record, super_fields),
            messages=[],
        )
        return {self.unit_name(record): self._render("class.java.j2", context)}

    def generate_protocol(
        self, protocol: Protocol, parent: Optional[Protocol], super_fields: List[Field]
    ) -> Units:
        context = self._class_context(protocol, parent, super_fields)
        context.update(
            modifier="abstract",
            with_methods=[],
            messages=[self._message_data(m) for m in protocol.messages],
        )

        units = {self.unit_name(protocol): self._render("class.java.j2", context)}
        child_fields = flatten_fields(super_fields, protocol.fields)
        for child in protocol.children:
            merge_units(units, self.generate_definition(child, protocol, child_fields))
        return units

    # Class-like sections

    def _class_context(
        self, cl: ClassLike, parent: Optional[Protocol], super_fields: List[Field]
    ) -> Dict[str, Any]:
        all_fields = flatten_fields(super_fields, cl.fields)
        visibility = "protected" if isinstance(cl, Protocol) else "private"
        plans = plan_constructors(cl.name, super_fields, list(cl.fields))

        return {
            "name": cl.name,
            "doc": self._comments(cl.doc),
            "parent": parent.name if parent else None,
            "serializable_type": self.java_config.serializable_type,
            "extra": list(cl.extra),
            "fields": [
                {
                    "name": f.name,
                    "type": self.type_mapper.map_type(f.type).name,
                    "doc": self._comments(f.doc),
                    "visibility": visibility,
                }
                for f in cl.fields
            ],
            "constructors": [self._constructor_data(plan) for plan in plans],
            "accessors": [self._accessor_data(f) for f in cl.fields],
            "equals_body": equals_body(cl.name, all_fields, self.type_mapper),
            "hash_code_body": hash_code_body(all_fields, self.type_mapper),
            "to_string_body": to_string_body(cl.name, all_fields),
        }

    def _constructor_data(self, plan: ConstructorPlan) -> Dict[str, Any]:
        def argument(value) -> str:
            return f"_{value.field.name}" if value.provided else value.default

        return {
            "parameters": [
                f"{self.type_mapper.map_type(f.type).name} _{f.name}"
                for f in plan.parameters
            ],
            "super_arguments": [argument(value) for value in plan.super_values],
            "assignments": [
                f"{value.field.name} = {argument(value)};" for value in plan.own_values
            ],
        }

    def _accessor_data(self, f: Field) -> Dict[str, Any]:
        java_type = self.type_mapper.map_type(f.type)
        expression = f"this.{f.name}"
        if java_type.is_lazy:
            expression += ".get()"
        return {"name": f.name, "type": java_type.accessor_name, "expression": expression}

    def _with_methods(self, record: Record, super_fields: List[Field]) -> List[Dict[str, Any]]:
        """One copy-with method per flattened field, built on the newest constructor."""
        all_fields = flatten_fields(super_fields, record.fields)
        methods = []
        for target in all_fields:
            methods.append(
                {
                    "field": target.name,
                    "type": self.type_mapper.map_type(target.type).name,
                    "arguments": [
                        f.name if f.name == target.name else f"this.{f.name}"
                        for f in all_fields
                    ],
                }
            )
        return methods

    def _message_data(self, message: Message) -> Dict[str, Any]:
        doc_lines = message.doc.split("\n") if message.doc else []
        for arg in message.arguments:
            if not arg.doc:
                continue
            first, *rest = arg.doc.split("\n")
            doc_lines.append(f"@param {arg.name} {first}")
            doc_lines.extend(rest)

        return {
            "name": message.name,
            "doc": self._comments("\n".join(doc_lines)) if doc_lines else None,
            "response": self.type_mapper.map_type(message.response).name,
            "arguments": [
                f"{self.type_mapper.map_type(arg.type).name} {arg.name}"
                for arg in message.arguments
            ],
        }

    def validate_schema(self, schema: Schema) -> List[str]:
        """Validate schemas for Java generation."""
        warnings = super().validate_schema(schema)

        for definition, _ in schema.walk():
            warning = self.sanitizer.check_name(definition.name, "Type name")
            if warning:
                warnings.append(warning)

            if isinstance(definition, Enumeration):
                names = [value.name for value in definition.values]
                context = f"Value of {definition.name}"
            else:
                names = [f.name for f in definition.fields]
                context = f"Field of {definition.name}"

            for name in names:
                if not self.sanitizer.is_valid_identifier(name):
                    warnings.append(f"{context} '{name}' is not a valid identifier")
                elif self.sanitizer.is_reserved(name):
                    warnings.append(f"{context} '{name}' is a reserved word")

        namespace = self.config.namespace or schema.namespace
        for part in namespace.split("."):
            if not self.sanitizer.is_valid_identifier(part) or self.sanitizer.is_reserved(part):
                warnings.append(f"Invalid Java package name: {namespace}")
                break

        return warnings


# Factory functions
def create_java_generator(config: Optional[Dict[str, Any]] = None) -> JavaGenerator:
    """Create a Java generator with default configuration."""
    default_config = {
        "indent_size": 4,
        "add_comments": True,
    }

    merged_config = default_config.copy()
    if config:
        merged_config.update(config)

    return JavaGenerator(merged_config)


def create_library_generator(lazy_type: str, optional_type: str) -> JavaGenerator:
    """Create a generator targeting a runtime library's own lazy/optional types."""
    return create_java_generator(get_library_config(lazy_type, optional_type))
