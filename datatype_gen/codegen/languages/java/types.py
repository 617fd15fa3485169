"""
Java-specific type system for code generation.

Maps schema type references to Java spellings for storage, parameters
and accessors, boxing primitives wherever they become type arguments.
"""

from dataclasses import dataclass
from typing import Dict, Optional

from ...core.schema import TypeReference
from .config import JavaConfig

# Primitive types and their boxed counterparts
JAVA_PRIMITIVES: Dict[str, str] = {
    "boolean": "Boolean",
    "byte": "Byte",
    "char": "Character",
    "short": "Short",
    "int": "Integer",
    "long": "Long",
    "float": "Float",
    "double": "Double",
}


@dataclass(frozen=True)
class JavaType:
    """
    Immutable representation of a mapped Java type.

    ``name`` is the storage spelling, used for fields and constructor
    parameters; ``accessor_name`` is what the accessor returns once a
    deferred value has been forced.
    """

    name: str
    accessor_name: str
    is_lazy: bool = False
    is_primitive: bool = False  # Non-lazy primitive scalar
    is_array: bool = False  # Non-lazy array
    is_primitive_array: bool = False

    @property
    def boxed_name(self) -> str:
        """Boxed class of a primitive scalar (``Integer`` for ``int``)."""
        return JAVA_PRIMITIVES.get(self.accessor_name, self.accessor_name)


class JavaTypeMapper:
    """Maps TypeReferences to JavaTypes using the configured wrappers."""

    def __init__(self, config: Optional[JavaConfig] = None):
        """Initialize with Java configuration."""
        self.config = config or JavaConfig()

    @staticmethod
    def box(name: str) -> str:
        """Spelling of ``name`` usable as a generic type argument."""
        return JAVA_PRIMITIVES.get(name, name)

    def map_type(self, tpe: TypeReference) -> JavaType:
        """
        Map a type reference to a Java type.

        Laziness wraps outermost, then optionality, then repetition:
        ``lazy int?`` becomes ``Lazy<Optional<Integer>>``.
        """
        accessor = tpe.name
        if tpe.repeated:
            accessor = f"{accessor}[]"
        if tpe.optional:
            accessor = f"{self.config.optional_type}<{self.box(accessor)}>"

        storage = accessor
        if tpe.lazy:
            storage = f"{self.config.lazy_type}<{self.box(accessor)}>"

        is_array = tpe.repeated and not tpe.lazy
        return JavaType(
            name=storage,
            accessor_name=accessor,
            is_lazy=tpe.lazy,
            is_primitive=(
                tpe.name in JAVA_PRIMITIVES
                and not (tpe.repeated or tpe.optional or tpe.lazy)
            ),
            is_array=is_array,
            is_primitive_array=is_array and tpe.name in JAVA_PRIMITIVES,
        )
