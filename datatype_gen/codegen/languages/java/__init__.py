"""
Java code generator module.

Generates Java enums and immutable classes with versioned constructors
from a schema model.
"""

from .generator import JavaGenerator, create_java_generator, create_library_generator
from .config import JavaConfig, get_library_config
from .naming import create_java_sanitizer, JAVA_RESERVED_WORDS
from .types import JavaType, JavaTypeMapper, JAVA_PRIMITIVES

__all__ = [
    "JavaGenerator",
    "JavaConfig",
    "JavaType",
    "JavaTypeMapper",
    "JAVA_PRIMITIVES",
    "JAVA_RESERVED_WORDS",
    "create_java_sanitizer",
    # Factory functions
    "create_java_generator",
    "create_library_generator",
    "get_library_config",
]
