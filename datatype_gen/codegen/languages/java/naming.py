"""
Java-specific naming utilities.

Handles Java reserved words and the java.lang types a generated class
would shadow.
"""

from ...core.naming import NameSanitizer


# Java reserved words, including literals and contextual keywords
JAVA_RESERVED_WORDS = {
    "abstract",
    "assert",
    "boolean",
    "break",
    "byte",
    "case",
    "catch",
    "char",
    "class",
    "const",
    "continue",
    "default",
    "do",
    "double",
    "else",
    "enum",
    "extends",
    "false",
    "final",
    "finally",
    "float",
    "for",
    "goto",
    "if",
    "implements",
    "import",
    "instanceof",
    "int",
    "interface",
    "long",
    "native",
    "new",
    "null",
    "package",
    "private",
    "protected",
    "public",
    "return",
    "short",
    "static",
    "strictfp",
    "super",
    "switch",
    "synchronized",
    "this",
    "throw",
    "throws",
    "transient",
    "true",
    "try",
    "void",
    "volatile",
    "while",
    "_",
}

# java.lang types that a generated class of the same name would shadow
JAVA_BUILTIN_TYPES = {
    "Boolean",
    "Byte",
    "Character",
    "Class",
    "Double",
    "Enum",
    "Float",
    "Integer",
    "Iterable",
    "Long",
    "Number",
    "Object",
    "Override",
    "Record",
    "Short",
    "String",
    "System",
    "Void",
}


def create_java_sanitizer() -> NameSanitizer:
    """Create a name sanitizer configured for Java."""
    return NameSanitizer(JAVA_RESERVED_WORDS, JAVA_BUILTIN_TYPES)
