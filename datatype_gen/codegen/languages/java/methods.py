"""
Structural method bodies for generated Java classes.

equals, hashCode and toString all operate over the flattened field list
(inherited fields first). Lazy fields switch each method to the
identity-based behaviour inherited from Object, since forcing a deferred
value could diverge or have side effects.
"""

from typing import List

from ...core.schema import Field, has_lazy_fields
from .types import JavaTypeMapper

LAZY_EQUALS = (
    "return this == obj; "
    "// We have lazy members, so use object identity to avoid circularity."
)
LAZY_HASH_CODE = (
    "return super.hashCode(); "
    "// Avoid evaluating lazy members in hashCode to avoid circularity."
)
LAZY_TO_STRING = (
    "return super.toString(); "
    "// Avoid evaluating lazy members in toString to avoid circularity."
)

HASH_SEED = "17"
HASH_FACTOR = "37"


def equals_body(class_name: str, fields: List[Field], mapper: JavaTypeMapper) -> List[str]:
    """Body of ``equals(Object obj)``."""
    if has_lazy_fields(fields):
        return [LAZY_EQUALS]

    comparisons = [_field_equality(f, mapper) for f in fields]
    comparison = " && ".join(comparisons) if comparisons else "true"

    return [
        "if (this == obj) {",
        "return true;",
        f"}} else if (!(obj instanceof {class_name})) {{",
        "return false;",
        "} else {",
        f"{class_name} o = ({class_name})obj;",
        f"return {comparison};",
        "}",
    ]


def _field_equality(f: Field, mapper: JavaTypeMapper) -> str:
    java_type = mapper.map_type(f.type)
    if java_type.is_primitive:
        return f"({f.name}() == o.{f.name}())"
    if java_type.is_primitive_array:
        return f"java.util.Arrays.equals({f.name}(), o.{f.name}())"
    if java_type.is_array:
        return f"java.util.Arrays.deepEquals({f.name}(), o.{f.name}())"
    return f"{f.name}().equals(o.{f.name}())"


def hash_code_body(fields: List[Field], mapper: JavaTypeMapper) -> List[str]:
    """Body of ``hashCode()``, folding ``37 * (acc + hash)`` from 17."""
    if has_lazy_fields(fields):
        return [LAZY_HASH_CODE]

    computation = HASH_SEED
    for f in fields:
        computation = f"{HASH_FACTOR} * ({computation} + {_field_hash(f, mapper)})"
    return [f"return {computation};"]


def _field_hash(f: Field, mapper: JavaTypeMapper) -> str:
    java_type = mapper.map_type(f.type)
    if java_type.is_primitive:
        return f"{java_type.boxed_name}.valueOf({f.name}()).hashCode()"
    if java_type.is_primitive_array:
        return f"java.util.Arrays.hashCode({f.name}())"
    if java_type.is_array:
        return f"java.util.Arrays.deepHashCode({f.name}())"
    return f"{f.name}().hashCode()"


def to_string_body(class_name: str, fields: List[Field]) -> List[str]:
    """Body of ``toString()``: ``Name(a: ..., b: ...)``."""
    if has_lazy_fields(fields):
        return [LAZY_TO_STRING]

    rendered = ' + ", " + '.join(f'"{f.name}: " + {f.name}()' for f in fields)
    if rendered:
        return [f'return "{class_name}(" + {rendered} + ")";']
    return [f'return "{class_name}(" + ")";']
