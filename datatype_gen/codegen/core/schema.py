"""
Core schema representation for code generation.

Defines the immutable data model generators work from (enumerations,
records, protocols, fields and type references) and converts a parsed
JSON schema document into that model.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple, Union, Any


class SchemaError(Exception):
    """Exception raised for malformed schema documents."""

    pass


@dataclass(frozen=True, order=True)
class VersionNumber:
    """
    Totally ordered version number.

    Versions are dotted numeric strings; trailing zero components are
    insignificant, so ``1`` and ``1.0`` are the same version.
    """

    parts: Tuple[int, ...] = (0,)

    def __post_init__(self):
        """Normalize away trailing zero components."""
        parts = tuple(self.parts)
        while len(parts) > 1 and parts[-1] == 0:
            parts = parts[:-1]
        object.__setattr__(self, "parts", parts or (0,))

    @classmethod
    def parse(cls, value: Union[str, int, "VersionNumber", None]) -> "VersionNumber":
        """Build a version from a string, an int, or None (version 0)."""
        if value is None:
            return cls()
        if isinstance(value, VersionNumber):
            return value
        if isinstance(value, bool):
            raise SchemaError(f"Invalid version number: {value!r}")
        if isinstance(value, int):
            if value < 0:
                raise SchemaError(f"Invalid version number: {value!r}")
            return cls((value,))

        text = str(value).strip()
        try:
            parts = tuple(int(part) for part in text.split("."))
        except ValueError:
            raise SchemaError(f"Invalid version number: {value!r}")
        if any(part < 0 for part in parts):
            raise SchemaError(f"Invalid version number: {value!r}")
        return cls(parts)

    def __str__(self) -> str:
        return ".".join(str(part) for part in self.parts)


@dataclass(frozen=True)
class TypeReference:
    """Reference to a named type plus its laziness/repetition/optionality."""

    name: str
    lazy: bool = False
    repeated: bool = False
    optional: bool = False

    def __post_init__(self):
        if self.repeated and self.optional:
            raise SchemaError(
                f"Type reference {self.name!r} cannot be both repeated and optional"
            )

    @classmethod
    def parse(cls, text: str) -> "TypeReference":
        """
        Parse the compact textual form used by schema files.

        ``lazy `` prefix marks a deferred value, a ``*`` suffix a repeated
        value and a ``?`` suffix an optional value: ``lazy int*``.
        """
        if not isinstance(text, str) or not text.strip():
            raise SchemaError(f"Invalid type reference: {text!r}")

        rest = text.strip()
        lazy = False
        if rest.startswith("lazy "):
            lazy = True
            rest = rest[len("lazy ") :].strip()

        repeated = optional = False
        if rest.endswith("*"):
            repeated = True
            rest = rest[:-1].strip()
        elif rest.endswith("?"):
            optional = True
            rest = rest[:-1].strip()

        if not rest or rest.endswith(("*", "?")):
            raise SchemaError(f"Invalid type reference: {text!r}")

        return cls(name=rest, lazy=lazy, repeated=repeated, optional=optional)


@dataclass(frozen=True)
class Field:
    """Represents a single field of a record or protocol."""

    name: str
    type: TypeReference
    since: VersionNumber = field(default_factory=VersionNumber)
    default: Optional[str] = None  # Target-language expression
    doc: Optional[str] = None


@dataclass(frozen=True)
class MessageArgument:
    """A documented argument of a protocol message."""

    name: str
    type: TypeReference
    doc: Optional[str] = None


@dataclass(frozen=True)
class Message:
    """Abstract operation declared on a protocol."""

    name: str
    response: TypeReference
    arguments: Tuple[MessageArgument, ...] = ()
    doc: Optional[str] = None


@dataclass(frozen=True)
class EnumerationValue:
    """A single named value of an enumeration."""

    name: str
    doc: Optional[str] = None


@dataclass(frozen=True)
class Enumeration:
    """Closed set of named, documented values."""

    name: str
    values: Tuple[EnumerationValue, ...] = ()
    doc: Optional[str] = None
    extra: Tuple[str, ...] = ()


@dataclass(frozen=True)
class Record:
    """Terminal, concrete data container."""

    name: str
    fields: Tuple[Field, ...] = ()
    doc: Optional[str] = None
    extra: Tuple[str, ...] = ()


@dataclass(frozen=True)
class Protocol:
    """Abstract, extensible definition owning a tree of child definitions."""

    name: str
    fields: Tuple[Field, ...] = ()
    children: Tuple["Definition", ...] = ()
    doc: Optional[str] = None
    messages: Tuple[Message, ...] = ()
    extra: Tuple[str, ...] = ()


Definition = Union[Enumeration, Record, Protocol]
ClassLike = Union[Record, Protocol]


@dataclass(frozen=True)
class Schema:
    """A namespace plus its ordered top-level definitions."""

    namespace: str
    definitions: Tuple[Definition, ...] = ()

    def walk(self) -> List[Tuple[Definition, List[Field]]]:
        """
        Flatten the definition tree.

        Returns:
            List of (definition, inherited fields) pairs in generation order
        """
        result = []

        def visit(definition: Definition, inherited: List[Field]):
            result.append((definition, inherited))
            if isinstance(definition, Protocol):
                for child in definition.children:
                    visit(child, inherited + list(definition.fields))

        for definition in self.definitions:
            visit(definition, [])
        return result


def has_lazy_fields(fields: List[Field]) -> bool:
    """Check whether any field holds a deferred value."""
    return any(f.type.lazy for f in fields)


def parse_schema(document: Dict[str, Any]) -> Schema:
    """
    Convert a parsed JSON schema document to the internal Schema model.

    Args:
        document: Mapping with ``namespace`` and ``types`` entries

    Returns:
        Schema: Immutable schema model

    Raises:
        SchemaError: If the document is structurally malformed
    """
    if not isinstance(document, dict):
        raise SchemaError("Schema document must be a JSON object")

    namespace = document.get("namespace")
    if not isinstance(namespace, str) or not namespace:
        raise SchemaError("Schema document requires a non-empty 'namespace'")

    types = document.get("types", [])
    if not isinstance(types, list):
        raise SchemaError("'types' must be a list")

    return Schema(
        namespace=namespace,
        definitions=tuple(parse_definition(entry) for entry in types),
    )


def parse_definition(entry: Dict[str, Any]) -> Definition:
    """Convert one ``types`` entry into a Definition."""
    if not isinstance(entry, dict):
        raise SchemaError(f"Type definition must be an object, got {entry!r}")

    name = _require_name(entry, "type definition")
    kind = entry.get("type")
    doc = _parse_doc(entry.get("doc"))
    extra = _parse_extra(entry.get("extra"), name)

    if kind == "enumeration":
        symbols = entry.get("symbols", [])
        if not isinstance(symbols, list):
            raise SchemaError(f"'symbols' of {name} must be a list")
        values = tuple(_parse_symbol(symbol, name) for symbol in symbols)
        return Enumeration(name=name, values=values, doc=doc, extra=extra)

    fields = tuple(
        _parse_field(item, name) for item in _list_entry(entry, "fields", name)
    )

    if kind == "record":
        return Record(name=name, fields=fields, doc=doc, extra=extra)

    if kind in ("protocol", "interface"):
        children = tuple(
            parse_definition(child) for child in _list_entry(entry, "types", name)
        )
        messages = tuple(
            _parse_message(item, name) for item in _list_entry(entry, "messages", name)
        )
        return Protocol(
            name=name,
            fields=fields,
            children=children,
            doc=doc,
            messages=messages,
            extra=extra,
        )

    raise SchemaError(f"Unknown definition kind for {name}: {kind!r}")


def _require_name(entry: Dict[str, Any], what: str) -> str:
    name = entry.get("name")
    if not isinstance(name, str) or not name:
        raise SchemaError(f"Missing 'name' in {what}: {entry!r}")
    return name


def _list_entry(entry: Dict[str, Any], key: str, owner: str) -> List[Any]:
    value = entry.get(key, [])
    if not isinstance(value, list):
        raise SchemaError(f"'{key}' of {owner} must be a list")
    return value


def _parse_doc(doc: Any) -> Optional[str]:
    """Docs may be a string or a list of lines."""
    if doc is None:
        return None
    if isinstance(doc, list):
        return "\n".join(str(line) for line in doc)
    return str(doc)


def _parse_extra(extra: Any, owner: str) -> Tuple[str, ...]:
    if extra is None:
        return ()
    if isinstance(extra, str):
        return tuple(extra.splitlines())
    if isinstance(extra, list):
        return tuple(str(line) for line in extra)
    raise SchemaError(f"'extra' of {owner} must be a string or a list")


def _parse_symbol(symbol: Any, owner: str) -> EnumerationValue:
    if isinstance(symbol, str):
        return EnumerationValue(name=symbol)
    if isinstance(symbol, dict):
        name = _require_name(symbol, f"symbol of {owner}")
        return EnumerationValue(name=name, doc=_parse_doc(symbol.get("doc")))
    raise SchemaError(f"Invalid symbol in {owner}: {symbol!r}")


def _parse_field(item: Any, owner: str) -> Field:
    if not isinstance(item, dict):
        raise SchemaError(f"Field of {owner} must be an object, got {item!r}")

    name = _require_name(item, f"field of {owner}")
    if "type" not in item:
        raise SchemaError(f"Field {owner}.{name} has no 'type'")

    default = item.get("default")
    return Field(
        name=name,
        type=TypeReference.parse(item["type"]),
        since=VersionNumber.parse(item.get("since")),
        default=None if default is None else str(default),
        doc=_parse_doc(item.get("doc")),
    )


def _parse_message(item: Any, owner: str) -> Message:
    if not isinstance(item, dict):
        raise SchemaError(f"Message of {owner} must be an object, got {item!r}")

    name = _require_name(item, f"message of {owner}")
    if "response" not in item:
        raise SchemaError(f"Message {owner}.{name} has no 'response'")

    arguments = []
    for arg in _list_entry(item, "request", f"{owner}.{name}"):
        if not isinstance(arg, dict) or "type" not in arg:
            raise SchemaError(f"Invalid argument of {owner}.{name}: {arg!r}")
        arguments.append(
            MessageArgument(
                name=_require_name(arg, f"argument of {owner}.{name}"),
                type=TypeReference.parse(arg["type"]),
                doc=_parse_doc(arg.get("doc")),
            )
        )

    return Message(
        name=name,
        response=TypeReference.parse(item["response"]),
        arguments=tuple(arguments),
        doc=_parse_doc(item.get("doc")),
    )
