"""
Tests for the schema model and the JSON document parser.

Tests cover:
    - Version number parsing and ordering
    - Compact type reference spelling
    - Document parsing for every definition kind
    - Structural errors reported as SchemaError
"""

import pytest

from datatype_gen.codegen.core.schema import (
    Enumeration,
    Protocol,
    Record,
    SchemaError,
    TypeReference,
    VersionNumber,
    has_lazy_fields,
    parse_definition,
    parse_schema,
)


class TestVersionNumber:
    """Versions are dotted numbers ordered component-wise."""

    def test_missing_version_is_zero(self):
        assert VersionNumber.parse(None) == VersionNumber((0,))

    def test_trailing_zeros_are_insignificant(self):
        """1, 1.0 and 1.0.0 name the same era."""
        assert VersionNumber.parse("1") == VersionNumber.parse("1.0.0")
        assert VersionNumber.parse(1) == VersionNumber.parse("1.0")

    def test_ordering_is_numeric_not_lexical(self):
        assert VersionNumber.parse("0.9") < VersionNumber.parse("0.10")
        assert VersionNumber.parse("1.2") > VersionNumber.parse("1.1.5")

    def test_sorting(self):
        versions = [VersionNumber.parse(v) for v in ["2", "0.1.0", "1.1", "0"]]
        assert [str(v) for v in sorted(versions)] == ["0", "0.1", "1.1", "2"]

    def test_hashable_for_distinct_collection(self):
        versions = {VersionNumber.parse("1"), VersionNumber.parse("1.0")}
        assert len(versions) == 1

    @pytest.mark.parametrize("value", ["one", "1..2", "-1", True, -3])
    def test_invalid_versions_rejected(self, value):
        with pytest.raises(SchemaError):
            VersionNumber.parse(value)


class TestTypeReference:
    """The compact textual form: ``[lazy ]name[*|?]``."""

    def test_plain_type(self):
        assert TypeReference.parse("int") == TypeReference("int")

    def test_lazy_repeated(self):
        tpe = TypeReference.parse("lazy int*")
        assert tpe.name == "int"
        assert tpe.lazy
        assert tpe.repeated
        assert not tpe.optional

    def test_optional(self):
        tpe = TypeReference.parse("java.net.URL?")
        assert tpe.name == "java.net.URL"
        assert tpe.optional
        assert not tpe.repeated

    @pytest.mark.parametrize("text", ["", "   ", "*", "lazy ?", None])
    def test_empty_rejected(self, text):
        with pytest.raises(SchemaError):
            TypeReference.parse(text)

    def test_repeated_and_optional_are_exclusive(self):
        """An optional array would lose element-wise equality."""
        with pytest.raises(SchemaError, match="both repeated and optional"):
            TypeReference("String", repeated=True, optional=True)

    @pytest.mark.parametrize("text", ["String*?", "String?*", "lazy int?*"])
    def test_stacked_suffixes_rejected(self, text):
        with pytest.raises(SchemaError):
            TypeReference.parse(text)


class TestParseSchema:
    """Converting JSON documents into the schema model."""

    def test_namespace_and_definitions(self, shapes_schema):
        assert shapes_schema.namespace == "com.example.shapes"
        assert [d.name for d in shapes_schema.definitions] == ["Color", "Shape"]

    def test_enumeration_symbols(self, shapes_schema):
        color = shapes_schema.definitions[0]
        assert isinstance(color, Enumeration)
        assert [v.name for v in color.values] == ["Red", "Blue"]
        assert color.values[0].doc == "Warm"
        assert color.values[1].doc is None

    def test_protocol_children_and_messages(self, shapes_schema):
        shape = shapes_schema.definitions[1]
        assert isinstance(shape, Protocol)
        assert shape.doc == "Base of all shapes.\nShapes are immutable."
        assert [c.name for c in shape.children] == ["Circle"]

        message = shape.messages[0]
        assert message.name == "area"
        assert message.response == TypeReference("double")
        assert message.arguments[0].name == "scale"
        assert message.arguments[0].doc == "Scale factor"

    def test_field_since_and_default(self, shapes_schema):
        circle = shapes_schema.definitions[1].children[0]
        assert isinstance(circle, Record)
        radius, label = circle.fields
        assert radius.since == VersionNumber()
        assert radius.default is None
        assert label.since == VersionNumber.parse("1.1")
        assert label.default == '""'

    def test_walk_threads_inherited_fields(self, shapes_schema):
        walked = {d.name: [f.name for f in inherited] for d, inherited in shapes_schema.walk()}
        assert walked == {"Color": [], "Shape": [], "Circle": ["color"]}

    def test_interface_is_protocol_alias(self):
        definition = parse_definition({"name": "Base", "type": "interface"})
        assert isinstance(definition, Protocol)

    def test_extra_string_split_into_lines(self):
        definition = parse_definition(
            {"name": "Thing", "type": "record", "extra": "// one\n// two"}
        )
        assert definition.extra == ("// one", "// two")

    def test_non_string_default_kept_as_expression(self):
        definition = parse_definition(
            {
                "name": "Counter",
                "type": "record",
                "fields": [{"name": "n", "type": "int", "since": 2, "default": 0}],
            }
        )
        assert definition.fields[0].default == "0"

    def test_has_lazy_fields(self, make_field):
        assert has_lazy_fields([make_field("a"), make_field("b", "lazy int")])
        assert not has_lazy_fields([make_field("a"), make_field("b", "int*")])


class TestParseSchemaErrors:
    """Malformed documents raise SchemaError naming the entry."""

    def test_document_must_be_object(self):
        with pytest.raises(SchemaError):
            parse_schema(["not", "an", "object"])

    def test_namespace_required(self):
        with pytest.raises(SchemaError, match="namespace"):
            parse_schema({"types": []})

    def test_unknown_kind(self):
        with pytest.raises(SchemaError, match="Widget"):
            parse_definition({"name": "Widget", "type": "widget"})

    def test_field_without_type(self):
        with pytest.raises(SchemaError, match="Point.x"):
            parse_definition({"name": "Point", "type": "record", "fields": [{"name": "x"}]})

    def test_message_without_response(self):
        with pytest.raises(SchemaError, match="Service.call"):
            parse_definition(
                {"name": "Service", "type": "protocol", "messages": [{"name": "call"}]}
            )

    def test_fields_must_be_list(self):
        with pytest.raises(SchemaError, match="fields"):
            parse_definition({"name": "Point", "type": "record", "fields": {}})
