"""Shared fixtures for datatype_gen tests."""

import logging

import pytest

from datatype_gen.codegen.core.schema import (
    Enumeration,
    EnumerationValue,
    Field,
    Protocol,
    Record,
    Schema,
    TypeReference,
    VersionNumber,
    parse_schema,
)
from datatype_gen.codegen.languages.java import JavaGenerator
from datatype_gen.logging_config import PACKAGE_LOGGER


def make_field(name, tpe="int", since=None, default=None, doc=None):
    """Build a Field from the compact type spelling used in schema files."""
    return Field(
        name=name,
        type=TypeReference.parse(tpe),
        since=VersionNumber.parse(since),
        default=default,
        doc=doc,
    )


@pytest.fixture(name="make_field")
def _make_field_fixture():
    return make_field


@pytest.fixture(autouse=True)
def _restore_package_logger():
    # The CLI installs a handler on the package logger; undo it per test.
    logger = logging.getLogger(PACKAGE_LOGGER)
    handlers = list(logger.handlers)
    level, propagate = logger.level, logger.propagate
    yield
    logger.handlers[:] = handlers
    logger.setLevel(level)
    logger.propagate = propagate


@pytest.fixture
def java_generator():
    """Java generator targeting a library with its own lazy/optional types."""
    return JavaGenerator(
        {
            "custom": {
                "lazy_type": "com.example.MyLazy",
                "optional_type": "com.example.MyOption",
            }
        }
    )


@pytest.fixture
def simple_enumeration():
    return Enumeration(
        name="simpleEnumerationExample",
        doc="Example of simple enumeration",
        values=(
            EnumerationValue("first", doc="First symbol"),
            EnumerationValue("second"),
        ),
        extra=("// Some extra code...",),
    )


@pytest.fixture
def one_child_protocol():
    return Protocol(
        name="oneChildInterfaceExample",
        doc="example of interface",
        fields=(make_field("field"),),
        children=(Record(name="childRecord", fields=(make_field("x"),)),),
    )


@pytest.fixture
def growable_record():
    return Record(
        name="growableAddOneField",
        fields=(make_field("field", since="0.1.0", default="0"),),
    )


@pytest.fixture
def schema_document():
    """A JSON schema document covering every definition kind."""
    return {
        "namespace": "com.example.shapes",
        "types": [
            {
                "name": "Color",
                "type": "enumeration",
                "doc": "Fill colors",
                "symbols": [{"name": "Red", "doc": "Warm"}, "Blue"],
            },
            {
                "name": "Shape",
                "type": "protocol",
                "doc": ["Base of all shapes.", "Shapes are immutable."],
                "fields": [{"name": "color", "type": "Color"}],
                "messages": [
                    {
                        "name": "area",
                        "response": "double",
                        "doc": "Computes the area.",
                        "request": [
                            {"name": "scale", "type": "double", "doc": "Scale factor"}
                        ],
                    }
                ],
                "types": [
                    {
                        "name": "Circle",
                        "type": "record",
                        "fields": [
                            {"name": "radius", "type": "double"},
                            {
                                "name": "label",
                                "type": "String",
                                "since": "1.1",
                                "default": '""',
                            },
                        ],
                    }
                ],
            },
        ],
    }


@pytest.fixture
def shapes_schema(schema_document):
    return parse_schema(schema_document)


@pytest.fixture
def empty_schema():
    return Schema(namespace="com.example")
