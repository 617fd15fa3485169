"""Tests for generator registration and lookup."""

import json

import pytest

from datatype_gen.codegen import generate_from_document
from datatype_gen.codegen.core.config import GeneratorConfig
from datatype_gen.codegen.languages.java import JavaGenerator
from datatype_gen.codegen.registry import (
    GeneratorRegistry,
    RegistryError,
    get_generator,
    get_language_info,
    get_registry,
    list_all_language_info,
    list_supported_languages,
)


@pytest.fixture
def registry():
    registry = GeneratorRegistry()
    registry.register("java", JavaGenerator, aliases=["jvm"])
    return registry


class TestRegistration:
    def test_register_and_resolve_alias(self, registry):
        assert registry.resolve("JVM") == "java"
        assert registry.resolve("java") == "java"
        assert registry.is_supported("Jvm")

    def test_rejects_non_generator_class(self, registry):
        with pytest.raises(RegistryError):
            registry.register("text", str)

    def test_alias_conflicting_with_language(self, registry):
        with pytest.raises(RegistryError, match="conflicts"):
            registry.register("kotlin", JavaGenerator, aliases=["java"])
        assert not registry.is_supported("kotlin")

    def test_duplicate_language_rejected(self, registry):
        with pytest.raises(RegistryError, match="conflicts"):
            registry.register("JAVA", JavaGenerator)
        assert registry.list_languages() == ["java"]

    def test_unknown_language(self, registry):
        with pytest.raises(RegistryError, match="Available: java"):
            registry.resolve("cobol")


class TestCreateGenerator:
    def test_from_dict_keeps_language_defaults(self, registry):
        generator = registry.create_generator("java", {"indent_size": 2})
        assert generator.config.indent_size == 2
        assert generator.java_config.optional_type == "java.util.Optional"

    def test_from_config_object(self, registry):
        config = GeneratorConfig(namespace="org.acme")
        assert registry.create_generator("jvm", config).config is config

    def test_from_config_file(self, registry, tmp_path):
        path = tmp_path / "java.json"
        path.write_text(json.dumps({"lazy_type": "sbt.Lazy"}))
        generator = registry.create_generator("java", path)
        assert generator.java_config.lazy_type == "sbt.Lazy"

    def test_invalid_java_setting_wrapped(self, registry):
        with pytest.raises(RegistryError, match="Failed to create java generator"):
            registry.create_generator("java", {"lazy_type": "not valid"})

    def test_invalid_config_type(self, registry):
        with pytest.raises(RegistryError, match="Invalid config type"):
            registry.create_generator("java", 42)


class TestGlobalRegistry:
    def test_java_available(self):
        assert "java" in list_supported_languages()
        assert get_registry().is_supported("jvm")
        assert isinstance(get_generator("java"), JavaGenerator)

    def test_language_info(self):
        info = get_language_info("jvm")
        assert info["name"] == "java"
        assert info["file_extension"] == ".java"
        assert info["class"] == "JavaGenerator"
        assert info["aliases"] == ["jvm"]

    def test_list_all_language_info(self):
        info = list_all_language_info()
        assert list(info) == ["java"]
        assert info["java"]["aliases"] == ["jvm"]

    def test_global_registry_is_shared(self):
        assert get_registry() is get_registry()

    def test_generate_from_document(self, schema_document):
        result = generate_from_document(schema_document)
        assert result.success
        assert sorted(result.units) == ["Circle.java", "Color.java", "Shape.java"]
