"""Tests for the Jinja2 template engine wrapper and its filters."""

from pathlib import Path

import pytest

from datatype_gen.codegen.core.naming import NameSanitizer, upper_first
from datatype_gen.codegen.core.templates import (
    TemplateEngine,
    TemplateError,
    create_template_engine,
    doc_comment,
)
from datatype_gen.codegen.languages.java import JavaGenerator


class TestDocComment:
    def test_single_line(self):
        assert doc_comment("First symbol") == "/** First symbol */"

    def test_multi_line(self):
        assert doc_comment("One.\n\nTwo.") == "/**\n * One.\n *\n * Two.\n */"

    def test_empty(self):
        assert doc_comment(None) == ""
        assert doc_comment("") == ""


class TestUpperFirst:
    def test_only_first_character_changes(self):
        assert upper_first("lazyInteger") == "LazyInteger"
        assert upper_first("x") == "X"
        assert upper_first("") == ""


class TestTemplateEngine:
    @pytest.fixture
    def engine(self, tmp_path):
        (tmp_path / "unit.j2").write_text("{{ name | upper_first }} {{ doc | doc_comment }}")
        (tmp_path / "type.j2").write_text("{{ t }}")
        return create_template_engine(tmp_path)

    def test_render_with_filters(self, engine):
        rendered = engine.render_template("unit.j2", {"name": "field", "doc": "Hi"})
        assert rendered == "Field /** Hi */"

    def test_generics_are_not_escaped(self, engine):
        rendered = engine.render_template("type.j2", {"t": "java.util.Optional<Integer>"})
        assert rendered == "java.util.Optional<Integer>"

    def test_undefined_variables_are_errors(self, engine):
        with pytest.raises(TemplateError, match="type.j2"):
            engine.render_template("type.j2", {})

    def test_missing_template(self):
        engine = TemplateEngine(Path("/nonexistent/templates"))
        with pytest.raises(TemplateError, match="class.java.j2"):
            engine.render_template("class.java.j2", {})

    def test_no_directory_finds_nothing(self):
        with pytest.raises(TemplateError):
            create_template_engine().render_template("class.java.j2", {})

    def test_java_templates_are_shipped(self):
        template_dir = JavaGenerator().get_template_directory()
        for name in ("class.java.j2", "enumeration.java.j2", "package.java.j2"):
            assert (template_dir / name).is_file()


class TestNameSanitizer:
    @pytest.fixture
    def sanitizer(self):
        return NameSanitizer(reserved_words={"class"}, builtin_types={"String"})

    def test_check_name(self, sanitizer):
        assert sanitizer.check_name("Point", "Type") is None
        assert sanitizer.check_name("class", "Type") == "Type 'class' is a reserved word"
        assert sanitizer.check_name("String", "Type") == "Type 'String' shadows a builtin type"
        assert sanitizer.check_name("9lives", "Type") == "Type '9lives' is not a valid identifier"
