import logging

import pytest
from pydantic import ValidationError

from MarkDoc.config import ConversionOptions, load_options


def test_defaults():
    options = load_options()
    assert options == ConversionOptions()
    assert options.author == "Markdown to DOC Converter"
    assert options.title == "Converted Document"


def test_yaml_file_values(tmp_path):
    path = tmp_path / "options.yaml"
    path.write_text("author: Jane\ntitle: Report\n", encoding="utf-8")
    assert load_options(path) == ConversionOptions(author="Jane", title="Report")


def test_precedence_file_then_env_then_overrides(tmp_path, monkeypatch):
    path = tmp_path / "options.yaml"
    path.write_text("author: File\ntitle: File title\n", encoding="utf-8")
    monkeypatch.setenv("MARKDOC_AUTHOR", "Env")
    monkeypatch.setenv("MARKDOC_TITLE", "Env title")

    options = load_options(path, overrides={"title": "Cli title", "author": None})
    assert options.author == "Env"
    assert options.title == "Cli title"


def test_unknown_keys_are_ignored_with_warning(tmp_path, caplog):
    path = tmp_path / "options.yaml"
    path.write_text("author: A\ncolour: blue\n", encoding="utf-8")
    with caplog.at_level(logging.WARNING, logger="MarkDoc.config"):
        options = load_options(path)
    assert options.author == "A"
    assert "colour" in caplog.text


def test_empty_file_gives_defaults(tmp_path):
    path = tmp_path / "options.yaml"
    path.write_text("", encoding="utf-8")
    assert load_options(path) == ConversionOptions()


@pytest.mark.parametrize("content", ["- a\n- b\n", "author: [unclosed\n"])
def test_invalid_yaml_raises_value_error(tmp_path, content):
    path = tmp_path / "options.yaml"
    path.write_text(content, encoding="utf-8")
    with pytest.raises(ValueError):
        load_options(path)


def test_missing_file_raises_value_error(tmp_path):
    with pytest.raises(ValueError):
        load_options(tmp_path / "absent.yaml")


@pytest.mark.parametrize("content", ["author: [1, 2]\n", "title: {nested: true}\n", "author: 42\n"])
def test_non_string_values_are_rejected(tmp_path, content):
    path = tmp_path / "options.yaml"
    path.write_text(content, encoding="utf-8")
    with pytest.raises(ValueError, match="Invalid options"):
        load_options(path)


def test_non_string_override_is_rejected():
    with pytest.raises(ValueError):
        load_options(overrides={"title": ["a", "b"]})


def test_options_are_frozen():
    options = ConversionOptions()
    with pytest.raises(ValidationError):
        options.author = "Someone"
