"""Tests for settings loaders."""

import pytest

from snaprestore.common.settings_loader import (
    JsonSettingsLoader,
    PropertiesSettingsLoader,
    YamlSettingsLoader,
    flatten,
    load_source,
    loader_from_source,
)
from snaprestore.core.errors import SettingsParseError


class TestFormatDetection:
    """Loader detection tests."""

    @pytest.mark.parametrize(
        "source, loader",
        [
            ('{"a": 1}', JsonSettingsLoader),
            ('  \n {"a": 1}', JsonSettingsLoader),
            ("[1, 2]", JsonSettingsLoader),
            ("a: b", YamlSettingsLoader),
            ("# comment\nname: value", YamlSettingsLoader),
            ("---\na: b", YamlSettingsLoader),
            ("a=b", PropertiesSettingsLoader),
            ("url=http://localhost:9200", PropertiesSettingsLoader),
            ("key value", PropertiesSettingsLoader),
        ],
    )
    def test_detection(self, source, loader):
        """Test the leading structure picks the loader."""
        assert isinstance(loader_from_source(source), loader)


class TestJsonLoader:
    """JSON loader tests."""

    def test_nested(self):
        """Test nested objects and arrays flatten."""
        loaded = JsonSettingsLoader().load('{"a": {"b": 1, "c": [true, "x"]}}')

        assert loaded == {"a.b": "1", "a.c.0": "true", "a.c.1": "x"}

    def test_malformed(self):
        """Test syntax errors report the format."""
        with pytest.raises(SettingsParseError) as exc_info:
            JsonSettingsLoader().load('{"a": ')

        assert exc_info.value.source_format == "json"

    def test_non_object(self):
        """Test a top-level array is rejected."""
        with pytest.raises(SettingsParseError, match="expected an object"):
            load_source("[1, 2]")

    def test_duplicate_keys(self):
        """Test duplicate keys are rejected."""
        with pytest.raises(SettingsParseError, match="duplicate key"):
            JsonSettingsLoader().load('{"a": 1, "a": 2}')


class TestYamlLoader:
    """YAML loader tests."""

    def test_nested(self):
        """Test nested mappings flatten."""
        loaded = YamlSettingsLoader().load("a:\n  b: 1\n  c: [x, y]\nd: on\n")

        assert loaded["a.b"] == "1"
        assert loaded["a.c.1"] == "y"

    def test_malformed(self):
        """Test syntax errors raise a parse error."""
        with pytest.raises(SettingsParseError) as exc_info:
            load_source("a: [b")

        assert exc_info.value.source_format == "yaml"

    def test_non_mapping(self):
        """Test a scalar document is rejected."""
        with pytest.raises(SettingsParseError):
            load_source("a:b")

    def test_empty_document(self):
        """Test an empty document loads as no settings."""
        assert YamlSettingsLoader().load("# nothing here\n") == {}


class TestPropertiesLoader:
    """Properties loader tests."""

    @pytest.fixture
    def loader(self):
        return PropertiesSettingsLoader()

    def test_separators(self, loader):
        """Test '=', ':' and whitespace separators."""
        loaded = loader.load("a=1\nb: 2\nc 3\nd = 4\ne\n")

        assert loaded == {"a": "1", "b": "2", "c": "3", "d": "4", "e": ""}

    def test_comments(self, loader):
        """Test '#' and '!' lines are skipped."""
        assert loader.load("# hash\n! bang\n\na=1\n") == {"a": "1"}

    def test_continuation(self, loader):
        """Test trailing backslashes join lines."""
        loaded = loader.load("key = first \\\n    second\nother=x")

        assert loaded == {"key": "first second", "other": "x"}

    def test_escapes(self, loader):
        """Test escaped separators and unicode escapes."""
        loaded = loader.load("a\\=b=c\nk=\\u0041\\tz\npath=c\\\\tmp")

        assert loaded == {"a=b": "c", "k": "A\tz", "path": "c\\tmp"}

    def test_value_with_colon(self, loader):
        """Test only the first separator splits."""
        assert loader.load("url=http://localhost:9200") == {"url": "http://localhost:9200"}

    def test_empty_key(self, loader):
        """Test a line with no key is malformed."""
        with pytest.raises(SettingsParseError, match="line 2"):
            loader.load("a=1\n=value")


class TestFlatten:
    """Flattening tests."""

    def test_drops_none(self):
        """Test None values disappear."""
        assert flatten({"a": None, "b": {"c": None, "d": 1}}) == {"b.d": "1"}

    def test_blank_source(self):
        """Test blank text loads nothing."""
        assert load_source("") == {}
