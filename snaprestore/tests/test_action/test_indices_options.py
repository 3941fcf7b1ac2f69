"""Tests for indices options."""

import pytest
from pydantic import ValidationError

from snaprestore.action.indices_options import IndicesOptions


class TestIndicesOptions:
    """Indices options tests."""

    def test_presets(self):
        """Test the named presets."""
        strict = IndicesOptions.strict_expand_open()
        lenient = IndicesOptions.lenient_expand_open()

        assert strict.ignore_unavailable is False
        assert lenient.ignore_unavailable is True
        assert lenient.allow_no_indices is True
        assert lenient.expand_wildcards_open is True
        assert lenient.expand_wildcards_closed is False
        assert IndicesOptions.strict_expand_open_closed().expand_wildcards_closed is True

    def test_from_name(self):
        """Test preset lookup by name."""
        assert IndicesOptions.from_name("lenient_expand_open") == IndicesOptions.lenient_expand_open()

        with pytest.raises(ValueError, match="Unknown"):
            IndicesOptions.from_name("everything")

    def test_frozen(self):
        """Test options cannot be modified."""
        options = IndicesOptions.strict_expand_open()

        with pytest.raises(ValidationError):
            options.ignore_unavailable = True

    def test_from_parameters(self):
        """Test request parameters override the default."""
        options = IndicesOptions.from_parameters(
            "open,closed", "true", None, default=IndicesOptions.strict_expand_open()
        )

        assert options.ignore_unavailable is True
        assert options.allow_no_indices is True
        assert options.expand_wildcards_open is True
        assert options.expand_wildcards_closed is True

    def test_from_parameters_defaults(self):
        """Test absent parameters fall back to the default."""
        default = IndicesOptions.lenient_expand_open()

        assert IndicesOptions.from_parameters(None, None, None, default) == default

    @pytest.mark.parametrize(
        "wildcards, expected",
        [
            ("all", ["open", "closed"]),
            ("closed", ["closed"]),
            (["open"], ["open"]),
            ("none", ["none"]),
        ],
    )
    def test_expand_wildcards(self, wildcards, expected):
        """Test wildcard expansion values."""
        options = IndicesOptions.from_parameters(
            wildcards, None, None, IndicesOptions.strict_expand_open()
        )

        assert options.expand_wildcards_names() == expected
        assert options.expands_wildcards is (expected != ["none"])

    def test_invalid_parameters(self):
        """Test bad parameter values are rejected."""
        default = IndicesOptions.strict_expand_open()

        with pytest.raises(ValueError, match="expand wildcard"):
            IndicesOptions.from_parameters("bogus", None, None, default)
        with pytest.raises(ValueError, match="boolean"):
            IndicesOptions.from_parameters(None, "maybe", None, default)
