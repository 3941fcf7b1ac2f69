"""Tests for the restore request."""

from datetime import timedelta

import pytest

from snaprestore.action.indices_options import IndicesOptions
from snaprestore.action.restore.request import RestoreRequest
from snaprestore.common.settings import Settings
from snaprestore.core.errors import InvalidRequestSourceError, SettingsParseError


@pytest.fixture
def request_():
    """Create a request seeded with repository and snapshot."""
    return RestoreRequest("repo1", "snap1")


class TestRestoreRequestDefaults:
    """Default value tests."""

    def test_empty_request(self):
        """Test an empty request."""
        request = RestoreRequest()

        assert request.repository == ""
        assert request.snapshot == ""
        assert request.indices == []
        assert request.indices_options == IndicesOptions.lenient_expand_open()
        assert request.rename_pattern is None
        assert request.rename_replacement is None
        assert request.settings == Settings.EMPTY
        assert request.wait_for_completion is False
        assert request.include_global_state is False
        assert request.master_node_timeout == timedelta(seconds=30)

    def test_empty_indices_select_all(self, request_):
        """Test no indices and _all both mean every index."""
        assert request_.selects_all_indices is True

        request_.set_indices("_all")
        assert request_.selects_all_indices is True

        request_.set_indices("logs-*")
        assert request_.selects_all_indices is False


class TestRestoreRequestMutators:
    """Mutator tests."""

    def test_mutators_return_self(self, request_):
        """Test every mutator chains."""
        assert request_.set_snapshot("s") is request_
        assert request_.set_repository("r") is request_
        assert request_.set_indices("a") is request_
        assert request_.set_indices_options(IndicesOptions.strict_expand_open()) is request_
        assert request_.set_rename_pattern("(.+)") is request_
        assert request_.set_rename_replacement("$1") is request_
        assert request_.set_settings({"a": 1}) is request_
        assert request_.set_wait_for_completion(True) is request_
        assert request_.set_include_global_state(True) is request_
        assert request_.set_master_node_timeout("1m") is request_

    def test_set_indices_replaces(self, request_):
        """Test a second call replaces rather than appends."""
        request_.set_indices("a", "b")
        request_.set_indices("c")

        assert request_.indices == ["c"]

    def test_set_indices_list(self, request_):
        """Test a single list argument is accepted."""
        request_.set_indices(["-logs-2020*", "+logs-2020-01"])

        assert request_.indices == ["-logs-2020*", "+logs-2020-01"]

    def test_rename_replacement_alone(self, request_):
        """Test a replacement without a pattern is accepted as is."""
        request_.set_rename_replacement("restored_$1")

        assert request_.rename_pattern is None
        assert request_.rename_replacement == "restored_$1"

    def test_rename_pattern_not_compiled(self, request_):
        """Test an invalid pattern is stored verbatim."""
        request_.set_rename_pattern("(unclosed")

        assert request_.rename_pattern == "(unclosed"

    def test_settings_last_call_wins(self, request_):
        """Test a second settings call replaces the first, whatever the form."""
        request_.set_settings({"a": "1"})
        request_.set_settings("b=2")

        assert request_.settings == {"b": "2"}

    def test_malformed_settings(self, request_):
        """Test malformed text raises and leaves settings untouched."""
        request_.set_settings({"a": "1"})

        with pytest.raises(SettingsParseError):
            request_.set_settings('{"b": ')

        assert request_.settings == {"a": "1"}

    def test_master_node_timeout(self, request_):
        """Test timeouts accept strings and timedeltas."""
        request_.set_master_node_timeout("1m")
        assert request_.master_node_timeout == timedelta(minutes=1)

        request_.set_master_node_timeout(timedelta(seconds=5))
        assert request_.master_node_timeout == timedelta(seconds=5)


class TestRestoreRequestValidation:
    """Validation tests."""

    def test_missing_fields(self):
        """Test missing snapshot and repository are both reported."""
        validation = RestoreRequest().validate()

        assert validation is not None
        assert validation.errors == ["name is missing", "repository is missing"]

    def test_valid(self, request_):
        """Test a seeded request validates."""
        assert request_.validate() is None


class TestRestoreRequestSource:
    """Request body tests."""

    def test_source(self, request_):
        """Test a REST-style body fills the request."""
        request_.source(
            {
                "indices": "logs-1, logs-2",
                "ignore_unavailable": False,
                "expand_wildcards": "open,closed",
                "include_global_state": "true",
                "rename_pattern": "logs-(.+)",
                "rename_replacement": "restored-logs-$1",
                "settings": {"compress": True},
            }
        )

        assert request_.indices == ["logs-1", "logs-2"]
        assert request_.indices_options.ignore_unavailable is False
        assert request_.indices_options.expand_wildcards_closed is True
        assert request_.include_global_state is True
        assert request_.rename_pattern == "logs-(.+)"
        assert request_.rename_replacement == "restored-logs-$1"
        assert request_.settings == {"compress": "true"}

    def test_source_settings_text(self, request_):
        """Test settings may be given as text."""
        request_.source({"settings": "compress: true"})

        assert request_.settings == {"compress": "true"}

    def test_unknown_parameter(self, request_):
        """Test unknown keys are rejected."""
        with pytest.raises(InvalidRequestSourceError, match="bogus"):
            request_.source({"bogus": 1})

    def test_malformed_expand_wildcards(self, request_):
        """Test unknown wildcard states are rejected as a bad body."""
        with pytest.raises(InvalidRequestSourceError, match="bogus"):
            request_.source({"expand_wildcards": "bogus"})

    def test_malformed_flag(self, request_):
        """Test non-boolean option flags are rejected as a bad body."""
        with pytest.raises(InvalidRequestSourceError):
            request_.source({"ignore_unavailable": "sometimes"})

    def test_to_dict_feeds_source(self, request_):
        """Test the rendered body rebuilds an equivalent request."""
        request_.set_indices("a", "-b").set_rename_pattern("a").set_rename_replacement("c")
        request_.set_settings({"chunk": {"size": "1mb"}}).set_include_global_state(True)

        rebuilt = RestoreRequest("repo1", "snap1").source(request_.to_dict())

        assert rebuilt == request_
