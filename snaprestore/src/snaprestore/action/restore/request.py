"""Restore request - which snapshot to restore and how."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import timedelta
from typing import Any

from pydantic import ValidationError

from ...common.settings import Settings, SettingsSource, to_settings
from ...common.unit import format_time_value, parse_time_value
from ...core.config import get_settings
from ...core.errors import ActionRequestValidationError, InvalidRequestSourceError
from ..indices_options import IndicesOptions
from .schemas import RestoreRequestBody

ALL_INDICES = "_all"


def _default_indices_options() -> IndicesOptions:
    return IndicesOptions.from_name(get_settings().default_indices_options)


def _default_master_node_timeout() -> timedelta:
    return parse_time_value(get_settings().master_node_timeout, "master_node_timeout")


@dataclass
class RestoreRequest:
    """
    Parameters for restoring indices from a snapshot.

    An empty ``indices`` list selects every index in the snapshot, same as
    ``["_all"]``. Entries may be names, ``*`` wildcards, ``-`` exclusions or
    ``+`` explicit inclusions, and are evaluated in order.

    Nothing is validated here beyond settings text parsing. Repository and
    snapshot presence, index resolution and rename collisions are checked by
    whoever executes the request.
    """

    repository: str = ""
    snapshot: str = ""
    indices: list[str] = field(default_factory=list)
    indices_options: IndicesOptions = field(default_factory=_default_indices_options)
    rename_pattern: str | None = None
    rename_replacement: str | None = None
    settings: Settings = field(default_factory=lambda: Settings.EMPTY)
    wait_for_completion: bool = False
    include_global_state: bool = False
    master_node_timeout: timedelta = field(default_factory=_default_master_node_timeout)

    def set_snapshot(self, snapshot: str) -> "RestoreRequest":
        self.snapshot = snapshot
        return self

    def set_repository(self, repository: str) -> "RestoreRequest":
        self.repository = repository
        return self

    def set_indices(self, *indices: str | list[str]) -> "RestoreRequest":
        """Replace the index list. Accepts varargs or a single list."""
        if len(indices) == 1 and isinstance(indices[0], (list, tuple)):
            self.indices = list(indices[0])
        else:
            self.indices = list(indices)  # type: ignore[arg-type]
        return self

    def set_indices_options(self, indices_options: IndicesOptions) -> "RestoreRequest":
        self.indices_options = indices_options
        return self

    def set_rename_pattern(self, rename_pattern: str) -> "RestoreRequest":
        # Compiled at execution time
        self.rename_pattern = rename_pattern
        return self

    def set_rename_replacement(self, rename_replacement: str) -> "RestoreRequest":
        self.rename_replacement = rename_replacement
        return self

    def set_settings(self, settings: SettingsSource) -> "RestoreRequest":
        """
        Replace repository-specific restore settings.

        Args:
            settings: ``Settings``, ``SettingsBuilder``, JSON/YAML/properties
                text, or a generic mapping

        Raises:
            SettingsParseError: If text input is malformed
        """
        self.settings = to_settings(settings)
        return self

    def set_wait_for_completion(self, wait_for_completion: bool) -> "RestoreRequest":
        self.wait_for_completion = wait_for_completion
        return self

    def set_include_global_state(self, include_global_state: bool) -> "RestoreRequest":
        self.include_global_state = include_global_state
        return self

    def set_master_node_timeout(self, timeout: str | timedelta) -> "RestoreRequest":
        self.master_node_timeout = parse_time_value(timeout, "master_node_timeout")
        return self

    @property
    def selects_all_indices(self) -> bool:
        """True when the index list selects every index in the snapshot."""
        return not self.indices or self.indices == [ALL_INDICES]

    def validate(self) -> ActionRequestValidationError | None:
        """
        Check required fields.

        Returns:
            Collected errors, or None if the request is well formed
        """
        validation = None
        if not self.snapshot:
            validation = _add(validation, "name is missing")
        if not self.repository:
            validation = _add(validation, "repository is missing")
        if self.indices is None:
            validation = _add(validation, "indices are missing")
        if self.indices_options is None:
            validation = _add(validation, "indicesOptions is missing")
        if self.settings is None:
            validation = _add(validation, "settings are missing")
        return validation

    def source(self, body: Mapping[str, Any]) -> "RestoreRequest":
        """
        Fill the request from a REST-style body.

        Raises:
            InvalidRequestSourceError: On unknown or malformed parameters
            SettingsParseError: If ``settings`` is malformed text
        """
        try:
            parsed = RestoreRequestBody.model_validate(dict(body))
        except ValidationError as e:
            raise InvalidRequestSourceError(f"Malformed restore request body: {e}") from e

        indices = parsed.index_list()
        if indices is not None:
            self.set_indices(indices)
        try:
            self.indices_options = IndicesOptions.from_parameters(
                parsed.expand_wildcards,
                parsed.ignore_unavailable,
                parsed.allow_no_indices,
                self.indices_options,
            )
        except ValueError as e:
            raise InvalidRequestSourceError(f"Malformed restore request body: {e}") from e
        if parsed.include_global_state is not None:
            self.include_global_state = parsed.include_global_state
        if parsed.rename_pattern is not None:
            self.rename_pattern = parsed.rename_pattern
        if parsed.rename_replacement is not None:
            self.rename_replacement = parsed.rename_replacement
        if parsed.settings is not None:
            self.set_settings(parsed.settings)
        return self

    def to_dict(self) -> dict[str, Any]:
        """Render the request body (the inverse of :meth:`source`)."""
        body: dict[str, Any] = {
            "indices": list(self.indices),
            "ignore_unavailable": self.indices_options.ignore_unavailable,
            "allow_no_indices": self.indices_options.allow_no_indices,
            "expand_wildcards": ",".join(self.indices_options.expand_wildcards_names()),
            "include_global_state": self.include_global_state,
        }
        if self.rename_pattern is not None:
            body["rename_pattern"] = self.rename_pattern
        if self.rename_replacement is not None:
            body["rename_replacement"] = self.rename_replacement
        if self.settings:
            body["settings"] = self.settings.as_nested()
        return body

    def describe(self) -> str:
        """Short form for log lines."""
        return (
            f"restore [{self.repository}:{self.snapshot}] indices={self.indices or [ALL_INDICES]} "
            f"wait_for_completion={self.wait_for_completion} "
            f"master_node_timeout={format_time_value(self.master_node_timeout)}"
        )


def _add(
    validation: ActionRequestValidationError | None, error: str
) -> ActionRequestValidationError:
    if validation is None:
        validation = ActionRequestValidationError()
    return validation.add_error(error)
