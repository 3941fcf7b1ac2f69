"""Restore request builder - fluent assembly and hand-off of a restore."""

from datetime import timedelta
from typing import TYPE_CHECKING

from ...common.settings import SettingsSource
from ..indices_options import IndicesOptions
from ..listener import ActionListener, FutureListener
from ..submitter import ActionSubmitter
from .request import RestoreRequest
from .response import RestoreResponse

if TYPE_CHECKING:
    from ...client.admin import ClusterAdminClient


class RestoreRequestBuilder:
    """
    Fluent builder for restore requests.

    Every setter replaces its field and returns the builder. The builder
    never validates; :meth:`execute` passes the request to the cluster admin
    client as is, and any domain errors come back through the listener.

    Example:
        client.prepare_restore_snapshot("repo1", "snap1") \\
            .set_indices("-logs-2020*", "+logs-2020-01") \\
            .set_wait_for_completion(True) \\
            .execute(listener)
    """

    def __init__(
        self,
        client: "ClusterAdminClient",
        repository: str | None = None,
        snapshot: str | None = None,
    ):
        """
        Create a builder over an empty request, or one seeded with
        ``repository`` and ``snapshot``.
        """
        request = RestoreRequest()
        if repository is not None:
            request.set_repository(repository)
        if snapshot is not None:
            request.set_snapshot(snapshot)
        self._submitter: ActionSubmitter[RestoreRequest, RestoreResponse] = ActionSubmitter(
            request, client.restore_snapshot, action_name="restore_snapshot"
        )

    @property
    def request(self) -> RestoreRequest:
        return self._submitter.request

    def set_snapshot(self, snapshot: str) -> "RestoreRequestBuilder":
        self.request.set_snapshot(snapshot)
        return self

    def set_repository(self, repository: str) -> "RestoreRequestBuilder":
        self.request.set_repository(repository)
        return self

    def set_indices(self, *indices: str) -> "RestoreRequestBuilder":
        """
        Set the indices to restore, replacing any earlier list.

        Supports multi-index syntax: ``"+test*", "-test42"`` restores every
        index prefixed with ``test`` except ``test42``. An empty list or
        ``"_all"`` restores all open indices in the snapshot.
        """
        self.request.set_indices(*indices)
        return self

    def set_indices_options(self, indices_options: IndicesOptions) -> "RestoreRequestBuilder":
        """Set how unavailable indices and wildcard expressions are handled."""
        self.request.set_indices_options(indices_options)
        return self

    def set_rename_pattern(self, rename_pattern: str) -> "RestoreRequestBuilder":
        """
        Set the regular expression applied to restored index names.

        Matching names are rewritten with the rename replacement. The restore
        fails if two indices end up with the same name.
        """
        self.request.set_rename_pattern(rename_pattern)
        return self

    def set_rename_replacement(self, rename_replacement: str) -> "RestoreRequestBuilder":
        """Set the rename replacement; ``$1`` or ``${name}`` reference groups."""
        self.request.set_rename_replacement(rename_replacement)
        return self

    def set_settings(self, settings: SettingsSource) -> "RestoreRequestBuilder":
        """
        Set repository-specific restore settings.

        Accepts ``Settings``, ``SettingsBuilder``, JSON/YAML/properties text
        or a mapping. Replaces any previously set settings.

        Raises:
            SettingsParseError: If text input is malformed
        """
        self.request.set_settings(settings)
        return self

    def set_wait_for_completion(self, wait_for_completion: bool) -> "RestoreRequestBuilder":
        """If true, the response is only delivered once the restore completes."""
        self.request.set_wait_for_completion(wait_for_completion)
        return self

    def set_restore_global_state(self, restore_global_state: bool) -> "RestoreRequestBuilder":
        """
        If true, also restore global cluster state.

        Global state includes persistent settings and index templates.
        """
        self.request.set_include_global_state(restore_global_state)
        return self

    def set_master_node_timeout(self, timeout: str | timedelta) -> "RestoreRequestBuilder":
        self.request.set_master_node_timeout(timeout)
        return self

    def execute(
        self, listener: ActionListener[RestoreResponse] | None = None
    ) -> FutureListener[RestoreResponse] | None:
        """
        Submit the request.

        Args:
            listener: Completion listener. When omitted, a future-backed
                listener is created and returned.

        Returns:
            The future listener when no listener was given, else None
        """
        if listener is None:
            return self._submitter.execute_future()
        self._submitter.execute(listener)
        return None

    def get(self, timeout: float | None = None) -> RestoreResponse:
        """Submit and block until the response (or failure) arrives."""
        return self._submitter.execute_future().get(timeout=timeout)

    async def execute_async(self) -> RestoreResponse:
        """Submit and await the response."""
        return await self._submitter.execute_async()
