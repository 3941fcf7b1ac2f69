"""In-memory cluster admin client - executes restores against local state."""

import logging
import threading
from concurrent.futures import ThreadPoolExecutor

from ..action.listener import ActionListener
from ..action.restore.request import RestoreRequest
from ..action.restore.response import RestoreInfo, RestoreResponse
from ..client.admin import ClusterAdminClient
from ..common.settings import Settings
from ..core.config import AppSettings, get_settings
from ..core.errors import SnapRestoreError, SnapshotRestoreError
from .index_resolver import filter_indices
from .rename import rename_indices
from .repository import RepositoryRegistry

logger = logging.getLogger(__name__)


class InMemoryClusterAdminClient(ClusterAdminClient):
    """
    Cluster admin client backed by an in-memory repository registry.

    Performs all restore validation deferred by the request builder:
    - Required request fields
    - Repository and snapshot existence
    - Index expression resolution
    - Rename application and collision detection
    - Restore setting support and open index conflicts

    Restored indices become open indices of the local cluster.
    """

    def __init__(
        self,
        registry: RepositoryRegistry | None = None,
        open_indices: set[str] | None = None,
        closed_indices: set[str] | None = None,
        settings: AppSettings | None = None,
    ):
        self.settings = settings or get_settings()
        self.registry = registry or RepositoryRegistry()
        self.open_indices: set[str] = set(open_indices or ())
        self.closed_indices: set[str] = set(closed_indices or ())
        self.persistent_settings: Settings = Settings.EMPTY

        self._lock = threading.Lock()
        self._executor: ThreadPoolExecutor | None = None
        if self.settings.listener_threads > 0:
            self._executor = ThreadPoolExecutor(
                max_workers=self.settings.listener_threads,
                thread_name_prefix="snaprestore-restore",
            )

    def restore_snapshot(
        self, request: RestoreRequest, listener: ActionListener[RestoreResponse]
    ) -> None:
        if self._executor is not None:
            self._executor.submit(self._run, request, listener)
        else:
            self._run(request, listener)

    def shutdown(self) -> None:
        """Stop the listener thread pool, if any."""
        if self._executor is not None:
            self._executor.shutdown(wait=True)
            self._executor = None

    def _run(self, request: RestoreRequest, listener: ActionListener[RestoreResponse]) -> None:
        try:
            response = self._restore(request)
        except SnapRestoreError as e:
            logger.warning("Failed to %s: %s", request.describe(), e)
            listener.on_failure(e)
            return
        except Exception as e:
            logger.exception("Unexpected failure during %s", request.describe())
            listener.on_failure(e)
            return
        listener.on_response(response)

    def _restore(self, request: RestoreRequest) -> RestoreResponse:
        validation = request.validate()
        if validation is not None:
            raise validation

        repository = self.registry.repository(request.repository)
        snapshot = self.registry.snapshot(request.repository, request.snapshot)

        unsupported = repository.unsupported_settings(request.settings)
        if unsupported:
            raise SnapshotRestoreError(
                request.repository,
                request.snapshot,
                f"unsupported restore settings {unsupported}",
            )

        indices = filter_indices(snapshot.indices, request.indices, request.indices_options)
        try:
            renamed = rename_indices(
                indices, request.rename_pattern, request.rename_replacement
            )
        except ValueError as e:
            raise SnapshotRestoreError(request.repository, request.snapshot, str(e)) from e

        with self._lock:
            for target in renamed.values():
                if target in self.open_indices:
                    raise SnapshotRestoreError(
                        request.repository,
                        request.snapshot,
                        f"cannot restore index [{target}] because it's open",
                    )

            for target in renamed.values():
                self.closed_indices.discard(target)
                self.open_indices.add(target)

            if request.include_global_state and snapshot.global_state is not None:
                self.persistent_settings = (
                    Settings.builder()
                    .put_all(self.persistent_settings)
                    .put_all(snapshot.global_state)
                    .build()
                )

        total_shards = sum(snapshot.shard_count(index) for index in renamed)
        info = RestoreInfo(
            name=snapshot.name,
            indices=list(renamed.values()),
            total_shards=total_shards,
            successful_shards=total_shards,
        )
        logger.info(
            "Restored [%s:%s] indices=%s global_state=%s",
            request.repository,
            request.snapshot,
            info.indices,
            request.include_global_state and snapshot.has_global_state,
        )

        if not request.wait_for_completion:
            return RestoreResponse()
        return RestoreResponse(restore_info=info)
