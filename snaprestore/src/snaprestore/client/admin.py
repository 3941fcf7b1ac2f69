"""Cluster admin client interface."""

from abc import ABC, abstractmethod

from ..action.listener import ActionListener
from ..action.restore.builder import RestoreRequestBuilder
from ..action.restore.request import RestoreRequest
from ..action.restore.response import RestoreResponse


class ClusterAdminClient(ABC):
    """Abstract base class for clients executing cluster admin operations."""

    @abstractmethod
    def restore_snapshot(
        self, request: RestoreRequest, listener: ActionListener[RestoreResponse]
    ) -> None:
        """
        Restore indices from a snapshot.

        Implementations own all validation of the request and must report
        every outcome through ``listener`` rather than raising.

        Args:
            request: Restore request
            listener: Receives the response or the failure
        """
        pass

    def prepare_restore_snapshot(
        self, repository: str | None = None, snapshot: str | None = None
    ) -> RestoreRequestBuilder:
        """Start building a restore request bound to this client."""
        return RestoreRequestBuilder(self, repository, snapshot)
