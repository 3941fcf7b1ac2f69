"""Snapshot repositories - in-memory catalog of snapshots available to restore."""

from dataclasses import dataclass, field
from ..common.settings import Settings, SettingsSource, to_settings
from ..core.errors import RepositoryMissingError, SnapshotMissingError


@dataclass
class SnapshotInfo:
    """Point-in-time snapshot held by a repository."""

    name: str
    indices: list[str] = field(default_factory=list)
    shards: dict[str, int] = field(default_factory=dict)  # index -> shard count
    global_state: Settings | None = None

    def shard_count(self, index: str) -> int:
        return self.shards.get(index, 1)

    @property
    def has_global_state(self) -> bool:
        return self.global_state is not None


@dataclass
class Repository:
    """
    Named snapshot storage location.

    ``restore_settings`` lists the restore setting keys the repository
    understands; None accepts any key.
    """

    name: str
    settings: Settings = field(default_factory=lambda: Settings.EMPTY)
    restore_settings: set[str] | None = None
    snapshots: dict[str, SnapshotInfo] = field(default_factory=dict)

    def unsupported_settings(self, settings: Settings) -> list[str]:
        if self.restore_settings is None:
            return []
        return [key for key in settings if key not in self.restore_settings]


class RepositoryRegistry:
    """Registered repositories and their snapshots."""

    def __init__(self):
        self._repositories: dict[str, Repository] = {}

    def register_repository(
        self,
        name: str,
        settings: SettingsSource | None = None,
        restore_settings: set[str] | None = None,
    ) -> Repository:
        repository = Repository(
            name=name,
            settings=to_settings(settings) if settings is not None else Settings.EMPTY,
            restore_settings=restore_settings,
        )
        self._repositories[name] = repository
        return repository

    def add_snapshot(self, repository: str, snapshot: SnapshotInfo) -> SnapshotInfo:
        """
        Add a snapshot to a registered repository.

        Raises:
            RepositoryMissingError: If the repository is not registered
        """
        self.repository(repository).snapshots[snapshot.name] = snapshot
        return snapshot

    def repository(self, name: str) -> Repository:
        """
        Get a repository by name.

        Raises:
            RepositoryMissingError: If not registered
        """
        repository = self._repositories.get(name)
        if repository is None:
            raise RepositoryMissingError(name)
        return repository

    def snapshot(self, repository: str, name: str) -> SnapshotInfo:
        """
        Get a snapshot.

        Raises:
            RepositoryMissingError: If the repository is not registered
            SnapshotMissingError: If the snapshot does not exist
        """
        snapshot = self.repository(repository).snapshots.get(name)
        if snapshot is None:
            raise SnapshotMissingError(repository, name)
        return snapshot

    def list_repositories(self) -> list[str]:
        return sorted(self._repositories)
