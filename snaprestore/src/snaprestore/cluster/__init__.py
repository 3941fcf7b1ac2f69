"""In-memory cluster - restore execution against local state."""

from .index_resolver import filter_indices, simple_match
from .rename import rename_indices
from .repository import Repository, RepositoryRegistry, SnapshotInfo
from .service import InMemoryClusterAdminClient

__all__ = [
    "InMemoryClusterAdminClient",
    "Repository",
    "RepositoryRegistry",
    "SnapshotInfo",
    "filter_indices",
    "simple_match",
    "rename_indices",
]
