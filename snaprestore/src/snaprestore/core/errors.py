"""Exception hierarchy for snaprestore."""


class SnapRestoreError(Exception):
    """Base class for all snaprestore errors."""


class SettingsParseError(SnapRestoreError, ValueError):
    """Serialized settings text could not be parsed."""

    def __init__(self, message: str, source_format: str | None = None):
        super().__init__(message)
        self.source_format = source_format


class InvalidRequestSourceError(SnapRestoreError, ValueError):
    """A request body contained unknown or malformed parameters."""


class ActionRequestValidationError(SnapRestoreError):
    """Collected validation failures for a request."""

    def __init__(self, errors: list[str] | None = None):
        self.errors: list[str] = list(errors or [])
        super().__init__(self._format())

    def add_error(self, error: str) -> "ActionRequestValidationError":
        self.errors.append(error)
        self.args = (self._format(),)
        return self

    def _format(self) -> str:
        parts = "".join(f"{i}: {e};" for i, e in enumerate(self.errors, start=1))
        return f"Validation Failed: {parts}"


class RepositoryMissingError(SnapRestoreError):
    """The named snapshot repository is not registered."""

    def __init__(self, repository: str):
        super().__init__(f"[{repository}] missing")
        self.repository = repository


class SnapshotMissingError(SnapRestoreError):
    """The named snapshot does not exist in the repository."""

    def __init__(self, repository: str, snapshot: str):
        super().__init__(f"[{repository}:{snapshot}] is missing")
        self.repository = repository
        self.snapshot = snapshot


class IndexMissingError(SnapRestoreError):
    """An index name or pattern resolved to nothing."""

    def __init__(self, index: str):
        super().__init__(f"[{index}] missing")
        self.index = index


class SnapshotRestoreError(SnapRestoreError):
    """A restore could not proceed against the current cluster state."""

    def __init__(self, repository: str, snapshot: str, message: str):
        super().__init__(f"[{repository}:{snapshot}] {message}")
        self.repository = repository
        self.snapshot = snapshot
