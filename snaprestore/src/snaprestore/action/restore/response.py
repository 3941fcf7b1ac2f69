"""Restore response models."""

from enum import Enum

from pydantic import BaseModel, Field


class RestoreStatus(Enum):
    """Outcome reported for a restore."""

    ACCEPTED = "accepted"
    OK = "ok"


class RestoreInfo(BaseModel):
    """Summary of a completed restore."""

    name: str
    indices: list[str] = Field(default_factory=list)
    total_shards: int = 0
    successful_shards: int = 0

    @property
    def failed_shards(self) -> int:
        return self.total_shards - self.successful_shards


class RestoreResponse(BaseModel):
    """
    Restore response.

    ``restore_info`` is only present when the caller waited for completion;
    otherwise the restore was merely accepted.
    """

    restore_info: RestoreInfo | None = None

    @property
    def accepted(self) -> bool:
        return self.restore_info is None

    @property
    def status(self) -> RestoreStatus:
        if self.restore_info is None:
            return RestoreStatus.ACCEPTED
        return RestoreStatus.OK
