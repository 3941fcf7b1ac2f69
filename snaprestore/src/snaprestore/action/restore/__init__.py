"""Snapshot restore action."""

from .builder import RestoreRequestBuilder
from .request import ALL_INDICES, RestoreRequest
from .response import RestoreInfo, RestoreResponse, RestoreStatus

__all__ = [
    "ALL_INDICES",
    "RestoreRequest",
    "RestoreRequestBuilder",
    "RestoreResponse",
    "RestoreInfo",
    "RestoreStatus",
]
