"""Clients."""

from .admin import ClusterAdminClient

__all__ = ["ClusterAdminClient"]
