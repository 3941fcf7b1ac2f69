#!/usr/bin/env python3
"""
snaprestore Demo Script

Showcases key capabilities:
1. Building a restore request with multi-index selection
2. Settings in every supported representation
3. Renaming restored indices
4. Deferred validation through listeners

Usage:
    python demo.py
"""

import asyncio
import json

from snaprestore.action import wrap
from snaprestore.cluster import InMemoryClusterAdminClient, RepositoryRegistry, SnapshotInfo
from snaprestore.common import Settings
from snaprestore.core.logging import configure_logging


def print_header(title: str) -> None:
    """Print a section header."""
    print(f"\n{'='*60}")
    print(f"  {title}")
    print(f"{'='*60}\n")


def print_json(data: dict) -> None:
    """Pretty print JSON data."""
    print(json.dumps(data, indent=2, default=str))


def build_cluster() -> InMemoryClusterAdminClient:
    """Create a cluster with one repository holding one snapshot."""
    registry = RepositoryRegistry()
    registry.register_repository("backups", settings="location: /mnt/backups")
    registry.add_snapshot(
        "backups",
        SnapshotInfo(
            name="nightly",
            indices=["logs-2019-12", "logs-2020-01", "logs-2020-02", "metrics-2020-01"],
            shards={"logs-2020-01": 3, "logs-2020-02": 3},
            global_state=Settings({"cluster.routing.allocation.enable": "all"}),
        ),
    )
    return InMemoryClusterAdminClient(registry, open_indices={"logs-2020-02"})


def demo_selection(client: InMemoryClusterAdminClient) -> None:
    """Demo: Multi-index selection"""
    print_header("1. MULTI-INDEX SELECTION")

    builder = (
        client.prepare_restore_snapshot("backups", "nightly")
        .set_indices("-logs-2020*", "+logs-2020-01")
        .set_wait_for_completion(True)
    )
    print("Request body:")
    print_json(builder.request.to_dict())

    response = builder.get(timeout=5)
    print("\nRestored:")
    print_json(response.restore_info.model_dump())


def demo_settings(client: InMemoryClusterAdminClient) -> None:
    """Demo: Settings representations"""
    print_header("2. SETTINGS REPRESENTATIONS")

    builder = client.prepare_restore_snapshot("backups", "nightly")
    for source in (
        '{"compress": true, "chunk": {"size": "1mb"}}',
        "compress: true\nchunk:\n  size: 1mb",
        "compress=true\nchunk.size=1mb",
        {"compress": True, "chunk": {"size": "1mb"}},
        Settings.builder().put("compress", True).put("chunk.size", "1mb"),
    ):
        builder.set_settings(source)
        print(f"{type(source).__name__:>16} -> {builder.request.settings.as_dict()}")


def demo_rename(client: InMemoryClusterAdminClient) -> None:
    """Demo: Renaming restored indices"""
    print_header("3. RENAMING")

    response = (
        client.prepare_restore_snapshot("backups", "nightly")
        .set_indices("logs-2020-02")
        .set_rename_pattern("logs-(.+)")
        .set_rename_replacement("restored-logs-$1")
        .set_wait_for_completion(True)
        .get(timeout=5)
    )
    print(f"Restored as: {response.restore_info.indices}")


def demo_deferred_validation(client: InMemoryClusterAdminClient) -> None:
    """Demo: Errors arrive through the listener"""
    print_header("4. DEFERRED VALIDATION")

    builder = (
        client.prepare_restore_snapshot("backups", "nightly")
        .set_indices("logs-2020-*")
        .set_rename_pattern(r"logs-2020-\d+")
        .set_rename_replacement("logs-2020")
    )
    print("Request built without error, submitting...")
    builder.execute(
        wrap(
            lambda response: print(f"Unexpected success: {response}"),
            lambda exc: print(f"Listener received {type(exc).__name__}: {exc}"),
        )
    )


async def demo_async(client: InMemoryClusterAdminClient) -> None:
    """Demo: Awaiting a restore"""
    print_header("5. ASYNC EXECUTION")

    response = await (
        client.prepare_restore_snapshot("backups", "nightly")
        .set_indices("logs-2019-12")
        .set_rename_pattern("^")
        .set_rename_replacement("copy-")
        .set_restore_global_state(True)
        .set_wait_for_completion(True)
        .execute_async()
    )
    print(f"Status: {response.status.value}, indices: {response.restore_info.indices}")
    print(f"Persistent settings: {client.persistent_settings.as_dict()}")


def main() -> None:
    """Run all demos."""
    configure_logging()
    client = build_cluster()
    try:
        demo_selection(client)
        demo_settings(client)
        demo_rename(client)
        demo_deferred_validation(client)
        asyncio.run(demo_async(client))
    finally:
        client.shutdown()


if __name__ == "__main__":
    main()
