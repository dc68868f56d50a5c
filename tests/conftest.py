from __future__ import annotations

import logging
from collections.abc import Iterator
from pathlib import Path

import pytest

from tests.factories import pod_record, record, seed_store


@pytest.fixture(autouse=True)
def _isolated_environment(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:  # pyright: ignore[reportUnusedFunction]
    for name in ("EDGECORE_DB_PATH", "EDGEDEBUG_DB_PATH", "EDGEDEBUG_LOG_LEVEL", "EDGEDEBUG_LOG_FILE"):
        monkeypatch.delenv(name, raising=False)
    yield
    logger = logging.getLogger("edgedebug")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()


@pytest.fixture
def store_path(tmp_path: Path) -> Path:
    db_path = tmp_path / "edgecore.db"
    seed_store(
        db_path,
        [
            pod_record("nginx", namespace="default"),
            pod_record(
                "coredns",
                namespace="kube-system",
                node_name="edge-node-2",
                pod_ip="10.0.1.7",
                container_statuses=[
                    {"name": "coredns", "ready": True, "restartCount": 1},
                    {"name": "sidecar", "ready": False, "restartCount": 2},
                ],
            ),
            record("default/kubernetes", "service", {"metadata": {"name": "kubernetes"}}),
            record("default/app-config", "configmap", {"data": {"mode": "edge"}}),
            record("default/nginx-status", "podstatus", {"phase": "Running"}),
        ],
    )
    return db_path
