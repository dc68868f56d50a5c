from __future__ import annotations

from edgedebug.models.resources import RESOURCE_KINDS
from edgedebug.services.distributor import distribute_by_kind
from tests.factories import record


def test_every_known_kind_has_a_bucket_even_when_empty() -> None:
    buckets = distribute_by_kind([])

    assert set(buckets) == set(RESOURCE_KINDS)
    assert all(bucket == [] for bucket in buckets.values())


def test_records_land_in_their_own_bucket_only() -> None:
    records = [
        record("default/a", "pod"),
        record("default/svc", "service"),
        record("default/b", "pod"),
        record("edge-node", "node"),
        record("default/cm", "configmap"),
        record("default/ep", "endpoint"),
        record("default/s", "secret"),
    ]

    buckets = distribute_by_kind(records)

    for kind in RESOURCE_KINDS:
        assert buckets[kind] == [item for item in records if item.kind == kind]
    assert sum(len(bucket) for bucket in buckets.values()) == len(records)
    assert [item.key for item in buckets["pod"]] == ["default/a", "default/b"]


def test_unknown_kinds_are_dropped() -> None:
    records = [
        record("default/a", "pod"),
        record("default/a-status", "podstatus"),
        record("default/x", "all"),
    ]

    buckets = distribute_by_kind(records)

    assert "podstatus" not in buckets
    assert "all" not in buckets
    assert sum(len(bucket) for bucket in buckets.values()) == 1
