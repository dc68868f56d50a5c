from __future__ import annotations

from edgedebug.models.resources import RESOURCE_KINDS, ResourceRecord


def distribute_by_kind(records: list[ResourceRecord]) -> dict[str, list[ResourceRecord]]:
    """Bucket records by kind.

    Every known kind gets a bucket, empty or not. Records whose stored type is
    not a known kind are left out.
    """
    buckets: dict[str, list[ResourceRecord]] = {kind: [] for kind in RESOURCE_KINDS}
    for record in records:
        bucket = buckets.get(record.kind)
        if bucket is not None:
            bucket.append(record)
    return buckets
