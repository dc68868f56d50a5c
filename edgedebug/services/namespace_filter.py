from __future__ import annotations

import logging

from edgedebug.models.resources import ResourceRecord

LOGGER = logging.getLogger("edgedebug.filter")


def extract_namespace(key: str) -> str:
    """Namespace part of a `<namespace>/<name>` key; empty when there is no `/`."""
    namespace, separator, _ = key.partition("/")
    if not separator:
        return ""
    return namespace


def filter_by_namespace(
    records: list[ResourceRecord],
    namespace: str,
    *,
    all_namespaces: bool,
) -> list[ResourceRecord]:
    if all_namespaces:
        return records

    matched = [record for record in records if extract_namespace(record.key) == namespace]
    LOGGER.debug(
        "filtered records namespace=%s kept=%s dropped=%s",
        namespace,
        len(matched),
        len(records) - len(matched),
    )
    return matched
