from __future__ import annotations

import logging
from collections.abc import Sequence
from pathlib import Path
from typing import Protocol, TextIO

from pydantic import ValidationError

from edgedebug.errors import UsageError, validation_problems
from edgedebug.models.resources import KIND_SELECTORS, GetRequest, ResourceRecord
from edgedebug.services.namespace_filter import filter_by_namespace
from edgedebug.services.renderer import build_renderer

LOGGER = logging.getLogger("edgedebug.get")


class RecordSource(Protocol):
    def fetch_all(self, kind: str) -> list[ResourceRecord]:
        ...


def build_get_request(
    args: Sequence[str],
    *,
    namespace: str,
    all_namespaces: bool,
    output_format: str,
    db_path: Path,
) -> GetRequest:
    """Validate command input into a request; nothing here touches the store."""
    if len(args) != 1:
        raise UsageError(
            "need to specify exactly one type of resource, e.g: edgedebug get pod"
        )
    kind = args[0]
    if kind not in KIND_SELECTORS:
        raise UsageError(f"resource type {kind} is not available")

    try:
        return GetRequest(
            kind=kind,
            namespace=namespace,
            all_namespaces=all_namespaces,
            output_format=output_format,
            db_path=db_path,
        )
    except ValidationError as exc:
        details = "; ".join(validation_problems(exc))
        raise UsageError(f"invalid options: {details}") from exc


def run_get(source: RecordSource, request: GetRequest, out: TextIO) -> None:
    # An unknown format is rejected before the store is read.
    renderer = build_renderer(request.output_format)
    records = source.fetch_all(request.kind)
    records = filter_by_namespace(
        records,
        request.namespace,
        all_namespaces=request.all_namespaces,
    )
    LOGGER.debug(
        "rendering records kind=%s namespace=%s all_namespaces=%s count=%s",
        request.kind,
        request.namespace,
        request.all_namespaces,
        len(records),
    )
    renderer.render(records, out)
