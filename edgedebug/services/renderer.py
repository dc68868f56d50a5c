from __future__ import annotations

import json
import logging
import math
from collections.abc import Callable, Sequence
from typing import Any, Protocol, TextIO

import yaml

from edgedebug.errors import DecodeError, UsageError
from edgedebug.models.pod import WorkloadSummary
from edgedebug.models.resources import ResourceRecord
from edgedebug.services.distributor import distribute_by_kind
from edgedebug.services.pod_summary import summarize_pods

LOGGER = logging.getLogger("edgedebug.render")

TABLE_HEADER: tuple[str, ...] = ("NAME", "STATUS", "RESTARTS", "READY", "IP", "NODE")
TABLE_MIN_WIDTH = 8
TABLE_PADDING = 3
ITEM_API_VERSION = "v1"


class Renderer(Protocol):
    def render(self, records: list[ResourceRecord], out: TextIO) -> None:
        ...


class TableRenderer:
    """kubectl-style pod table; records of other kinds are ignored."""

    def render(self, records: list[ResourceRecord], out: TextIO) -> None:
        pods = distribute_by_kind(records)["pod"]
        summaries = summarize_pods(pods)
        for line in format_table([TABLE_HEADER, *(_summary_row(s) for s in summaries)]):
            out.write(line + "\n")


class JsonRenderer:
    def render(self, records: list[ResourceRecord], out: TextIO) -> None:
        document = json.dumps(
            build_list_envelope(records),
            indent="\t",
            allow_nan=False,
            sort_keys=True,
            ensure_ascii=False,
        )
        out.write(document + "\n")


class YamlRenderer:
    def render(self, records: list[ResourceRecord], out: TextIO) -> None:
        document = yaml.safe_dump(
            build_list_envelope(records),
            default_flow_style=False,
            sort_keys=True,
            allow_unicode=True,
        )
        out.write(document)


_RENDERERS: dict[str, Callable[[], Renderer]] = {
    "": TableRenderer,
    "json": JsonRenderer,
    "yaml": YamlRenderer,
}


def build_renderer(output_format: str) -> Renderer:
    renderer_factory = _RENDERERS.get(output_format)
    if renderer_factory is None:
        allowed = ", ".join(repr(name) for name in _RENDERERS)
        raise UsageError(f"unsupported output format {output_format!r}, expected one of {allowed}")
    LOGGER.debug("selected renderer format=%r", output_format)
    return renderer_factory()


def build_list_envelope(records: list[ResourceRecord]) -> dict[str, Any]:
    """Wrap raw records in a `v1` List, tagging each item with its own kind."""
    return {
        "apiVersion": ITEM_API_VERSION,
        "kind": "List",
        "metadata": {"resourceVersion": "", "selfLink": ""},
        "items": [_record_to_item(record) for record in records],
    }


def _record_to_item(record: ResourceRecord) -> dict[str, Any]:
    try:
        item = json.loads(
            record.payload,
            parse_constant=_reject_non_finite,
            parse_float=_finite_float,
        )
    except json.JSONDecodeError as exc:
        raise DecodeError(record.key, (f"payload is not valid JSON: {exc.msg}",)) from exc
    except ValueError as exc:
        raise DecodeError(record.key, (str(exc),)) from exc
    if not isinstance(item, dict):
        raise DecodeError(record.key, ("payload is not a JSON object",))
    item["apiVersion"] = ITEM_API_VERSION
    item["kind"] = record.kind
    return item


def _reject_non_finite(constant: str) -> float:
    raise ValueError(f"payload holds non-finite number {constant}")


def _finite_float(text: str) -> float:
    value = float(text)
    if not math.isfinite(value):
        raise ValueError(f"payload holds number {text} outside the float range")
    return value


def _summary_row(summary: WorkloadSummary) -> tuple[str, ...]:
    return (
        summary.name,
        summary.phase,
        str(summary.restart_count),
        summary.ready,
        summary.pod_ip,
        summary.node_name,
    )


def format_table(rows: Sequence[Sequence[str]]) -> list[str]:
    """Left-align cells; every column but the last is padded to a shared width."""
    if not rows:
        return []
    column_count = max(len(row) for row in rows)
    widths = [TABLE_MIN_WIDTH] * column_count
    for row in rows:
        for index, cell in enumerate(row):
            widths[index] = max(widths[index], len(cell) + TABLE_PADDING)

    lines: list[str] = []
    for row in rows:
        cells = [
            cell if index == len(row) - 1 else cell.ljust(widths[index])
            for index, cell in enumerate(row)
        ]
        lines.append("".join(cells).rstrip())
    return lines
