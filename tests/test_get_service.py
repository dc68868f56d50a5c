from __future__ import annotations

import io
import json
from pathlib import Path

import pytest

from edgedebug.errors import DecodeError, UsageError
from edgedebug.models.resources import GetRequest, ResourceRecord
from edgedebug.services.get_service import build_get_request, run_get
from tests.factories import pod_record, record


class _SpySource:
    def __init__(self, records: list[ResourceRecord]) -> None:
        self.records = records
        self.calls: list[str] = []

    def fetch_all(self, kind: str) -> list[ResourceRecord]:
        self.calls.append(kind)
        if kind == "all":
            return list(self.records)
        return [item for item in self.records if item.kind == kind]


def _request(
    args: tuple[str, ...] = ("pod",),
    *,
    namespace: str = "default",
    all_namespaces: bool = False,
    output_format: str = "",
) -> GetRequest:
    return build_get_request(
        args,
        namespace=namespace,
        all_namespaces=all_namespaces,
        output_format=output_format,
        db_path=Path("/tmp/edgecore.db"),
    )


def test_build_get_request_defaults() -> None:
    request = _request()

    assert request.kind == "pod"
    assert request.namespace == "default"
    assert request.all_namespaces is False
    assert request.output_format == ""


@pytest.mark.parametrize("args", [(), ("pod", "node")])
def test_build_get_request_needs_exactly_one_kind(args: tuple[str, ...]) -> None:
    with pytest.raises(UsageError, match="exactly one"):
        _request(args=args)


def test_build_get_request_rejects_unknown_kind() -> None:
    with pytest.raises(UsageError, match="widget is not available"):
        _request(args=("widget",))


def test_build_get_request_rejects_unknown_output_format() -> None:
    with pytest.raises(UsageError, match="output_format"):
        _request(output_format="wide")


def test_run_get_filters_namespace_before_rendering() -> None:
    source = _SpySource(
        [
            pod_record("nginx"),
            pod_record("coredns", namespace="kube-system"),
            record("default/kubernetes", "service"),
        ]
    )
    out = io.StringIO()

    run_get(source, _request(args=("all",), output_format="json"), out)

    document = json.loads(out.getvalue())
    assert source.calls == ["all"]
    assert [item["metadata"]["name"] for item in document["items"]] == ["nginx", "kubernetes"]


def test_run_get_all_namespaces_table() -> None:
    source = _SpySource([pod_record("nginx"), pod_record("coredns", namespace="kube-system")])
    out = io.StringIO()

    run_get(source, _request(all_namespaces=True), out)

    lines = out.getvalue().splitlines()
    assert [line.split()[0] for line in lines] == ["NAME", "nginx", "coredns"]


def test_run_get_propagates_decode_errors() -> None:
    source = _SpySource([ResourceRecord(key="default/bad", kind="pod", payload="{}")])

    with pytest.raises(DecodeError):
        run_get(source, _request(), io.StringIO())
