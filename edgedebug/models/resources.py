from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

KindSelector = Literal["all", "pod", "node", "service", "secret", "configmap", "endpoint"]
OutputFormat = Literal["", "json", "yaml"]

ALL_KINDS = "all"
RESOURCE_KINDS: tuple[str, ...] = (
    "pod",
    "node",
    "service",
    "secret",
    "configmap",
    "endpoint",
)
KIND_SELECTORS: frozenset[str] = frozenset({ALL_KINDS, *RESOURCE_KINDS})


@dataclass(frozen=True)
class ResourceRecord:
    """One row of the edge node's `meta` table.

    `kind` is the stored type string verbatim. It is normally one of
    RESOURCE_KINDS, but the store may hold other types that callers skip.
    """

    key: str
    kind: str
    payload: str


class GetRequest(BaseModel):
    """Everything one `get` invocation needs, built once and passed down."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    kind: KindSelector
    namespace: str = Field(default="default")
    all_namespaces: bool = Field(default=False)
    output_format: OutputFormat = Field(default="")
    db_path: Path
