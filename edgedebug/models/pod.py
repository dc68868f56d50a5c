from __future__ import annotations

from dataclasses import dataclass

from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictFloat, StrictInt, StrictStr


class _PayloadModel(BaseModel):
    model_config = ConfigDict(
        extra="ignore",
        populate_by_name=True,
        frozen=True,
        allow_inf_nan=False,
    )


class ContainerStatusPayload(_PayloadModel):
    ready: StrictBool
    restart_count: StrictInt | StrictFloat = Field(alias="restartCount")


class PodMetadataPayload(_PayloadModel):
    name: StrictStr


class PodStatusPayload(_PayloadModel):
    phase: StrictStr
    pod_ip: StrictStr = Field(alias="podIP")
    container_statuses: list[ContainerStatusPayload] = Field(alias="containerStatuses")


class PodSpecPayload(_PayloadModel):
    node_name: StrictStr = Field(alias="nodeName")


class PodPayload(_PayloadModel):
    """The slice of a stored pod object the summary table reads."""

    metadata: PodMetadataPayload
    status: PodStatusPayload
    spec: PodSpecPayload


@dataclass(frozen=True)
class WorkloadSummary:
    name: str
    phase: str
    restart_count: int
    ready_count: int
    total_containers: int
    pod_ip: str
    node_name: str

    @property
    def ready(self) -> str:
        return f"{self.ready_count}/{self.total_containers}"
