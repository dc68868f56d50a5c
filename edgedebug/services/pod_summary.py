from __future__ import annotations

import logging

from pydantic import ValidationError

from edgedebug.errors import DecodeError, validation_problems
from edgedebug.models.pod import PodPayload, WorkloadSummary
from edgedebug.models.resources import ResourceRecord

LOGGER = logging.getLogger("edgedebug.pods")


def summarize_pods(records: list[ResourceRecord]) -> list[WorkloadSummary]:
    """Decode every pod record into a table row, failing on the first bad one."""
    return [summarize_pod(record) for record in records]


def summarize_pod(record: ResourceRecord) -> WorkloadSummary:
    try:
        pod = PodPayload.model_validate_json(record.payload)
    except ValidationError as exc:
        problems = validation_problems(exc)
        LOGGER.warning("pod record rejected key=%s problems=%s", record.key, problems)
        raise DecodeError(record.key, problems) from exc

    statuses = pod.status.container_statuses
    return WorkloadSummary(
        name=pod.metadata.name,
        phase=pod.status.phase,
        restart_count=sum(int(status.restart_count) for status in statuses),
        ready_count=sum(1 for status in statuses if status.ready),
        total_containers=len(statuses),
        pod_ip=pod.status.pod_ip,
        node_name=pod.spec.node_name,
    )
