"""
Pydantic models for the deployment detail page.
"""

from typing import Any

from pydantic import BaseModel, Field, StrictFloat, StrictInt, StrictStr

from serve_replicas.core.models.replica import (
    DeploymentStatus,
    ReplicaState,
    ServeApplication,
    ServeDeployment,
    ServeReplica,
)
from serve_replicas.core.utils.time import (
    epoch_seconds_to_iso,
    format_duration,
    seconds_since,
)


class DeploymentSummary(BaseModel):
    """Metadata shown above the replicas table."""

    name: StrictStr = Field(..., description="Deployment name")
    status: DeploymentStatus = Field(..., description="Aggregate deployment status")
    message: StrictStr = Field("", description="Status details, if any")
    replica_count: StrictInt = Field(..., ge=0, description="Number of replicas")
    deployment_config: dict[str, Any] | None = Field(
        None,
        description="Effective deployment config",
    )
    last_deployed_at: StrictStr = Field(
        ...,
        description="ISO-8601 time of the application's last deploy (UTC)",
    )
    deployed_for_s: StrictFloat = Field(..., ge=0, description="Seconds since the last deploy")
    deployed_for: StrictStr = Field(..., description="Human-readable time since the last deploy")

    @classmethod
    def from_details(
        cls,
        application: ServeApplication,
        deployment: ServeDeployment,
        *,
        now: float | None = None,
    ) -> "DeploymentSummary":
        elapsed = seconds_since(application.last_deployed_time_s, now)
        return cls(
            name=deployment.name,
            status=deployment.status,
            message=deployment.message,
            replica_count=deployment.replica_count,
            deployment_config=deployment.deployment_config,
            last_deployed_at=epoch_seconds_to_iso(application.last_deployed_time_s),
            deployed_for_s=elapsed,
            deployed_for=format_duration(elapsed),
        )


class ReplicaRow(BaseModel):
    """One row of the replicas table."""

    replica_id: StrictStr = Field(..., description="Unique replica identifier")
    state: ReplicaState = Field(..., description="Current lifecycle state")
    started_at: StrictStr = Field(..., description="ISO-8601 replica start time (UTC)")
    running_for_s: StrictFloat = Field(..., ge=0, description="Seconds since the replica started")
    running_for: StrictStr = Field(..., description="Human-readable time since start")

    @classmethod
    def from_replica(cls, replica: ServeReplica, *, now: float | None = None) -> "ReplicaRow":
        elapsed = seconds_since(replica.start_time_s, now)
        return cls(
            replica_id=replica.replica_id,
            state=replica.state,
            started_at=epoch_seconds_to_iso(replica.start_time_s),
            running_for_s=elapsed,
            running_for=format_duration(elapsed),
        )
