"""Serve application, deployment and replica models."""

from enum import Enum
from typing import Any

from pydantic import BaseModel, Field, StrictFloat, StrictInt, StrictStr


class ReplicaState(str, Enum):
    """Lifecycle states a Serve replica can report."""

    STARTING = "STARTING"
    UPDATING = "UPDATING"
    RECOVERING = "RECOVERING"
    RUNNING = "RUNNING"
    STOPPING = "STOPPING"
    PENDING_MIGRATION = "PENDING_MIGRATION"


class DeploymentStatus(str, Enum):
    """Aggregate status of a Serve deployment."""

    UPDATING = "UPDATING"
    HEALTHY = "HEALTHY"
    UNHEALTHY = "UNHEALTHY"
    UPSCALING = "UPSCALING"
    DOWNSCALING = "DOWNSCALING"


class ServeReplica(BaseModel):
    """A single replica of a Serve deployment."""

    replica_id: StrictStr = Field(..., description="Unique replica identifier")
    state: ReplicaState = Field(..., description="Current lifecycle state")

    pid: StrictInt | None = Field(None, description="Worker process id, once started")
    actor_name: StrictStr | None = Field(None, description="Name of the backing actor")
    actor_id: StrictStr | None = Field(None, description="Id of the backing actor")
    node_id: StrictStr | None = Field(None, description="Node the replica runs on")
    node_ip: StrictStr | None = Field(None, description="IP address of that node")

    start_time_s: StrictFloat | StrictInt = Field(
        ...,
        description="Replica start time in epoch seconds",
    )


class ServeDeployment(BaseModel):
    """A Serve deployment and its replicas."""

    name: StrictStr = Field(..., description="Deployment name")
    status: DeploymentStatus = Field(..., description="Aggregate deployment status")
    message: StrictStr = Field("", description="Status details, if any")
    deployment_config: dict[str, Any] | None = Field(
        None,
        description="Effective deployment config",
    )
    replicas: list[ServeReplica] = Field(default_factory=list)

    @property
    def replica_count(self) -> int:
        return len(self.replicas)


class ServeApplication(BaseModel):
    """A Serve application and the deployments it contains."""

    name: StrictStr = Field(..., description="Application name")
    route_prefix: StrictStr | None = Field(None, description="HTTP route prefix")
    last_deployed_time_s: StrictFloat | StrictInt = Field(
        ...,
        description="Last deploy time in epoch seconds",
    )
    deployments: dict[str, ServeDeployment] = Field(default_factory=dict)
