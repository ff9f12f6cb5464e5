"""
Pytest configuration and fixtures for replica view tests.
Provides replica collections as plain mappings and as pydantic models.
"""

from typing import Any

import pytest

from serve_replicas.core.models.replica import (
    ServeApplication,
    ServeDeployment,
    ServeReplica,
)

_OTHER_STATES = ("STARTING", "UPDATING", "RECOVERING", "STOPPING")


def _build_replica(index: int) -> dict[str, Any]:
    # Every fifth replica (1, 6, 11, 16, 21) is running.
    state = "RUNNING" if index % 5 == 1 else _OTHER_STATES[index % 4]
    return {
        "replica_id": f"replica-{index:02d}",
        "state": state,
        "pid": 1000 + index,
        "actor_name": f"SERVE_REPLICA::app#Model#replica-{index:02d}",
        "node_id": f"node-{index % 3}",
        "node_ip": f"10.0.0.{index % 3 + 1}",
        "start_time_s": 1700000000.0 + index,
    }


@pytest.fixture
def replica_items() -> list[dict[str, Any]]:
    """23 replica mappings, 5 of them RUNNING."""
    return [_build_replica(index) for index in range(1, 24)]


@pytest.fixture
def serve_replicas(replica_items) -> list[ServeReplica]:
    """The same 23 replicas as pydantic models."""
    return [ServeReplica(**item) for item in replica_items]


@pytest.fixture
def serve_deployment(serve_replicas) -> ServeDeployment:
    return ServeDeployment(
        name="Model",
        status="HEALTHY",
        message="",
        deployment_config={"num_replicas": 23, "max_ongoing_requests": 5},
        replicas=serve_replicas,
    )


@pytest.fixture
def serve_application(serve_deployment) -> ServeApplication:
    return ServeApplication(
        name="app",
        route_prefix="/",
        last_deployed_time_s=1705315351.5,
        deployments={serve_deployment.name: serve_deployment},
    )


@pytest.fixture
def applications(serve_application) -> dict[str, ServeApplication]:
    return {serve_application.name: serve_application}
