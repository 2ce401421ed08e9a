"""
Shared pytest fixtures: a mocked CoreV1Api and pod observation factories.
"""

from typing import Optional
from unittest.mock import MagicMock

import pytest
from kubernetes import client

from podrunner.src.config import Settings
from podrunner.src.models.step import Step

@pytest.fixture
def settings():
    return Settings(
        k8s_namespace="test-ns",
        poll_interval=0,
        start_timeout=0,
        wait_timeout=0,
        lookup_retries=2,
    )

@pytest.fixture
def core_v1():
    return MagicMock(spec=client.CoreV1Api)

@pytest.fixture
def step():
    return Step(
        name="build_step_1",
        image="golang:1.22",
        working_dir="/src",
        environment={"CGO_ENABLED": "0"},
        entrypoint=["/bin/sh", "-c"],
        command=["go build ./..."],
    )

def _make_pod(phase: Optional[str], exit_code: Optional[int] = None, name: str = "build-step-1") -> client.V1Pod:
    container_statuses = None
    if exit_code is not None:
        container_statuses = [
            client.V1ContainerStatus(
                name=name,
                image="golang:1.22",
                image_id="docker://sha256:abc",
                ready=False,
                restart_count=0,
                state=client.V1ContainerState(
                    terminated=client.V1ContainerStateTerminated(exit_code=exit_code),
                ),
            )
        ]

    status = None
    if phase is not None:
        status = client.V1PodStatus(phase=phase, container_statuses=container_statuses)

    return client.V1Pod(
        metadata=client.V1ObjectMeta(name=name, namespace="test-ns"),
        status=status,
    )

@pytest.fixture
def make_pod():
    """Build a pod observation in a given phase, optionally terminated."""
    return _make_pod
