"""
Kubernetes execution engine for pipeline steps.

Each step runs as one pod in the engine's namespace. The pipeline engine
calls setup once, then exec/tail/wait per step, then destroy.
"""

import logging
import threading
from typing import Optional

from kubernetes import client

from podrunner.src.config import Settings, get_settings
from podrunner.src.k8s.client import load_core_api
from podrunner.src.models.step import EnvironmentConfig, State, Step
from podrunner.src.services.lifecycle import PodLifecycle
from podrunner.src.services.log_streamer import open_log_stream
from podrunner.src.services.namespace_manager import (
    ensure_namespace,
    teardown_namespace,
)

logger = logging.getLogger(__name__)

class Engine:
    """Runs pipeline steps as pods in a single Kubernetes namespace."""

    def __init__(
        self,
        namespace: str,
        core_v1: client.CoreV1Api,
        settings: Optional[Settings] = None,
    ):
        self._namespace = namespace
        self._core_v1 = core_v1
        self._pods = PodLifecycle(core_v1, namespace, settings or get_settings())

    @classmethod
    def from_settings(
        cls,
        settings: Optional[Settings] = None,
        namespace: Optional[str] = None,
    ) -> "Engine":
        """Build an engine with a client loaded from settings."""
        settings = settings or get_settings()
        return cls(
            namespace or settings.k8s_namespace,
            load_core_api(settings),
            settings,
        )

    @property
    def namespace(self) -> str:
        return self._namespace

    def setup(self, conf: Optional[EnvironmentConfig] = None):
        """Set up the pipeline environment."""
        logger.info(f"Creating namespace {self._namespace}")
        ensure_namespace(self._core_v1, self._namespace)

    def exec(self, step: Step, cancel: Optional[threading.Event] = None):
        """Start a pipeline step and return once its container is running."""
        self._pods.create_pod(step)
        self._pods.wait_for_start(step, cancel)
        logger.info(f"Pod created for step {step.name}")

    def wait(self, step: Step, cancel: Optional[threading.Event] = None) -> State:
        """Wait for a pipeline step to complete and return its result."""
        logger.info(f"Waiting for step {step.name}")
        return self._pods.wait_for_completion(step, cancel)

    def tail(self, step: Step):
        """Open a following stream of the step's log output."""
        return open_log_stream(self._core_v1, self._namespace, step.name)

    def destroy(self, conf: Optional[EnvironmentConfig] = None):
        """Destroy the pipeline environment."""
        teardown_namespace(self._core_v1, self._namespace)

    def kill(self, step: Step):
        """
        Deprecated. Does not touch the cluster; step pods are removed with
        the namespace on destroy.
        """
        logger.info(f"Kill requested for step {step.name}, ignoring")
