"""
Pod lifecycle for pipeline steps: create, wait for start, wait for completion.

The cluster reports pod state asynchronously, so both waits poll a fresh
pod observation until its phase leaves the one being waited on.
"""

import logging
import threading
import time
from typing import Optional, Tuple

from kubernetes import client
from kubernetes.client.rest import ApiException
from urllib3.exceptions import HTTPError

from podrunner.src.config import Settings
from podrunner.src.errors import (
    PodLookupError,
    PodNotFoundError,
    PodStateError,
    PodTimeoutError,
    WaitCancelled,
)
from podrunner.src.k8s.naming import sanitize
from podrunner.src.k8s.pod_builder import build_pod
from podrunner.src.models.step import PodPhase, State, Step

logger = logging.getLogger(__name__)

def get_pod_phase(pod: client.V1Pod) -> str:
    """Return the pod phase, treating a pod without status as Pending."""
    if pod.status is None or not pod.status.phase:
        return PodPhase.PENDING.value
    return pod.status.phase

def get_exit_state(pod: client.V1Pod) -> State:
    """
    Translate a finished pod into a step result.
    Reads the terminal state of the first container.
    """
    statuses = (pod.status.container_statuses if pod.status else None) or []
    terminated = None
    if statuses and statuses[0].state is not None:
        terminated = statuses[0].state.terminated

    if terminated is None:
        raise PodStateError(
            f"Pod {pod.metadata.name} is in phase {get_pod_phase(pod)} "
            f"but its container has no terminated state"
        )

    return State(
        exited=True,
        exit_code=terminated.exit_code,
        oom_killed=False,
    )

def _is_transient(e: ApiException) -> bool:
    return not e.status or e.status >= 500

class PodLifecycle:
    """Drives step pods through Created, Starting, Running and Terminated."""

    def __init__(self, core_v1: client.CoreV1Api, namespace: str, settings: Settings):
        self.core_v1 = core_v1
        self.namespace = namespace
        self.settings = settings

    def create_pod(self, step: Step) -> client.V1Pod:
        """Submit the pod for a step. Cluster rejections are raised unchanged."""
        pod = build_pod(step, self.namespace)
        pod_name = pod.metadata.name

        logger.info(f"Creating pod {pod_name} in namespace {self.namespace}")
        try:
            return self.core_v1.create_namespaced_pod(
                namespace=self.namespace,
                body=pod,
            )
        except ApiException as e:
            logger.error(f"Failed to create pod {pod_name}: {e.reason}")
            raise

    def get_pod(self, step_name: str) -> client.V1Pod:
        """
        Read the current state of a step's pod.

        A missing pod raises PodNotFoundError straight away. Transport
        failures and server errors are retried up to ``lookup_retries``
        times before raising PodLookupError.
        """
        pod_name = sanitize(step_name)
        attempt = 0

        while True:
            try:
                return self.core_v1.read_namespaced_pod(
                    name=pod_name,
                    namespace=self.namespace,
                )
            except ApiException as e:
                if e.status == 404:
                    raise PodNotFoundError(pod_name) from e
                if not _is_transient(e) or attempt >= self.settings.lookup_retries:
                    raise PodLookupError(pod_name, f"{e.status} {e.reason}") from e
                reason = f"{e.status} {e.reason}"
            except HTTPError as e:
                if attempt >= self.settings.lookup_retries:
                    raise PodLookupError(pod_name, str(e)) from e
                reason = str(e)

            attempt += 1
            logger.warning(
                f"Error reading pod {pod_name} ({reason}), "
                f"retry {attempt}/{self.settings.lookup_retries}"
            )
            time.sleep(self.settings.poll_interval)

    def wait_for_start(
        self,
        step: Step,
        cancel: Optional[threading.Event] = None,
    ) -> client.V1Pod:
        """Block until the step's pod has left the Pending phase."""
        logger.info(f"Waiting for pod {sanitize(step.name)} to start...")
        pod = self._poll(
            step.name,
            (PodPhase.PENDING.value,),
            self.settings.start_timeout,
            cancel,
        )
        logger.info(f"Pod {sanitize(step.name)} started in phase {get_pod_phase(pod)}")
        return pod

    def wait_for_completion(
        self,
        step: Step,
        cancel: Optional[threading.Event] = None,
    ) -> State:
        """Block until the step's pod has finished and return its result."""
        logger.info(f"Waiting for pod {sanitize(step.name)} to complete...")
        pod = self._poll(
            step.name,
            (PodPhase.PENDING.value, PodPhase.RUNNING.value),
            self.settings.wait_timeout,
            cancel,
        )

        state = get_exit_state(pod)
        logger.info(
            f"Pod {sanitize(step.name)} finished in phase {get_pod_phase(pod)} "
            f"with exit code {state.exit_code}"
        )
        return state

    def _poll(
        self,
        step_name: str,
        waiting_phases: Tuple[str, ...],
        timeout: float,
        cancel: Optional[threading.Event],
    ) -> client.V1Pod:
        """Fetch the pod until its phase is not in ``waiting_phases``."""
        pod_name = sanitize(step_name)
        deadline = time.monotonic() + timeout if timeout else None

        while True:
            if cancel is not None and cancel.is_set():
                raise WaitCancelled(f"Wait for pod {pod_name} was cancelled")

            pod = self.get_pod(step_name)
            phase = get_pod_phase(pod)
            logger.debug(f"Pod {pod_name} is {phase}")

            if phase not in waiting_phases:
                return pod

            if deadline is not None and time.monotonic() >= deadline:
                raise PodTimeoutError(
                    f"Pod {pod_name} still {phase} after {timeout}s"
                )

            if cancel is not None:
                cancel.wait(self.settings.poll_interval)
            else:
                time.sleep(self.settings.poll_interval)
