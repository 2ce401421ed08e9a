"""
Kubernetes Pod builder for pipeline steps.
"""

from kubernetes import client

from podrunner.src.k8s.naming import sanitize
from podrunner.src.models.step import Step

def build_container(step: Step) -> client.V1Container:
    """Build the single container that runs a step."""
    container = client.V1Container(
        name=sanitize(step.name),
        image=step.image,
        working_dir=step.working_dir or None,
    )

    # Leave env unset rather than empty when the step declares nothing
    if step.environment:
        container.env = [
            client.V1EnvVar(name=key, value=value)
            for key, value in step.environment.items()
        ]

    # Without entrypoint or command the image default applies
    if step.entrypoint or step.command:
        container.command = list(step.entrypoint) + list(step.command)

    return container

def build_pod(step: Step, namespace: str) -> client.V1Pod:
    """
    Build a Kubernetes Pod for a pipeline step.

    The pod is a one-shot job: it is never restarted by the kubelet, so the
    container's exit code is the step's exit code.
    """
    return client.V1Pod(
        api_version="v1",
        kind="Pod",
        metadata=client.V1ObjectMeta(
            name=sanitize(step.name),
            namespace=namespace,
        ),
        spec=client.V1PodSpec(
            containers=[build_container(step)],
            restart_policy="Never",
        ),
    )
