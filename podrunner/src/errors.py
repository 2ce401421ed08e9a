"""
Errors raised by the pod execution backend.

Cluster rejections on create/delete/log calls are not wrapped: the
``ApiException`` from the Kubernetes client reaches the caller as-is.
"""

class EngineError(Exception):
    """Base class for backend errors."""
    pass

class ConfigurationError(EngineError):
    """Raised when no usable Kubernetes client configuration can be loaded."""
    pass

class PodLookupError(EngineError):
    """Raised when a pod cannot be read from the cluster."""

    def __init__(self, pod_name: str, message: str):
        self.pod_name = pod_name
        super().__init__(f"Failed to read pod {pod_name}: {message}")

class PodNotFoundError(PodLookupError):
    """Raised when the pod no longer exists, e.g. deleted mid-wait."""

    def __init__(self, pod_name: str):
        super().__init__(pod_name, "not found")

class PodStateError(EngineError):
    """Raised when a finished pod carries no container terminal state."""
    pass

class PodTimeoutError(EngineError):
    """Raised when a pod does not leave a phase within the allowed time."""
    pass

class WaitCancelled(EngineError):
    """Raised when the caller cancels a start or completion wait."""
    pass
