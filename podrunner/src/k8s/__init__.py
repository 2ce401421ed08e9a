from podrunner.src.k8s.client import load_core_api
from podrunner.src.k8s.naming import sanitize
from podrunner.src.k8s.pod_builder import (
    build_container,
    build_pod,
)

__all__ = [
    "load_core_api",
    "sanitize",
    "build_container",
    "build_pod",
]
