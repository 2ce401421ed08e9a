"""
Stream logs from step pods.
"""

import logging
from typing import Iterator

from kubernetes import client

from podrunner.src.k8s.naming import sanitize

logger = logging.getLogger(__name__)

def open_log_stream(core_v1: client.CoreV1Api, namespace: str, step_name: str):
    """
    Open a following log stream for a step's pod.

    Returns the raw urllib3 response. It yields bytes until the container
    exits and its logs are exhausted, or the pod goes away. The caller
    must close it.
    """
    pod_name = sanitize(step_name)
    logger.info(f"Streaming logs for pod {pod_name}")

    return core_v1.read_namespaced_pod_log(
        name=pod_name,
        namespace=namespace,
        follow=True,
        _preload_content=False,
    )

def iter_log_lines(stream, chunk_size: int = 4096) -> Iterator[str]:
    """
    Yield decoded lines from a log stream, then release it.
    """
    buffer = b""
    try:
        for chunk in stream.stream(chunk_size):
            buffer += chunk
            while b"\n" in buffer:
                line, buffer = buffer.split(b"\n", 1)
                yield line.decode("utf-8", errors="replace")
        if buffer:
            yield buffer.decode("utf-8", errors="replace")
    finally:
        stream.close()
        stream.release_conn()
