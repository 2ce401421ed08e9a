"""
Create and remove the namespace that holds a pipeline's pods.
"""

import logging
from kubernetes import client
from kubernetes.client.rest import ApiException

logger = logging.getLogger(__name__)

def ensure_namespace(core_v1: client.CoreV1Api, namespace: str):
    """Ensure the namespace exists, creating it if missing."""
    try:
        core_v1.read_namespace(name=namespace)
        logger.info(f"Namespace '{namespace}' already exists")
        return
    except ApiException as e:
        if e.status != 404:
            raise

    body = client.V1Namespace(
        metadata=client.V1ObjectMeta(name=namespace)
    )
    try:
        core_v1.create_namespace(body=body)
    except ApiException as e:
        if e.status == 409:
            # Created by someone else between the read and the create
            logger.info(f"Namespace '{namespace}' already exists")
            return
        raise

    logger.info(f"Created namespace '{namespace}'")

def teardown_namespace(core_v1: client.CoreV1Api, namespace: str):
    """
    Delete the namespace and everything in it.

    Returns as soon as the API server accepts the delete; the namespace
    may still be terminating afterwards.
    """
    logger.info(f"Deleting namespace '{namespace}'")
    core_v1.delete_namespace(name=namespace)
