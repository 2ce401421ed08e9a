"""
Kubernetes client initialization.
"""

from kubernetes import client, config
import logging

from podrunner.src.config import Settings
from podrunner.src.errors import ConfigurationError

logger = logging.getLogger(__name__)

def load_core_api(settings: Settings) -> client.CoreV1Api:
    """Build a CoreV1 API client for Namespace and Pod operations."""
    try:
        if settings.k8s_in_cluster:
            # Running inside Kubernetes
            config.load_incluster_config()
            logger.info("Loaded in-cluster Kubernetes config")
        else:
            # Running locally (Docker Desktop, minikube, etc.)
            config.load_kube_config(config_file=settings.kubeconfig_path)
            logger.info(f"Loaded local Kubernetes config from {settings.kubeconfig_path or 'default location'}")
    except (config.ConfigException, OSError) as e:
        raise ConfigurationError(f"Failed to load Kubernetes config: {e}") from e

    return client.CoreV1Api(client.ApiClient())
