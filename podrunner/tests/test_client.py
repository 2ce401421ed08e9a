"""Tests for Kubernetes client loading."""

from unittest.mock import patch

import pytest
from kubernetes.config import ConfigException

from podrunner.src.config import Settings
from podrunner.src.errors import ConfigurationError
from podrunner.src.k8s.client import load_core_api

def test_loads_kubeconfig_from_path():
    settings = Settings(kubeconfig_path="/tmp/kubeconfig")

    with patch("podrunner.src.k8s.client.config") as k8s_config:
        k8s_config.ConfigException = ConfigException
        load_core_api(settings)

    k8s_config.load_kube_config.assert_called_once_with(config_file="/tmp/kubeconfig")
    k8s_config.load_incluster_config.assert_not_called()

def test_loads_incluster_config():
    settings = Settings(k8s_in_cluster=True)

    with patch("podrunner.src.k8s.client.config") as k8s_config:
        k8s_config.ConfigException = ConfigException
        load_core_api(settings)

    k8s_config.load_incluster_config.assert_called_once()
    k8s_config.load_kube_config.assert_not_called()

def test_missing_config_raises_configuration_error():
    settings = Settings(k8s_in_cluster=True)

    with patch("podrunner.src.k8s.client.config") as k8s_config:
        k8s_config.ConfigException = ConfigException
        k8s_config.load_incluster_config.side_effect = ConfigException("Service host/port is not set.")
        with pytest.raises(ConfigurationError, match="Service host"):
            load_core_api(settings)
