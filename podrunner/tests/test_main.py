"""Tests for the command-line entry point."""

from unittest.mock import patch

from kubernetes.client.rest import ApiException

from podrunner.src.errors import ConfigurationError
from podrunner.src.main import main

PIPELINE = """
name: cli
steps:
  - name: hello
    image: alpine
    command: [echo, hi]
"""

def write_pipeline(tmp_path):
    path = tmp_path / "pipeline.yml"
    path.write_text(PIPELINE)
    return str(path)

def test_missing_file_fails(tmp_path):
    assert main([str(tmp_path / "nope.yml")]) == 1

def test_invalid_pipeline_fails(tmp_path):
    path = tmp_path / "bad.yml"
    path.write_text("name: bad\n")
    assert main([str(path)]) == 1

def test_successful_run(tmp_path):
    with patch("podrunner.src.main.Engine") as engine_cls, \
            patch("podrunner.src.main.run_pipeline", return_value=True) as run:
        assert main([write_pipeline(tmp_path), "--namespace", "ci-42"]) == 0

    assert engine_cls.from_settings.call_args.kwargs["namespace"] == "ci-42"
    assert run.call_args.args[1].name == "cli"

def test_failed_run(tmp_path):
    with patch("podrunner.src.main.Engine"), \
            patch("podrunner.src.main.run_pipeline", return_value=False):
        assert main([write_pipeline(tmp_path)]) == 1

def test_configuration_error(tmp_path):
    with patch("podrunner.src.main.Engine") as engine_cls:
        engine_cls.from_settings.side_effect = ConfigurationError("no kubeconfig")
        assert main([write_pipeline(tmp_path)]) == 1

def test_cluster_error(tmp_path):
    with patch("podrunner.src.main.Engine"), \
            patch("podrunner.src.main.run_pipeline", side_effect=ApiException(status=403, reason="Forbidden")):
        assert main([write_pipeline(tmp_path)]) == 1
