"""Tests for running a pipeline through the engine."""

from unittest.mock import MagicMock

import pytest

from podrunner.src.engine import Engine
from podrunner.src.errors import PodNotFoundError
from podrunner.src.models.step import EnvironmentConfig, Stage, State, Step
from podrunner.src.services.runner import run_pipeline

def make_conf(*stage_step_names):
    return EnvironmentConfig(
        name="demo",
        stages=[
            Stage(name=f"stage-{i}", steps=[Step(name=n, image="alpine") for n in names])
            for i, names in enumerate(stage_step_names)
        ],
    )

def log_stream(*chunks):
    stream = MagicMock()
    stream.stream.return_value = iter(chunks)
    return stream

@pytest.fixture
def engine():
    engine = MagicMock(spec=Engine)
    engine.namespace = "test-ns"
    engine.tail.side_effect = lambda step: log_stream(f"{step.name} output\n".encode())
    return engine

def test_all_steps_succeed(engine):
    engine.wait.return_value = State(exited=True, exit_code=0)
    lines = []

    assert run_pipeline(engine, make_conf(["clone"], ["build", "test"]), lines.append) is True

    assert [call.args[0].name for call in engine.exec.call_args_list] == ["clone", "build", "test"]
    assert lines == ["[clone] clone output", "[build] build output", "[test] test output"]
    engine.setup.assert_called_once()
    engine.destroy.assert_called_once()

def test_stops_at_first_failure(engine):
    engine.wait.side_effect = [
        State(exited=True, exit_code=0),
        State(exited=True, exit_code=2),
    ]

    assert run_pipeline(engine, make_conf(["clone", "build"], ["test"]), lambda line: None) is False

    assert engine.exec.call_count == 2
    engine.destroy.assert_called_once()

def test_destroys_namespace_after_error(engine):
    engine.wait.side_effect = PodNotFoundError("clone")

    with pytest.raises(PodNotFoundError):
        run_pipeline(engine, make_conf(["clone"]), lambda line: None)

    engine.destroy.assert_called_once()
