"""
Pipeline runner - runs a pipeline's steps through the engine.
"""

import logging
from typing import Callable, Optional

from podrunner.src.engine import Engine
from podrunner.src.models.step import EnvironmentConfig, Stage
from podrunner.src.services.log_streamer import iter_log_lines

logger = logging.getLogger(__name__)

def run_pipeline(
    engine: Engine,
    conf: EnvironmentConfig,
    log_sink: Optional[Callable[[str], None]] = None,
) -> bool:
    """
    Execute a pipeline.
    Returns True if all steps exited 0, False otherwise.
    """
    log_sink = log_sink or print
    step_count = sum(len(stage.steps) for stage in conf.stages)

    logger.info(f"Starting pipeline {conf.name} with {step_count} steps in namespace {engine.namespace}")

    engine.setup(conf)

    all_succeeded = True
    try:
        for stage in conf.stages:
            if not run_stage(engine, stage, log_sink):
                all_succeeded = False
                break  # Stop on first failure
    finally:
        engine.destroy(conf)

    final_status = "succeeded" if all_succeeded else "failed"
    logger.info(f"Pipeline {conf.name} finished with status: {final_status}")
    return all_succeeded

def run_stage(engine: Engine, stage: Stage, log_sink: Callable[[str], None]) -> bool:
    """Run a stage's steps in order, stopping at the first failure."""
    for step in stage.steps:
        logger.info(f"Executing step {step.name} (stage {stage.name})")

        engine.exec(step)
        for line in iter_log_lines(engine.tail(step)):
            log_sink(f"[{step.name}] {line}")
        state = engine.wait(step)

        if state.exit_code != 0:
            logger.error(f"Step {step.name} failed with exit code {state.exit_code}")
            return False

        logger.info(f"Step {step.name} succeeded")

    return True
