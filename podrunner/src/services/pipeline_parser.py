"""
Pipeline YAML parser and validator.
"""

import yaml
from typing import List, Dict, Any, Optional

from podrunner.src.models.step import EnvironmentConfig, Stage, Step

class PipelineConfigError(Exception):
    """Raised when pipeline configuration is invalid."""
    pass

def parse_pipeline_config(yaml_content: str) -> EnvironmentConfig:
    """Parse pipeline YAML configuration from string."""
    try:
        config = yaml.safe_load(yaml_content)
    except yaml.YAMLError as e:
        raise PipelineConfigError(f"Invalid YAML: {e}")

    return validate_config(config)

def parse_pipeline_dict(config: Dict[str, Any]) -> EnvironmentConfig:
    """Validate pipeline configuration from dict."""
    return validate_config(config)

def validate_config(config: Optional[Dict[str, Any]]) -> EnvironmentConfig:
    """Validate pipeline configuration structure."""
    if not config:
        raise PipelineConfigError("Empty pipeline configuration")

    if not isinstance(config, dict):
        raise PipelineConfigError("Pipeline configuration must be a dictionary")

    name = config.get("name", "Unnamed Pipeline")
    if not isinstance(name, str):
        raise PipelineConfigError("Pipeline 'name' must be a string")

    if "stages" in config:
        stages = config["stages"]
        if not isinstance(stages, list):
            raise PipelineConfigError("Pipeline 'stages' must be a list")
    elif "steps" in config:
        # A flat step list is one stage named after the pipeline
        stages = [{"name": name, "steps": config["steps"]}]
    else:
        raise PipelineConfigError("Pipeline must have 'stages' or 'steps' defined")

    if len(stages) == 0:
        raise PipelineConfigError("Pipeline must have at least one stage")

    validated_stages = [validate_stage(stage, i) for i, stage in enumerate(stages)]

    return EnvironmentConfig(name=name, stages=validated_stages)

def validate_stage(stage: Dict[str, Any], index: int) -> Stage:
    """Validate a single pipeline stage."""
    if not isinstance(stage, dict):
        raise PipelineConfigError(f"Stage {index} must be a dictionary")

    stage_name = stage.get("name", f"stage-{index}")
    if not isinstance(stage_name, str):
        raise PipelineConfigError(f"Stage {index} 'name' must be a string")

    steps = stage.get("steps")
    if not isinstance(steps, list):
        raise PipelineConfigError(f"Stage {index} 'steps' must be a list")

    if len(steps) == 0:
        raise PipelineConfigError(f"Stage {index} must have at least one step")

    return Stage(
        name=stage_name,
        steps=[validate_step(step, index, j) for j, step in enumerate(steps)],
    )

def validate_step(step: Dict[str, Any], stage_index: int, index: int) -> Step:
    """Validate a single pipeline step."""
    where = f"Stage {stage_index} step {index}"

    if not isinstance(step, dict):
        raise PipelineConfigError(f"{where} must be a dictionary")

    # Required fields
    if "name" not in step:
        raise PipelineConfigError(f"{where} missing 'name'")

    if "image" not in step:
        raise PipelineConfigError(f"{where} missing 'image'")

    # Validate types
    if not isinstance(step["name"], str):
        raise PipelineConfigError(f"{where} 'name' must be a string")

    if not isinstance(step["image"], str):
        raise PipelineConfigError(f"{where} 'image' must be a string")

    working_dir = step.get("working_dir", "")
    if not isinstance(working_dir, str):
        raise PipelineConfigError(f"{where} 'working_dir' must be a string")

    environment = step.get("environment") or {}
    if not isinstance(environment, dict):
        raise PipelineConfigError(f"{where} 'environment' must be a mapping")

    return Step(
        name=step["name"],
        image=step["image"],
        working_dir=working_dir,
        # YAML turns bare numbers and booleans into non-strings
        environment={str(k): str(v) for k, v in environment.items()},
        entrypoint=_validate_tokens(step, "entrypoint", where),
        command=_validate_tokens(step, "command", where),
    )

def _validate_tokens(step: Dict[str, Any], field: str, where: str) -> List[str]:
    tokens = step.get(field) or []
    if not isinstance(tokens, list):
        raise PipelineConfigError(f"{where} '{field}' must be a list")

    for j, token in enumerate(tokens):
        if not isinstance(token, str):
            raise PipelineConfigError(f"{where} {field} {j} must be a string")

    return tokens
