from podrunner.src.models.step import (
    PodPhase,
    Step,
    Stage,
    EnvironmentConfig,
    State,
)

__all__ = [
    "PodPhase",
    "Step",
    "Stage",
    "EnvironmentConfig",
    "State",
]
