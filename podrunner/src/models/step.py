"""
Step execution models.
"""

from pydantic import BaseModel, ConfigDict
from typing import List, Dict
from enum import Enum

class PodPhase(str, Enum):
    PENDING = "Pending"
    RUNNING = "Running"
    SUCCEEDED = "Succeeded"
    FAILED = "Failed"
    UNKNOWN = "Unknown"

class Step(BaseModel):
    """A single unit of pipeline work, run as one container in one pod."""

    model_config = ConfigDict(frozen=True)

    name: str
    image: str
    working_dir: str = ""
    environment: Dict[str, str] = {}
    entrypoint: List[str] = []
    command: List[str] = []

class Stage(BaseModel):
    name: str
    steps: List[Step] = []

class EnvironmentConfig(BaseModel):
    """Pipeline environment handed to setup and destroy."""

    name: str = "Unnamed Pipeline"
    stages: List[Stage] = []

class State(BaseModel):
    """Completion result of a step."""

    exited: bool
    exit_code: int
    # The pod API read here does not report memory kills, so this stays False.
    oom_killed: bool = False
