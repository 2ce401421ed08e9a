from podrunner.src.services.lifecycle import PodLifecycle, get_exit_state, get_pod_phase
from podrunner.src.services.log_streamer import open_log_stream, iter_log_lines
from podrunner.src.services.namespace_manager import (
    ensure_namespace,
    teardown_namespace,
)
from podrunner.src.services.pipeline_parser import (
    PipelineConfigError,
    parse_pipeline_config,
    parse_pipeline_dict,
)

__all__ = [
    "PodLifecycle",
    "get_exit_state",
    "get_pod_phase",
    "open_log_stream",
    "iter_log_lines",
    "ensure_namespace",
    "teardown_namespace",
    "PipelineConfigError",
    "parse_pipeline_config",
    "parse_pipeline_dict",
]
