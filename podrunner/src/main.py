"""
podrunner - run a pipeline file on Kubernetes.
"""

import argparse
import logging
import sys
from typing import Optional, Sequence

from kubernetes.client.rest import ApiException

from podrunner.src.config import get_settings
from podrunner.src.engine import Engine
from podrunner.src.errors import EngineError
from podrunner.src.services.pipeline_parser import PipelineConfigError, parse_pipeline_config
from podrunner.src.services.runner import run_pipeline

logger = logging.getLogger(__name__)

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="podrunner", description="Run pipeline steps as Kubernetes pods")
    parser.add_argument("pipeline", help="Path to the pipeline YAML file")
    parser.add_argument("--namespace", help="Namespace to run in (overrides PODRUNNER_K8S_NAMESPACE)")
    return parser

def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main entry point."""
    args = build_parser().parse_args(argv)
    settings = get_settings()

    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stdout)]
    )

    try:
        with open(args.pipeline) as f:
            conf = parse_pipeline_config(f.read())
    except (OSError, PipelineConfigError) as e:
        logger.error(f"Failed to load pipeline {args.pipeline}: {e}")
        return 1

    try:
        engine = Engine.from_settings(settings, namespace=args.namespace)
        succeeded = run_pipeline(engine, conf)
    except (EngineError, ApiException) as e:
        logger.error(f"Pipeline {conf.name} aborted: {e}")
        return 1

    return 0 if succeeded else 1

if __name__ == "__main__":
    sys.exit(main())
