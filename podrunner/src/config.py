from pydantic_settings import BaseSettings
from functools import lru_cache
from typing import Optional

class Settings(BaseSettings):
    # Kubernetes settings
    k8s_namespace: str = "podrunner"
    k8s_in_cluster: bool = False  # Set True when running inside K8s
    kubeconfig_path: Optional[str] = None  # Falls back to ~/.kube/config

    # Pod polling settings
    poll_interval: float = 1.0  # Seconds between pod lookups
    start_timeout: int = 600  # Max seconds a pod may stay Pending, 0 = unbounded
    wait_timeout: int = 0  # Max seconds a pod may stay Running, 0 = unbounded
    lookup_retries: int = 3  # Retries for transport errors on a single lookup

    log_level: str = "INFO"

    class Config:
        env_file = ".env"
        env_prefix = "PODRUNNER_"

@lru_cache()
def get_settings() -> Settings:
    return Settings()
