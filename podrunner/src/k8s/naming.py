"""
Step name to Kubernetes resource name mapping.
"""

def sanitize(name: str) -> str:
    """
    Map a step name to a cluster-legal resource name.

    Kubernetes names reject underscores, so each one becomes a hyphen.
    Length and charset limits are left to the API server.
    """
    return name.replace("_", "-")
