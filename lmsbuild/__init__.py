"""lmsbuild - configure-time build orchestrator for the Library Management System."""

from importlib.metadata import distribution

from .models import ConfigurationPlan
from .services import BuildOrchestrator, create_build_orchestrator


__version__ = distribution(__package__ or "lmsbuild").version

__all__ = [
    "BuildOrchestrator",
    "ConfigurationPlan",
    "create_build_orchestrator",
    "__version__",
]

# Import CLI after setting __version__ to avoid circular imports
from .cli import app, main


__all__ += ["app", "main"]
