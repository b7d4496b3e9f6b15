"""Service layer for lmsbuild."""

from lmsbuild.services.orchestrator import (
    LIBRARY_DISABLED_MESSAGE,
    BuildOrchestrator,
    create_build_orchestrator,
)


__all__ = ["LIBRARY_DISABLED_MESSAGE", "BuildOrchestrator", "create_build_orchestrator"]
