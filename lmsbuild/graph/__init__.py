"""Target graph construction and usage requirement propagation."""

from lmsbuild.graph.builder import build_target_graph
from lmsbuild.graph.usage import resolve_target_usage, resolve_usage_requirements


__all__ = ["build_target_graph", "resolve_target_usage", "resolve_usage_requirements"]
