"""Usage requirement propagation across link edges."""

from collections.abc import Iterable

from lmsbuild.config.models import ProjectInfo
from lmsbuild.core.errors import GraphError
from lmsbuild.core.structlog_logger import get_struct_logger
from lmsbuild.models.graph import TargetGraph
from lmsbuild.models.target import Requirement, Target, UsageRequirements


logger = get_struct_logger(__name__)

_FIELDS = (
    "include_directories",
    "compile_features",
    "compile_definitions",
    "compile_options",
)


def _append_unique(bucket: list[str], values: Iterable[str]) -> None:
    for value in values:
        if value not in bucket:
            bucket.append(value)


def _interface_closure(graph: TargetGraph, name: str, stack: tuple[str, ...]) -> list[str]:
    """Targets whose interface ``name`` passes on: itself plus PUBLIC/INTERFACE links."""
    if name in stack:
        cycle = " -> ".join((*stack, name))
        raise GraphError("Link cycle detected", {"cycle": cycle})
    closure = [name]
    for link in graph.get(name).links:
        if link.propagates:
            _append_unique(
                closure, _interface_closure(graph, link.target, (*stack, name))
            )
    return closure


def check_acyclic(graph: TargetGraph) -> None:
    """Raise GraphError if any chain of links, of any visibility, loops back."""
    done: set[str] = set()

    def visit(name: str, path: tuple[str, ...]) -> None:
        if name in path:
            raise GraphError("Link cycle detected", {"cycle": " -> ".join((*path, name))})
        if name in done:
            return
        for dependency in graph.links_of(name):
            visit(dependency, (*path, name))
        done.add(name)

    for name in graph.names():
        visit(name, ())


def _values(requirements: tuple[Requirement, ...], own: bool) -> list[str]:
    if own:
        return [r.value for r in requirements if r.applies_to_self]
    return [r.value for r in requirements if r.propagates]


def resolve_target_usage(
    graph: TargetGraph, target: Target, project: ProjectInfo | None = None
) -> UsageRequirements:
    """Effective compile settings of one target."""
    buckets: dict[str, list[str]] = {field: [] for field in _FIELDS}
    link_libraries: list[str] = []

    if project is not None and target.is_buildable:
        _append_unique(buckets["include_directories"], project.include_directories)
        _append_unique(buckets["compile_options"], project.compile_options)

    for field in _FIELDS:
        _append_unique(buckets[field], _values(getattr(target, field), own=True))

    for link in target.links:
        for provider_name in _interface_closure(graph, link.target, (target.name,)):
            _append_unique(link_libraries, [provider_name])
            provider = graph.get(provider_name)
            for field in _FIELDS:
                _append_unique(buckets[field], _values(getattr(provider, field), own=False))

    if project is not None and target.is_buildable:
        _append_unique(buckets["compile_features"], [f"cxx_std_{project.cxx_standard}"])

    return UsageRequirements(
        target=target.name,
        link_libraries=tuple(link_libraries),
        **{field: tuple(values) for field, values in buckets.items()},
    )


def resolve_usage_requirements(
    graph: TargetGraph, project: ProjectInfo | None = None
) -> dict[str, UsageRequirements]:
    """Resolve effective usage requirements for every target in the graph.

    A consumer receives the PUBLIC and INTERFACE requirements of each direct
    dependency and of everything that dependency links PUBLIC or INTERFACE.
    PRIVATE links stop at their direct consumer. Project-wide include
    directories, compile options and the language standard apply to every
    buildable target.

    Raises:
        GraphError: If the link graph contains a cycle
    """
    check_acyclic(graph)
    usage = {
        target.name: resolve_target_usage(graph, target, project)
        for target in graph.targets
    }
    logger.debug("usage_requirements_resolved", targets=len(usage))
    return usage
