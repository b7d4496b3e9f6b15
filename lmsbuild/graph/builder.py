"""Target graph construction.

``build_target_graph`` is a pure function of the project configuration and
the resolved ``USE_LIBRARY`` value, so several configurations can be built
side by side without touching any global state.
"""

from pydantic import ValidationError

from lmsbuild.config.models import ProjectConfig
from lmsbuild.core.errors import GraphError
from lmsbuild.core.structlog_logger import get_struct_logger
from lmsbuild.models.graph import TargetGraph
from lmsbuild.models.target import (
    LinkItem,
    Requirement,
    Target,
    TargetKind,
    Visibility,
)


logger = get_struct_logger(__name__)


def _settings_target(config: ProjectConfig) -> Target:
    """Interface target carrying the language-standard requirement."""
    return Target(
        name=config.layout.settings_target,
        kind=TargetKind.INTERFACE,
        compile_features=(
            Requirement(
                value=f"cxx_std_{config.project.cxx_standard}",
                visibility=Visibility.INTERFACE,
            ),
        ),
    )


def _library_target(config: ProjectConfig) -> Target:
    return Target(
        name=config.layout.library,
        kind=TargetKind.STATIC_LIBRARY,
        sources=tuple(config.layout.library_sources),
        include_directories=(
            Requirement(
                value=config.layout.library_include_dir,
                visibility=Visibility.PUBLIC,
            ),
        ),
    )


def _testing_targets(config: ProjectConfig) -> list[Target]:
    imported = [
        Target(name=name, kind=TargetKind.IMPORTED) for name in config.testing.targets
    ]
    links = tuple(LinkItem(target=t.name) for t in imported) + (
        LinkItem(target=config.layout.library),
    )
    test_executable = Target(
        name=config.layout.test_executable,
        kind=TargetKind.EXECUTABLE,
        sources=tuple(config.layout.test_sources),
        include_directories=(Requirement(value=config.layout.library_include_dir),),
        links=links,
    )
    return [*imported, test_executable]


def build_target_graph(config: ProjectConfig, use_library: bool) -> TargetGraph:
    """Build the target graph for one value of the library option.

    Args:
        config: Project configuration (names, sources, standard)
        use_library: Resolved value of the ``USE_LIBRARY`` option

    Returns:
        Validated, immutable TargetGraph

    Raises:
        GraphError: If the resulting graph violates an invariant
    """
    layout = config.layout
    try:
        targets: list[Target] = [_settings_target(config)]

        if use_library:
            library = _library_target(config)
            executable = Target(
                name=layout.executable,
                kind=TargetKind.EXECUTABLE,
                sources=tuple(layout.executable_sources),
                compile_definitions=(Requirement(value=layout.library_definition),),
                links=(LinkItem(target=library.name),),
            )
            targets.extend([executable, library])
            targets.extend(_testing_targets(config))
        else:
            executable = Target(
                name=layout.executable,
                kind=TargetKind.EXECUTABLE,
                sources=tuple(layout.executable_sources),
                links=(LinkItem(target=layout.settings_target),),
            )
            targets.append(executable)

        graph = TargetGraph(targets=tuple(targets))
    except ValidationError as e:
        raise GraphError(
            f"Invalid target graph: {e}", {"use_library": use_library}
        ) from e

    logger.debug(
        "target_graph_built",
        use_library=use_library,
        targets=list(graph.names()),
        edges=len(graph.edges),
    )
    return graph
