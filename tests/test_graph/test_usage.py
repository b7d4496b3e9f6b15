"""Tests for usage requirement propagation."""

import pytest

from lmsbuild.config.models import ProjectConfig, ProjectInfo
from lmsbuild.core.errors import GraphError
from lmsbuild.graph.builder import build_target_graph
from lmsbuild.graph.usage import (
    check_acyclic,
    resolve_target_usage,
    resolve_usage_requirements,
)
from lmsbuild.models.graph import TargetGraph
from lmsbuild.models.target import (
    LinkItem,
    Requirement,
    Target,
    TargetKind,
    Visibility,
)


def _target(name, links=(), includes=(), kind=TargetKind.STATIC_LIBRARY):
    return Target(
        name=name,
        kind=kind,
        sources=(f"{name}.cpp",),
        include_directories=tuple(includes),
        links=tuple(links),
    )


class TestSampleProjectUsage:
    """Test resolved usage for the sample project."""

    def test_executable_receives_library_include(self):
        """Test PUBLIC requirements of a dependency reach the consumer."""
        graph = build_target_graph(ProjectConfig(), use_library=True)
        usage = resolve_usage_requirements(graph, ProjectConfig().project)

        executable = usage["CMakeTut"]
        assert "include" in executable.include_directories
        assert executable.compile_definitions == ("USE_LIBRARY",)
        assert executable.link_libraries == ("Library",)
        assert "cxx_std_17" in executable.compile_features
        assert executable.compile_options == ("-Wall", "-Wextra", "-Werror")

    def test_interface_target_has_no_own_settings(self):
        """Test INTERFACE requirements do not apply to their owner."""
        graph = build_target_graph(ProjectConfig(), use_library=False)
        usage = resolve_usage_requirements(graph, ProjectConfig().project)
        assert usage["ProjectSettings"].compile_features == ()
        assert usage["CMakeTut"].compile_features == ("cxx_std_17",)
        assert usage["CMakeTut"].link_libraries == ("ProjectSettings",)

    def test_without_project_settings(self):
        """Test propagation alone when no project settings are given."""
        graph = build_target_graph(ProjectConfig(), use_library=False)
        usage = resolve_usage_requirements(graph)
        assert usage["CMakeTut"].compile_features == ("cxx_std_17",)
        assert usage["CMakeTut"].compile_options == ()


class TestPropagation:
    """Test PRIVATE/PUBLIC/INTERFACE semantics on small graphs."""

    def test_private_link_does_not_propagate(self):
        """Test C sees A's interface only through PUBLIC links."""
        a = _target(
            "A", includes=[Requirement(value="a_inc", visibility=Visibility.PUBLIC)]
        )
        b = _target("B", links=[LinkItem(target="A")])
        c = _target("C", links=[LinkItem(target="B")])
        graph = TargetGraph(targets=(a, b, c))

        assert resolve_target_usage(graph, b).include_directories == ("a_inc",)
        assert resolve_target_usage(graph, c).include_directories == ()
        assert resolve_target_usage(graph, c).link_libraries == ("B",)

    def test_public_link_propagates_transitively(self):
        """Test a PUBLIC link passes the dependency's interface on."""
        a = _target(
            "A", includes=[Requirement(value="a_inc", visibility=Visibility.INTERFACE)]
        )
        b = _target("B", links=[LinkItem(target="A", visibility=Visibility.PUBLIC)])
        c = _target("C", links=[LinkItem(target="B")])
        graph = TargetGraph(targets=(a, b, c))

        usage_c = resolve_target_usage(graph, c)
        assert usage_c.include_directories == ("a_inc",)
        assert usage_c.link_libraries == ("B", "A")
        assert resolve_target_usage(graph, a).include_directories == ()

    def test_private_requirement_stays_local(self):
        """Test PRIVATE requirements apply to the owner only."""
        a = _target("A", includes=[Requirement(value="private_inc")])
        b = _target("B", links=[LinkItem(target="A", visibility=Visibility.PUBLIC)])
        graph = TargetGraph(targets=(a, b))

        assert resolve_target_usage(graph, a).include_directories == ("private_inc",)
        assert resolve_target_usage(graph, b).include_directories == ()

    def test_project_settings_only_for_buildable_targets(self):
        """Test imported targets do not get project-wide settings."""
        imported = Target(name="Ext::Ext", kind=TargetKind.IMPORTED)
        graph = TargetGraph(targets=(imported,))
        usage = resolve_target_usage(graph, imported, ProjectInfo())
        assert usage.include_directories == ()
        assert usage.compile_features == ()


class TestCycles:
    """Test cycle detection."""

    def test_cycle_detected(self):
        """Test a link cycle is a graph error naming the cycle."""
        a = _target("A", links=[LinkItem(target="B")])
        b = _target("B", links=[LinkItem(target="A")])
        graph = TargetGraph(targets=(a, b))

        with pytest.raises(GraphError) as exc_info:
            check_acyclic(graph)
        assert exc_info.value.context["cycle"] == "A -> B -> A"

        with pytest.raises(GraphError, match="Link cycle detected"):
            resolve_usage_requirements(graph)

    def test_diamond_is_not_a_cycle(self):
        """Test shared dependencies are fine."""
        base = _target("Base")
        left = _target("Left", links=[LinkItem(target="Base")])
        right = _target("Right", links=[LinkItem(target="Base")])
        top = _target("Top", links=[LinkItem(target="Left"), LinkItem(target="Right")])
        check_acyclic(TargetGraph(targets=(base, left, right, top)))
