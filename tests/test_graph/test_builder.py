"""Tests for target graph construction."""

import pytest

from lmsbuild.config.models import ProjectConfig
from lmsbuild.core.errors import GraphError
from lmsbuild.graph.builder import build_target_graph
from lmsbuild.models.target import TargetKind


class TestBuildTargetGraphEnabled:
    """Test the graph with the library enabled."""

    def setup_method(self):
        """Build the default graph."""
        self.graph = build_target_graph(ProjectConfig(), use_library=True)

    def test_targets(self):
        """Test every target of the sample project is present."""
        assert set(self.graph.names()) == {
            "ProjectSettings",
            "CMakeTut",
            "Library",
            "GTest::GTest",
            "GTest::Main",
            "TestLibrary",
        }

    def test_settings_target(self):
        """Test the interface target carries the language standard."""
        settings = self.graph.get("ProjectSettings")
        assert settings.kind == TargetKind.INTERFACE
        assert [r.value for r in settings.compile_features] == ["cxx_std_17"]
        assert settings.compile_features[0].visibility == "INTERFACE"

    def test_library_target(self):
        """Test the static library and its public include directory."""
        library = self.graph.get("Library")
        assert library.kind == TargetKind.STATIC_LIBRARY
        assert library.sources == (
            "lib/Library/Library.cpp",
            "lib/Library/User.cpp",
            "lib/Library/Book.cpp",
        )
        assert [(r.value, r.visibility) for r in library.include_directories] == [
            ("include", "PUBLIC")
        ]

    def test_executable_links_library_privately(self):
        """Test the executable links the library and defines USE_LIBRARY."""
        executable = self.graph.get("CMakeTut")
        assert [(l.target, l.visibility) for l in executable.links] == [
            ("Library", "PRIVATE")
        ]
        assert [d.value for d in executable.compile_definitions] == ["USE_LIBRARY"]
        assert not executable.links_to("ProjectSettings")

    def test_test_executable(self):
        """Test the test executable links the framework and the library."""
        test_target = self.graph.get("TestLibrary")
        assert self.graph.links_of("TestLibrary") == (
            "GTest::GTest",
            "GTest::Main",
            "Library",
        )
        assert all(link.visibility == "PRIVATE" for link in test_target.links)
        assert test_target.include_directories[0].visibility == "PRIVATE"
        assert self.graph.get("GTest::Main").kind == TargetKind.IMPORTED


class TestBuildTargetGraphDisabled:
    """Test the graph with the library disabled."""

    def test_only_settings_and_executable(self):
        """Test no library, test or framework targets exist."""
        graph = build_target_graph(ProjectConfig(), use_library=False)
        assert graph.names() == ("ProjectSettings", "CMakeTut")
        executable = graph.get("CMakeTut")
        assert executable.links_to("ProjectSettings")
        assert executable.compile_definitions == ()

    def test_standard_follows_config(self):
        """Test the settings target uses the configured standard."""
        config = ProjectConfig(project={"cxx_standard": 20})
        graph = build_target_graph(config, use_library=False)
        assert graph.get("ProjectSettings").compile_features[0].value == "cxx_std_20"


def test_invalid_layout_raises_graph_error():
    """Test a layout producing duplicate names is a graph error."""
    config = ProjectConfig(layout={"library": "CMakeTut"})
    with pytest.raises(GraphError, match="Invalid target graph"):
        build_target_graph(config, use_library=True)


def test_graphs_are_independent():
    """Test two configurations can be built side by side."""
    on = build_target_graph(ProjectConfig(), use_library=True)
    off = build_target_graph(ProjectConfig(), use_library=False)
    assert on.has("Library")
    assert not off.has("Library")
    assert on.has("Library")
