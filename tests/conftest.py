"""Core test fixtures for the lmsbuild project."""

import logging
import os
from collections.abc import Generator
from pathlib import Path
from unittest.mock import Mock

import pytest
import yaml
from typer.testing import CliRunner

from lmsbuild.config.models import ProjectConfig
from lmsbuild.protocols import FileAdapterProtocol, TemplateAdapterProtocol
from lmsbuild.services.orchestrator import BuildOrchestrator


HEADERS = ("Book.h", "Library.h", "User.h")


# ---- Test Isolation Fixtures ----


@pytest.fixture(autouse=True)
def isolated_environment(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> Generator[Path, None, None]:
    """Run every test in an empty working directory with a clean environment.

    - LMSBUILD_* variables and CMAKE_PREFIX_PATH are removed
    - XDG_CONFIG_HOME points into the temporary directory
    - The current directory is the temporary directory
    """
    for key in list(os.environ):
        if key.startswith("LMSBUILD_") or key == "CMAKE_PREFIX_PATH":
            monkeypatch.delenv(key, raising=False)
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "xdg"))
    monkeypatch.chdir(tmp_path)

    yield tmp_path

    # CLI runs attach handlers to streams that are closed after the run
    root_logger = logging.getLogger()
    for handler in list(root_logger.handlers):
        root_logger.removeHandler(handler)


# ---- Base Fixtures ----


@pytest.fixture
def cli_runner() -> CliRunner:
    """Return a Typer CLI test runner."""
    return CliRunner()


@pytest.fixture
def mock_file_adapter() -> Mock:
    """Create a mock file adapter for testing."""
    return Mock(spec=FileAdapterProtocol)


@pytest.fixture
def mock_template_adapter() -> Mock:
    """Create a mock template adapter for testing."""
    return Mock(spec=TemplateAdapterProtocol)


# ---- Configuration Fixtures ----


@pytest.fixture
def default_config() -> ProjectConfig:
    """Project configuration with every default in place."""
    return ProjectConfig()


@pytest.fixture
def disabled_config() -> ProjectConfig:
    """Project configuration with the library option turned off."""
    return ProjectConfig(options={"USE_LIBRARY": "OFF"})


@pytest.fixture
def config_file(tmp_path: Path) -> Path:
    """Write a project config file in the working directory."""
    path = tmp_path / "lmsbuild.yaml"
    data = {
        "project": {"name": "CMakeTut", "version": "2.1"},
        "options": {"USE_LIBRARY": "ON"},
        "package": {"version": "4.1", "vendor": "Example Corp"},
    }
    path.write_text(yaml.safe_dump(data), encoding="utf-8")
    return path


# ---- Project Tree Fixtures ----


@pytest.fixture
def project_tree(tmp_path: Path) -> Path:
    """Create a source tree with the library headers."""
    source_dir = tmp_path / "src_tree"
    include_dir = source_dir / "include"
    include_dir.mkdir(parents=True)
    for header in HEADERS:
        (include_dir / header).write_text(f"// {header}\n", encoding="utf-8")
    (include_dir / "README.md").write_text("not a header\n", encoding="utf-8")
    return source_dir


@pytest.fixture
def orchestrator() -> BuildOrchestrator:
    """Orchestrator using the real filesystem and template adapters."""
    return BuildOrchestrator()
