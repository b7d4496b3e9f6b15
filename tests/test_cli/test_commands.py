"""Tests for the lmsbuild command line interface."""

import json

import pytest
import yaml

from lmsbuild.cli import app
from lmsbuild.config.models import ProjectConfig
from lmsbuild.services.orchestrator import create_build_orchestrator


pytestmark = pytest.mark.integration


def _write_package_files(directory):
    plan = create_build_orchestrator().configure(ProjectConfig())
    directory.mkdir(parents=True, exist_ok=True)
    for generated in plan.generated_files:
        (directory / generated.name).write_text(generated.content)
    return directory


class TestBasics:
    """Test help and version output."""

    def test_help_command(self, cli_runner):
        """Test help shows available commands."""
        result = cli_runner.invoke(app, ["--help"])
        assert result.exit_code == 0
        assert "Usage:" in result.output
        for command in ["configure", "generate", "manifest", "find-package", "clean"]:
            assert command in result.output

    def test_version(self, cli_runner):
        """Test --version prints the version."""
        result = cli_runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert "lmsbuild v" in result.output

    def test_invalid_format(self, cli_runner):
        """Test unknown output formats are rejected."""
        result = cli_runner.invoke(app, ["configure", "--format", "xml"])
        assert result.exit_code == 2


class TestConfigureCommand:
    """Test the configure command."""

    def test_default_table(self, cli_runner):
        """Test diagnostics and the plan tables."""
        result = cli_runner.invoke(app, ["configure"])
        assert result.exit_code == 0
        assert "-- USE_LIBRARY: ON" in result.output
        assert "Targets" in result.output
        assert "TestLibrary" in result.output

    def test_library_disabled(self, cli_runner):
        """Test -D USE_LIBRARY=OFF prints the disabled diagnostic."""
        result = cli_runner.invoke(app, ["configure", "-D", "USE_LIBRARY=OFF"])
        assert result.exit_code == 0
        assert "-- USE_LIBRARY: OFF" in result.output
        assert "-- Library Management System is disabled." in result.output
        assert "Install Rules" not in result.output

    def test_json_output(self, cli_runner):
        """Test the plan as JSON."""
        result = cli_runner.invoke(app, ["configure", "--format", "json"])
        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert data["options"] == {"USE_LIBRARY": True}
        assert data["project_version"] == "2.0"
        assert data["manifest"]["version"] == "4.0"
        assert len(data["generated_files"]) == 2

    def test_yaml_output_disabled(self, cli_runner):
        """Test the disabled plan as YAML."""
        result = cli_runner.invoke(
            app, ["configure", "-D", "USE_LIBRARY=NO", "--format", "yaml"]
        )
        assert result.exit_code == 0
        data = yaml.safe_load(result.stdout)
        assert data["export"] is None
        assert data["install_rules"] == []
        assert "Library Management System is disabled." in data["diagnostics"]

    def test_build_dir(self, cli_runner, tmp_path):
        """Test --build-dir writes the generated files."""
        build_dir = tmp_path / "build"
        result = cli_runner.invoke(app, ["configure", "--build-dir", str(build_dir)])
        assert result.exit_code == 0
        assert (build_dir / "LibraryConfig.cmake").is_file()
        assert (build_dir / "LibraryConfigVersion.cmake").is_file()

    def test_config_file_option(self, cli_runner, tmp_path):
        """Test -c selects the config file."""
        path = tmp_path / "custom.yaml"
        path.write_text(yaml.safe_dump({"project": {"version": "2.5"}}))
        result = cli_runner.invoke(app, ["-c", str(path), "configure", "-f", "json"])
        assert result.exit_code == 0
        assert json.loads(result.stdout)["project_version"] == "2.5"

    def test_environment_option(self, cli_runner, monkeypatch):
        """Test LMSBUILD_OPTIONS__USE_LIBRARY disables the library."""
        monkeypatch.setenv("LMSBUILD_OPTIONS__USE_LIBRARY", "OFF")
        result = cli_runner.invoke(app, ["configure", "-f", "json"])
        assert result.exit_code == 0
        assert json.loads(result.stdout)["options"] == {"USE_LIBRARY": False}

    def test_missing_config_file(self, cli_runner, tmp_path):
        """Test a missing -c file is a fatal configuration error."""
        result = cli_runner.invoke(
            app, ["-c", str(tmp_path / "missing.yaml"), "configure"]
        )
        assert result.exit_code == 1
        assert "Config file not found" in result.output

    def test_invalid_version(self, cli_runner):
        """Test invalid version strings abort configuration."""
        with open("lmsbuild.yaml", "w") as f:
            yaml.safe_dump({"project": {"version": "2.0-beta"}}, f)
        result = cli_runner.invoke(app, ["configure"])
        assert result.exit_code == 1
        assert "Invalid project configuration" in result.output

    def test_empty_definition(self, cli_runner):
        """Test a definition without a name."""
        result = cli_runner.invoke(app, ["configure", "-D", "=ON"])
        assert result.exit_code == 1
        assert "Empty definition name" in result.output


class TestGenerateCommand:
    """Test the generate command."""

    def test_generate_into_directory(self, cli_runner, tmp_path):
        """Test a directory output receives CMakeLists.txt."""
        out = tmp_path / "out"
        result = cli_runner.invoke(app, ["generate", str(out)])
        assert result.exit_code == 0
        content = (out / "CMakeLists.txt").read_text()
        assert "project(CMakeTut VERSION 2.0)" in content
        assert "target_link_libraries(CMakeTut PRIVATE Library)" in content

    def test_generate_file_disabled(self, cli_runner, tmp_path):
        """Test a file output with the library disabled."""
        out = tmp_path / "CMakeLists.txt"
        result = cli_runner.invoke(app, ["generate", str(out), "-D", "USE_LIBRARY=OFF"])
        assert result.exit_code == 0
        assert "target_link_libraries(CMakeTut PRIVATE ProjectSettings)" in out.read_text()

    def test_generate_with_build_dir(self, cli_runner, tmp_path):
        """Test --build-dir also writes the package files."""
        result = cli_runner.invoke(
            app, ["generate", str(tmp_path / "src"), "--build-dir", str(tmp_path / "build")]
        )
        assert result.exit_code == 0
        assert (tmp_path / "build" / "LibraryConfig.cmake").is_file()


class TestManifestCommand:
    """Test the manifest command."""

    def test_table(self, cli_runner):
        """Test the manifest table."""
        result = cli_runner.invoke(app, ["manifest"])
        assert result.exit_code == 0
        assert "CMakeTut-4.0.deb" in result.output

    def test_json_with_environment(self, cli_runner, monkeypatch):
        """Test the package version from the environment."""
        monkeypatch.setenv("LMSBUILD_PACKAGE__VERSION", "5.0")
        result = cli_runner.invoke(app, ["manifest", "--format", "json"])
        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert data["version"] == "5.0"
        assert data["generator"] == "DEB"


class TestFindPackageCommand:
    """Test the find-package command."""

    def test_found(self, cli_runner, tmp_path):
        """Test a package found through --prefix-path."""
        config_dir = _write_package_files(tmp_path / "usr/lib/cmake/LMS")
        result = cli_runner.invoke(
            app, ["find-package", "Library", "--prefix-path", str(config_dir)]
        )
        assert result.exit_code == 0
        assert "Found Library" in result.output

    def test_found_through_config_prefix_paths(self, cli_runner, tmp_path):
        """Test prefix paths from the config file are searched."""
        config_dir = _write_package_files(tmp_path / "opt/lms")
        (tmp_path / "lmsbuild.yaml").write_text(
            yaml.safe_dump({"prefix_paths": [str(config_dir)]})
        )
        result = cli_runner.invoke(app, ["find-package", "Library", "-f", "json"])
        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert data["found"] is True
        assert data["version"] == "2.0"

    def test_not_found_from_prefix(self, cli_runner, tmp_path):
        """Test lib/cmake/LMS is not found from the bare prefix."""
        _write_package_files(tmp_path / "usr/lib/cmake/LMS")
        result = cli_runner.invoke(
            app, ["find-package", "Library", "-p", str(tmp_path / "usr")]
        )
        assert result.exit_code == 1
        assert "CMAKE_PREFIX_PATH" in result.output

    def test_version_too_new(self, cli_runner, tmp_path):
        """Test a requested version newer than installed."""
        config_dir = _write_package_files(tmp_path / "cfg")
        result = cli_runner.invoke(
            app, ["find-package", "Library", "--version", "3.0", "-p", str(config_dir)]
        )
        assert result.exit_code == 1


class TestInstallManifestCommand:
    """Test the install-manifest command."""

    def test_json(self, cli_runner, project_tree, tmp_path):
        """Test install entries as JSON."""
        prefix = tmp_path / "prefix"
        result = cli_runner.invoke(
            app,
            [
                "install-manifest",
                "--prefix",
                str(prefix),
                "--source-dir",
                str(project_tree),
                "--format",
                "json",
            ],
        )
        assert result.exit_code == 0
        entries = json.loads(result.stdout)
        assert len(entries) == 7
        destinations = {entry["destination"] for entry in entries}
        assert str(prefix / "include" / "Book.h") in destinations
        assert str(prefix / "lib/cmake/LMS/LibraryConfigVersion.cmake") in destinations
        assert not any(entry["destination"].endswith("README.md") for entry in entries)

    def test_disabled(self, cli_runner, project_tree, tmp_path):
        """Test nothing is installed with the library off."""
        result = cli_runner.invoke(
            app,
            [
                "install-manifest",
                "--prefix",
                str(tmp_path / "prefix"),
                "-S",
                str(project_tree),
                "-D",
                "USE_LIBRARY=OFF",
            ],
        )
        assert result.exit_code == 0
        assert "Nothing to install" in result.output


class TestCleanCommand:
    """Test the clean command."""

    def test_clean(self, cli_runner, tmp_path):
        """Test the build directory is removed."""
        build_dir = tmp_path / "build"
        (build_dir / "CMakeFiles").mkdir(parents=True)
        (build_dir / "CMakeCache.txt").write_text("cache")
        result = cli_runner.invoke(app, ["clean", str(build_dir)])
        assert result.exit_code == 0
        assert not build_dir.exists()
        assert "Cleaned" in result.output
