"""Tests for locating installed packages."""

from pathlib import Path

import pytest

from lmsbuild.config.models import ProjectConfig
from lmsbuild.packaging.locator import (
    PackageLocator,
    config_file_names,
    create_package_locator,
    version_file_for,
)
from lmsbuild.services.orchestrator import create_build_orchestrator


def _install_package(
    directory: Path, version: str = "2.0", compatibility: str = "AnyNewerVersion"
) -> Path:
    """Write the generated locator and version files into ``directory``."""
    config = ProjectConfig(
        project={"version": version}, export={"compatibility": compatibility}
    )
    plan = create_build_orchestrator().configure(config)
    directory.mkdir(parents=True, exist_ok=True)
    for generated in plan.generated_files:
        (directory / generated.name).write_text(generated.content)
    return directory


def _locator(*prefixes: Path) -> PackageLocator:
    return create_package_locator(prefixes, use_environment=False, system_prefixes=())


class TestFileNames:
    """Test locator and version file naming."""

    def test_config_file_names(self):
        """Test both spellings of the locator file."""
        assert config_file_names("Library") == ("LibraryConfig.cmake", "library-config.cmake")

    def test_version_file_for(self):
        """Test the version file next to each locator spelling."""
        assert version_file_for(Path("/x/LibraryConfig.cmake")) == Path(
            "/x/LibraryConfigVersion.cmake"
        )
        assert version_file_for(Path("/x/library-config.cmake")) == Path(
            "/x/library-config-version.cmake"
        )


class TestFindPackage:
    """Test PackageLocator.find_package."""

    def test_found_when_prefix_is_config_dir(self, tmp_path):
        """Test passing the config directory itself as a prefix."""
        config_dir = _install_package(tmp_path / "usr/lib/cmake/LMS")
        result = _locator(config_dir).find_package("Library")

        assert result.found
        assert result.config_file == config_dir / "LibraryConfig.cmake"
        assert result.version == "2.0"

    def test_lms_directory_not_matched_from_prefix(self, tmp_path):
        """Test lib/cmake/LMS is not searched for a package named Library."""
        _install_package(tmp_path / "usr/lib/cmake/LMS")
        result = _locator(tmp_path / "usr").find_package("Library")

        assert not result.found
        assert "CMAKE_PREFIX_PATH" in result.errors[0]
        assert tmp_path / "usr" in result.searched_paths

    def test_found_under_prefix_when_named_after_package(self, tmp_path):
        """Test <prefix>/lib/cmake/<Name>* is searched."""
        _install_package(tmp_path / "usr/lib/cmake/Library")
        result = _locator(tmp_path / "usr").find_package("Library")
        assert result.found
        assert result.config_file.parent == tmp_path / "usr/lib/cmake/Library"

    def test_version_check(self, tmp_path):
        """Test requested versions against the installed version."""
        config_dir = _install_package(tmp_path / "cfg", version="2.0")
        locator = _locator(config_dir)

        assert locator.find_package("Library", "1.5").found
        assert locator.find_package("Library", "2.0").found
        assert not locator.find_package("Library", "3.0").found

    def test_same_major_policy(self, tmp_path):
        """Test the installed compatibility policy is honoured."""
        config_dir = _install_package(
            tmp_path / "cfg", version="3.1", compatibility="SameMajorVersion"
        )
        locator = _locator(config_dir)
        assert locator.find_package("Library", "3.0").found
        assert not locator.find_package("Library", "2.0").found

    def test_environment_prefix(self, tmp_path, monkeypatch):
        """Test CMAKE_PREFIX_PATH is searched."""
        config_dir = _install_package(tmp_path / "env_cfg")
        monkeypatch.setenv("CMAKE_PREFIX_PATH", str(config_dir))
        locator = create_package_locator(system_prefixes=())
        assert locator.find_package("Library").found

    def test_prefix_order(self, tmp_path, monkeypatch):
        """Test explicit prefixes come before the environment and system prefixes."""
        monkeypatch.setenv("CMAKE_PREFIX_PATH", str(tmp_path / "env"))
        locator = create_package_locator(
            [tmp_path / "explicit"], system_prefixes=("/usr/local",)
        )
        assert locator.prefixes() == [
            tmp_path / "explicit",
            tmp_path / "env",
            Path("/usr/local"),
        ]

    def test_first_match_wins(self, tmp_path):
        """Test earlier prefixes shadow later ones."""
        first = _install_package(tmp_path / "first", version="2.0")
        second = _install_package(tmp_path / "second", version="5.0")
        result = _locator(first, second).find_package("Library")
        assert result.version == "2.0"

    @pytest.mark.parametrize("name", ["GTest", "Nothing"])
    def test_not_found(self, tmp_path, name):
        """Test an empty search path."""
        result = _locator(tmp_path).find_package(name)
        assert not result.found
        assert not result.is_success()
