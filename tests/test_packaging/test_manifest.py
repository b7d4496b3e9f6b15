"""Tests for package manifest emission."""

import pytest

from lmsbuild.config.models import ProjectConfig
from lmsbuild.packaging.manifest import emit_package_manifest


def test_default_manifest():
    """Test the default manifest values."""
    manifest = emit_package_manifest(ProjectConfig())
    assert manifest.generator == "DEB"
    assert manifest.name == "CMakeTut"
    assert manifest.version == "4.0"
    assert manifest.contact == "yourname@example.com"
    assert manifest.archive_name == "CMakeTut-4.0.deb"


def test_package_version_independent_of_project_version():
    """Test the package version is emitted exactly as configured."""
    config = ProjectConfig(project={"version": "2.0"}, package={"version": "4.0"})
    assert emit_package_manifest(config).version == "4.0"
    assert config.project.version == "2.0"


@pytest.mark.parametrize(
    ("generator", "archive"),
    [("rpm", "CMakeTut-4.0.rpm"), ("TGZ", "CMakeTut-4.0.tar.gz"), ("7Z", "CMakeTut-4.0.7z")],
)
def test_archive_names(generator, archive):
    """Test generator names are normalized and map onto archive extensions."""
    manifest = emit_package_manifest(ProjectConfig(package={"generator": generator}))
    assert manifest.generator == generator.upper()
    assert manifest.archive_name == archive


def test_optional_fields():
    """Test description and vendor pass through."""
    config = ProjectConfig(package={"description": "LMS sample", "vendor": "Example"})
    manifest = emit_package_manifest(config)
    assert manifest.description == "LMS sample"
    assert manifest.vendor == "Example"
