"""Package manifest emission."""

from pydantic import ValidationError

from lmsbuild.config.models import ProjectConfig
from lmsbuild.core.errors import ConfigError
from lmsbuild.core.structlog_logger import get_struct_logger
from lmsbuild.models.package import PackageManifest
from lmsbuild.models.version import Version


logger = get_struct_logger(__name__)


def emit_package_manifest(config: ProjectConfig) -> PackageManifest:
    """Build the manifest consumed by the external packaging tool.

    The package version is emitted exactly as configured. It is tracked
    separately from the project version; a mismatch is logged at info level, not corrected.
    """
    package = config.package
    try:
        manifest = PackageManifest(
            generator=package.generator,
            name=package.name,
            version=package.version,
            contact=package.contact,
            description=package.description,
            vendor=package.vendor,
        )
    except ValidationError as e:
        raise ConfigError(f"Invalid package manifest: {e}") from e

    if Version.parse(manifest.version) != Version.parse(config.project.version):
        logger.info(
            "package_version_differs",
            package_version=manifest.version,
            project_version=config.project.version,
        )

    logger.debug(
        "package_manifest_emitted",
        generator=manifest.generator,
        name=manifest.name,
        version=manifest.version,
    )
    return manifest
