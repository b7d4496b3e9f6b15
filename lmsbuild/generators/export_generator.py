"""Generation of the locator and version files for an export descriptor."""

from pathlib import PurePosixPath

from lmsbuild.adapters.template_adapter import create_template_adapter
from lmsbuild.core.structlog_logger import StructlogMixin
from lmsbuild.generators.templates import LOCATOR_TEMPLATE, VERSION_TEMPLATE
from lmsbuild.models.export import ExportDescriptor, GeneratedFile
from lmsbuild.models.version import Version, parse_compatibility
from lmsbuild.protocols.template_adapter_protocol import TemplateAdapterProtocol


def prefix_relpath(destination: str) -> str:
    """Relative path from an install destination back to the install prefix.

    ``lib/cmake/LMS`` -> ``../../../``
    """
    depth = len(PurePosixPath(destination).parts)
    return "../" * depth


class ExportFileGenerator(StructlogMixin):
    """Render ``<Package>Config.cmake`` and ``<Package>ConfigVersion.cmake``."""

    def __init__(self, template_adapter: TemplateAdapterProtocol | None = None) -> None:
        super().__init__()
        self.template_adapter = template_adapter or create_template_adapter()

    def generate(
        self, descriptor: ExportDescriptor, include_destination: str = "include"
    ) -> tuple[GeneratedFile, GeneratedFile]:
        """Render the locator and version files for ``descriptor``."""
        return (
            self.generate_locator(descriptor, include_destination),
            self.generate_version_file(descriptor),
        )

    def generate_locator(
        self, descriptor: ExportDescriptor, include_destination: str = "include"
    ) -> GeneratedFile:
        content = self.template_adapter.render_string(
            LOCATOR_TEMPLATE,
            {
                "package_name": descriptor.package_name,
                "version": descriptor.version,
                "prefix_relpath": prefix_relpath(descriptor.destination),
                "include_destination": include_destination,
                "targets": list(descriptor.targets),
                "targets_file": descriptor.targets_file,
                "find_components": f"${{{descriptor.package_name}_FIND_COMPONENTS}}",
            },
        )
        self.logger.debug("locator_file_generated", file=descriptor.locator_file)
        return GeneratedFile(name=descriptor.locator_file, content=content)

    def generate_version_file(self, descriptor: ExportDescriptor) -> GeneratedFile:
        version = Version.parse(descriptor.version)
        content = self.template_adapter.render_string(
            VERSION_TEMPLATE,
            {
                "package_name": descriptor.package_name,
                "version": descriptor.version,
                "compatibility": parse_compatibility(descriptor.compatibility).value,
                "major": version.major,
                "minor": version.minor,
            },
        )
        self.logger.debug(
            "version_file_generated",
            file=descriptor.version_file,
            compatibility=parse_compatibility(descriptor.compatibility).value,
        )
        return GeneratedFile(name=descriptor.version_file, content=content)


def create_export_file_generator(
    template_adapter: TemplateAdapterProtocol | None = None,
) -> ExportFileGenerator:
    """Create an export file generator."""
    return ExportFileGenerator(template_adapter)
