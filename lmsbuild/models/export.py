"""Export descriptor and generated file models."""

from pathlib import PurePosixPath

from pydantic import Field, field_validator

from lmsbuild.models.base import LmsFrozenModel
from lmsbuild.models.version import Version, VersionCompatibility


class GeneratedFile(LmsFrozenModel):
    """A file produced during configuration, written to the build area."""

    name: str
    content: str


class ExportDescriptor(LmsFrozenModel):
    """Bundle of installed targets that downstream projects resolve by name."""

    name: str = Field(description="Export set name, e.g. LibraryTargets")
    package_name: str = Field(description="Name consumers pass to find_package")
    targets: tuple[str, ...]
    destination: str
    locator_file: str
    version_file: str
    version: str
    compatibility: VersionCompatibility = VersionCompatibility.ANY_NEWER

    @field_validator("version")
    @classmethod
    def validate_version(cls, v: str) -> str:
        Version.parse(v)
        return v

    @field_validator("targets")
    @classmethod
    def validate_targets(cls, v: tuple[str, ...]) -> tuple[str, ...]:
        if not v:
            raise ValueError("Export descriptor must bundle at least one target")
        return v

    @property
    def locator_path(self) -> PurePosixPath:
        return PurePosixPath(self.destination) / self.locator_file

    @property
    def version_path(self) -> PurePosixPath:
        return PurePosixPath(self.destination) / self.version_file

    @property
    def targets_file(self) -> str:
        return f"{self.name}.cmake"
