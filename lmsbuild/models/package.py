"""Package manifest model."""

from pydantic import field_validator

from lmsbuild.models.base import LmsFrozenModel
from lmsbuild.models.version import Version


class PackageManifest(LmsFrozenModel):
    """Metadata handed to the external packaging tool."""

    generator: str
    name: str
    version: str
    contact: str
    description: str | None = None
    vendor: str | None = None

    @field_validator("version")
    @classmethod
    def validate_version(cls, v: str) -> str:
        Version.parse(v)
        return v

    @field_validator("generator")
    @classmethod
    def validate_generator(cls, v: str) -> str:
        return v.upper()

    @property
    def archive_name(self) -> str:
        """File name of the produced archive, e.g. ``CMakeTut-4.0.deb``."""
        extensions = {"DEB": "deb", "RPM": "rpm", "TGZ": "tar.gz", "ZIP": "zip"}
        extension = extensions.get(self.generator, self.generator.lower())
        return f"{self.name}-{self.version}.{extension}"
