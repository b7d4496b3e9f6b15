"""Install rule and install plan models."""

from enum import Enum
from pathlib import Path

from pydantic import Field, model_validator

from lmsbuild.models.base import LmsFrozenModel
from lmsbuild.models.export import ExportDescriptor


class ArtifactKind(str, Enum):
    """Kinds of installed artifacts."""

    RUNTIME = "RUNTIME"
    LIBRARY = "LIBRARY"
    ARCHIVE = "ARCHIVE"
    HEADERS = "HEADERS"
    FILES = "FILES"


class InstallRule(LmsFrozenModel):
    """Maps a target artifact, a directory or a list of files to a destination.

    Exactly one source form is used:
    - ``target`` for RUNTIME/LIBRARY/ARCHIVE artifacts
    - ``directory`` plus ``pattern`` for HEADERS
    - ``files`` for FILES
    """

    kind: ArtifactKind
    destination: str
    target: str | None = None
    export_set: str | None = None
    directory: str | None = None
    pattern: str | None = None
    files: tuple[str, ...] = ()
    from_build_dir: bool = Field(
        default=False, description="FILES sources live in the build tree, not the source tree"
    )

    @model_validator(mode="after")
    def validate_source_form(self) -> "InstallRule":
        if Path(self.destination).is_absolute():
            raise ValueError(
                f"Install destination must be relative to the prefix: "
                f"'{self.destination}'"
            )
        if self.kind in (ArtifactKind.RUNTIME, ArtifactKind.LIBRARY, ArtifactKind.ARCHIVE):
            if not self.target or self.directory or self.files:
                raise ValueError(f"{self.kind} rule must name exactly one target")
        elif self.kind == ArtifactKind.HEADERS:
            if not self.directory or self.target or self.files:
                raise ValueError("HEADERS rule must name a source directory")
        elif not self.files or self.target or self.directory:
            raise ValueError("FILES rule must list at least one file")
        return self

    @property
    def is_target_rule(self) -> bool:
        return self.target is not None


class InstallPlan(LmsFrozenModel):
    """Install rules and export descriptor for one configuration."""

    rules: tuple[InstallRule, ...] = ()
    export: ExportDescriptor | None = None

    def rules_for(self, target: str) -> tuple[InstallRule, ...]:
        return tuple(rule for rule in self.rules if rule.target == target)

    def referenced_targets(self) -> tuple[str, ...]:
        names: list[str] = []
        for rule in self.rules:
            if rule.target and rule.target not in names:
                names.append(rule.target)
        if self.export:
            names.extend(t for t in self.export.targets if t not in names)
        return tuple(names)


class InstallEntry(LmsFrozenModel):
    """A concrete file copy performed at install time."""

    source: Path
    destination: Path
    kind: ArtifactKind
