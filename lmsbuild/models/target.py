"""Target graph models: targets, usage requirements and link edges."""

from enum import Enum

from pydantic import Field, field_validator, model_validator

from lmsbuild.models.base import LmsFrozenModel


class TargetKind(str, Enum):
    """Kinds of build targets."""

    INTERFACE = "interface"
    STATIC_LIBRARY = "static_library"
    EXECUTABLE = "executable"
    IMPORTED = "imported"


class Visibility(str, Enum):
    """Propagation scope of a requirement or link."""

    PRIVATE = "PRIVATE"
    PUBLIC = "PUBLIC"
    INTERFACE = "INTERFACE"


# Visibilities that are seen by consumers of a target
PROPAGATED = (Visibility.PUBLIC, Visibility.INTERFACE)


class Requirement(LmsFrozenModel):
    """A single usage requirement value (include path, feature, definition...)."""

    value: str
    visibility: Visibility = Visibility.PRIVATE

    @field_validator("value")
    @classmethod
    def validate_value(cls, v: str) -> str:
        if not v:
            raise ValueError("Requirement value cannot be empty")
        return v

    @property
    def propagates(self) -> bool:
        return self.visibility in PROPAGATED

    @property
    def applies_to_self(self) -> bool:
        return self.visibility != Visibility.INTERFACE


class LinkItem(LmsFrozenModel):
    """A link from a target to one of its dependencies."""

    target: str
    visibility: Visibility = Visibility.PRIVATE

    @property
    def propagates(self) -> bool:
        return self.visibility in PROPAGATED


class Target(LmsFrozenModel):
    """A named build unit."""

    name: str
    kind: TargetKind
    sources: tuple[str, ...] = ()
    include_directories: tuple[Requirement, ...] = ()
    compile_features: tuple[Requirement, ...] = ()
    compile_definitions: tuple[Requirement, ...] = ()
    compile_options: tuple[Requirement, ...] = ()
    links: tuple[LinkItem, ...] = ()

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        if not v or any(ch.isspace() for ch in v):
            raise ValueError(f"Invalid target name: '{v}'")
        return v

    @model_validator(mode="after")
    def validate_kind_constraints(self) -> "Target":
        if self.kind in (TargetKind.INTERFACE, TargetKind.IMPORTED) and self.sources:
            raise ValueError(f"{self.kind} target '{self.name}' cannot have sources")
        if self.kind == TargetKind.INTERFACE:
            for requirement in self.requirements():
                if requirement.visibility != Visibility.INTERFACE:
                    raise ValueError(
                        f"Interface target '{self.name}' only accepts INTERFACE "
                        f"requirements, got {requirement.visibility} "
                        f"'{requirement.value}'"
                    )
        if self.kind in (TargetKind.STATIC_LIBRARY, TargetKind.EXECUTABLE):
            if not self.sources:
                raise ValueError(f"Target '{self.name}' has no source files")
        return self

    def requirements(self) -> tuple[Requirement, ...]:
        return (
            self.include_directories
            + self.compile_features
            + self.compile_definitions
            + self.compile_options
        )

    @property
    def is_buildable(self) -> bool:
        """True for targets that produce an artifact of their own."""
        return self.kind in (TargetKind.STATIC_LIBRARY, TargetKind.EXECUTABLE)

    def links_to(self, name: str) -> bool:
        return any(link.target == name for link in self.links)


class LinkEdge(LmsFrozenModel):
    """Directed edge from a consumer to a dependency."""

    consumer: str
    dependency: str
    visibility: Visibility


class UsageRequirements(LmsFrozenModel):
    """Effective compile settings of a target after propagation."""

    target: str
    include_directories: tuple[str, ...] = ()
    compile_features: tuple[str, ...] = ()
    compile_definitions: tuple[str, ...] = ()
    compile_options: tuple[str, ...] = ()
    link_libraries: tuple[str, ...] = Field(
        default=(), description="Direct and transitively propagated link targets"
    )
