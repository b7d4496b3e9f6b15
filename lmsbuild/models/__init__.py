"""Domain models for lmsbuild."""

from lmsbuild.models.base import LmsBaseModel, LmsFrozenModel
from lmsbuild.models.export import ExportDescriptor, GeneratedFile
from lmsbuild.models.graph import TargetGraph
from lmsbuild.models.install import ArtifactKind, InstallEntry, InstallPlan, InstallRule
from lmsbuild.models.option import USE_LIBRARY, BuildOption, parse_cmake_bool
from lmsbuild.models.package import PackageManifest
from lmsbuild.models.plan import ConfigurationPlan
from lmsbuild.models.results import (
    BaseResult,
    CleanResult,
    FindPackageResult,
    MaterializeResult,
)
from lmsbuild.models.target import (
    LinkEdge,
    LinkItem,
    Requirement,
    Target,
    TargetKind,
    UsageRequirements,
    Visibility,
)
from lmsbuild.models.version import (
    Version,
    VersionCompatibility,
    is_compatible,
    parse_compatibility,
)


__all__ = [
    "ArtifactKind",
    "BaseResult",
    "BuildOption",
    "CleanResult",
    "ConfigurationPlan",
    "ExportDescriptor",
    "FindPackageResult",
    "GeneratedFile",
    "InstallEntry",
    "InstallPlan",
    "InstallRule",
    "LinkEdge",
    "LinkItem",
    "LmsBaseModel",
    "LmsFrozenModel",
    "MaterializeResult",
    "PackageManifest",
    "Requirement",
    "Target",
    "TargetGraph",
    "TargetKind",
    "USE_LIBRARY",
    "UsageRequirements",
    "Version",
    "VersionCompatibility",
    "is_compatible",
    "parse_cmake_bool",
    "parse_compatibility",
]
