"""Configuration plan: the immutable output of the configure step."""

from pydantic import Field

from lmsbuild.models.base import LmsFrozenModel
from lmsbuild.models.export import ExportDescriptor, GeneratedFile
from lmsbuild.models.graph import TargetGraph
from lmsbuild.models.install import InstallRule
from lmsbuild.models.package import PackageManifest
from lmsbuild.models.target import UsageRequirements


class ConfigurationPlan(LmsFrozenModel):
    """Everything the external build and packaging tools need."""

    project_name: str
    project_version: str
    cxx_standard: int = 17
    cxx_standard_required: bool = True
    compile_options: tuple[str, ...] = ()
    include_directories: tuple[str, ...] = ()
    test_package: str | None = None
    options: dict[str, bool] = Field(default_factory=dict)
    graph: TargetGraph
    usage: dict[str, UsageRequirements] = Field(default_factory=dict)
    install_rules: tuple[InstallRule, ...] = ()
    export: ExportDescriptor | None = None
    generated_files: tuple[GeneratedFile, ...] = ()
    manifest: PackageManifest
    diagnostics: tuple[str, ...] = ()

    def option(self, name: str) -> bool:
        return self.options[name]

    def install_rules_for(self, target: str) -> tuple[InstallRule, ...]:
        return tuple(rule for rule in self.install_rules if rule.target == target)

    def generated_file(self, name: str) -> GeneratedFile:
        for generated in self.generated_files:
            if generated.name == name:
                return generated
        raise KeyError(name)
