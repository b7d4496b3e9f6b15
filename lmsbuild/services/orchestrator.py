"""Build orchestrator: runs the configure pipeline end to end."""

from pathlib import Path

from lmsbuild.adapters.file_adapter import create_file_adapter
from lmsbuild.config.models import ProjectConfig
from lmsbuild.core.errors import DependencyNotFoundError, FileSystemError
from lmsbuild.core.structlog_logger import StructlogMixin
from lmsbuild.generators.export_generator import (
    ExportFileGenerator,
    create_export_file_generator,
)
from lmsbuild.graph.builder import build_target_graph
from lmsbuild.graph.usage import resolve_usage_requirements
from lmsbuild.install.planner import (
    INCLUDE_DESTINATION,
    plan_install,
    resolve_install_entries,
)
from lmsbuild.models.export import GeneratedFile
from lmsbuild.models.install import InstallEntry
from lmsbuild.models.option import USE_LIBRARY, BuildOption
from lmsbuild.models.plan import ConfigurationPlan
from lmsbuild.models.results import CleanResult, MaterializeResult
from lmsbuild.packaging.locator import PackageLocator
from lmsbuild.packaging.manifest import emit_package_manifest
from lmsbuild.protocols.file_adapter_protocol import FileAdapterProtocol


LIBRARY_DISABLED_MESSAGE = "Library Management System is disabled."

# Files the clean-all target removes from the build directory
CLEAN_ENTRIES = ("CMakeCache.txt", "CMakeFiles", "Makefile", "cmake_install.cmake")


class BuildOrchestrator(StructlogMixin):
    """Turn a ProjectConfig into an immutable ConfigurationPlan.

    Stages run once, in order: option resolution, target graph, usage
    requirements, install rules, export descriptor and generated files,
    package manifest.
    """

    def __init__(
        self,
        file_adapter: FileAdapterProtocol | None = None,
        export_generator: ExportFileGenerator | None = None,
    ) -> None:
        super().__init__()
        self.file_adapter = file_adapter or create_file_adapter()
        self.export_generator = export_generator or create_export_file_generator()

    def configure(
        self,
        config: ProjectConfig,
        package_locator: PackageLocator | None = None,
    ) -> ConfigurationPlan:
        """Run the configure step.

        Args:
            config: Project configuration carrying the option values
            package_locator: When given, the testing framework package must
                be found or configuration fails

        Raises:
            DependencyNotFoundError: If the testing framework is missing
            GraphError, InstallPlanError, ConfigError: On invalid input
        """
        diagnostics: list[str] = []

        use_library = USE_LIBRARY.resolve(config.option_value(USE_LIBRARY.name))
        diagnostics.append(f"{USE_LIBRARY.name}: {BuildOption.display(use_library)}")
        self.logger.info("option_resolved", option=USE_LIBRARY.name, value=use_library)

        graph = build_target_graph(config, use_library)
        usage = resolve_usage_requirements(graph, config.project)

        install_plan = plan_install(config, graph, use_library)
        generated_files: tuple[GeneratedFile, ...] = ()
        if install_plan.export is not None:
            generated_files = self.export_generator.generate(
                install_plan.export, include_destination=INCLUDE_DESTINATION
            )

        if not use_library:
            diagnostics.append(LIBRARY_DISABLED_MESSAGE)
            self.logger.info("library_disabled", message=LIBRARY_DISABLED_MESSAGE)

        if package_locator is not None:
            self._require_package(package_locator, config.testing.package, diagnostics)

        manifest = emit_package_manifest(config)

        plan = ConfigurationPlan(
            project_name=config.project.name,
            project_version=config.project.version,
            cxx_standard=config.project.cxx_standard,
            cxx_standard_required=config.project.cxx_standard_required,
            compile_options=tuple(config.project.compile_options),
            include_directories=tuple(config.project.include_directories),
            test_package=config.testing.package,
            options={USE_LIBRARY.name: use_library},
            graph=graph,
            usage=usage,
            install_rules=install_plan.rules,
            export=install_plan.export,
            generated_files=generated_files,
            manifest=manifest,
            diagnostics=tuple(diagnostics),
        )
        self.logger.info(
            "configuration_complete",
            targets=len(graph.targets),
            install_rules=len(plan.install_rules),
            exported=plan.export is not None,
        )
        return plan

    def _require_package(
        self, locator: PackageLocator, package: str, diagnostics: list[str]
    ) -> None:
        result = locator.find_package(package)
        if not result.found:
            self.logger.error("required_package_missing", package=package)
            raise DependencyNotFoundError(
                f"Could not find required package '{package}'",
                {"searched": len(result.searched_paths)},
            )
        diagnostics.append(f"Found {package}: {result.config_file}")

    def materialize(self, plan: ConfigurationPlan, build_dir: Path) -> MaterializeResult:
        """Write the plan's generated files into the build directory."""
        result = MaterializeResult(success=True, build_dir=build_dir)
        if not plan.generated_files:
            result.add_message("No generated files to write")
            return result

        for generated in plan.generated_files:
            target_path = build_dir / generated.name
            try:
                self.file_adapter.write_text(target_path, generated.content)
            except FileSystemError as e:
                self.log_error_with_context("generated_file_write_failed", e)
                result.add_error(str(e))
                return result
            result.written_files.append(target_path)
            result.add_message(f"Generated {target_path}")

        self.logger.info(
            "generated_files_written",
            build_dir=str(build_dir),
            count=len(result.written_files),
        )
        return result

    def install_entries(
        self,
        plan: ConfigurationPlan,
        source_dir: Path,
        build_dir: Path,
        prefix: Path,
    ) -> list[InstallEntry]:
        """Concrete copies an install of ``plan`` would perform."""
        return resolve_install_entries(
            plan.install_rules,
            source_dir=source_dir,
            build_dir=build_dir,
            prefix=prefix,
            graph=plan.graph,
            file_adapter=self.file_adapter,
        )

    def clean(self, build_dir: Path) -> CleanResult:
        """Remove generated build-system files and the build directory itself."""
        result = CleanResult(success=True)
        resolved = build_dir.expanduser().resolve()
        if resolved == Path(resolved.anchor) or resolved == Path.home().resolve():
            raise FileSystemError(
                "Refusing to clean a filesystem root or home directory",
                {"path": str(resolved)},
            )
        if not self.file_adapter.exists(resolved):
            result.add_message(f"Nothing to clean at {resolved}")
            return result

        try:
            for entry in CLEAN_ENTRIES:
                path = resolved / entry
                if self.file_adapter.is_dir(path):
                    self.file_adapter.remove_dir(path)
                elif self.file_adapter.exists(path):
                    self.file_adapter.remove_file(path)
                else:
                    continue
                result.removed_paths.append(path)
            self.file_adapter.remove_dir(resolved)
            result.removed_paths.append(resolved)
        except FileSystemError as e:
            self.log_error_with_context("clean_failed", e, build_dir=str(resolved))
            result.add_error(str(e))
            return result

        result.add_message(f"Cleaned {resolved}")
        self.logger.info("build_dir_cleaned", build_dir=str(resolved))
        return result


def create_build_orchestrator(
    file_adapter: FileAdapterProtocol | None = None,
    export_generator: ExportFileGenerator | None = None,
) -> BuildOrchestrator:
    """Create a build orchestrator with default adapters."""
    return BuildOrchestrator(file_adapter, export_generator)
