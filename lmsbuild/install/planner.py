"""Install rules and export descriptor planning."""

import sys
from pathlib import Path

from pydantic import ValidationError

from lmsbuild.adapters.file_adapter import create_file_adapter
from lmsbuild.config.models import ProjectConfig
from lmsbuild.core.errors import InstallPlanError
from lmsbuild.core.structlog_logger import get_struct_logger
from lmsbuild.models.export import ExportDescriptor
from lmsbuild.models.graph import TargetGraph
from lmsbuild.models.install import ArtifactKind, InstallEntry, InstallPlan, InstallRule
from lmsbuild.models.target import TargetKind
from lmsbuild.protocols.file_adapter_protocol import FileAdapterProtocol


logger = get_struct_logger(__name__)

BIN_DESTINATION = "bin"
LIB_DESTINATION = "lib"
INCLUDE_DESTINATION = "include"


def _library_rules(library: str, export_set: str) -> list[InstallRule]:
    return [
        InstallRule(
            kind=ArtifactKind.RUNTIME,
            target=library,
            destination=BIN_DESTINATION,
            export_set=export_set,
        ),
        InstallRule(
            kind=ArtifactKind.LIBRARY,
            target=library,
            destination=LIB_DESTINATION,
            export_set=export_set,
        ),
        InstallRule(
            kind=ArtifactKind.ARCHIVE,
            target=library,
            destination=LIB_DESTINATION,
            export_set=export_set,
        ),
    ]


def build_export_descriptor(config: ProjectConfig) -> ExportDescriptor:
    """Describe the export set consumers resolve with ``find_package``."""
    export = config.export
    return ExportDescriptor(
        name=export.name,
        package_name=export.package_name,
        targets=(config.layout.library,),
        destination=export.destination,
        locator_file=export.get_locator_file(),
        version_file=export.get_version_file(),
        version=config.project.version,
        compatibility=export.compatibility,
    )


def validate_install_plan(plan: InstallPlan, graph: TargetGraph) -> None:
    """Every target an install rule or export descriptor names must be in the graph.

    Raises:
        InstallPlanError: On the first dangling reference
    """
    for name in plan.referenced_targets():
        if not graph.has(name):
            raise InstallPlanError(
                "Install plan references a target missing from the graph",
                {"target": name, "graph": ", ".join(graph.names())},
            )
        if graph.get(name).kind in (TargetKind.INTERFACE, TargetKind.IMPORTED):
            raise InstallPlanError(
                "Only buildable targets can be installed", {"target": name}
            )


def plan_install(config: ProjectConfig, graph: TargetGraph, use_library: bool) -> InstallPlan:
    """Produce install rules and the export descriptor.

    Nothing is installed when the library is disabled: the plan is empty and
    carries no export descriptor.

    Raises:
        InstallPlanError: If a rule references a target missing from the graph
    """
    if not use_library:
        logger.debug("install_plan_skipped", reason="library_disabled")
        return InstallPlan()

    layout = config.layout
    try:
        descriptor = build_export_descriptor(config)
        rules = _library_rules(layout.library, descriptor.name)
        rules.append(
            InstallRule(
                kind=ArtifactKind.RUNTIME,
                target=layout.executable,
                destination=BIN_DESTINATION,
            )
        )
        rules.append(
            InstallRule(
                kind=ArtifactKind.HEADERS,
                directory=layout.header_dir,
                pattern=layout.header_pattern,
                destination=INCLUDE_DESTINATION,
            )
        )
        rules.append(
            InstallRule(
                kind=ArtifactKind.FILES,
                files=(descriptor.locator_file, descriptor.version_file),
                destination=descriptor.destination,
                from_build_dir=True,
            )
        )
        plan = InstallPlan(rules=tuple(rules), export=descriptor)
    except ValidationError as e:
        raise InstallPlanError(f"Invalid install rule: {e}") from e

    validate_install_plan(plan, graph)
    logger.debug(
        "install_plan_built",
        rules=len(plan.rules),
        export=descriptor.name,
        destination=descriptor.destination,
    )
    return plan


def artifact_file_name(
    target: str, kind: ArtifactKind | str, platform: str = sys.platform
) -> str:
    """File name of a built artifact following platform conventions."""
    windows = platform.startswith("win")
    if kind == ArtifactKind.ARCHIVE:
        return f"{target}.lib" if windows else f"lib{target}.a"
    if kind == ArtifactKind.LIBRARY:
        if windows:
            return f"{target}.dll"
        return f"lib{target}.dylib" if platform == "darwin" else f"lib{target}.so"
    return f"{target}.exe" if windows else target


def resolve_directory_rule(
    rule: InstallRule,
    source_dir: Path,
    prefix: Path,
    file_adapter: FileAdapterProtocol | None = None,
) -> list[InstallEntry]:
    """Expand a directory rule into the files it installs.

    Only files matching the rule's pattern are installed. The search is
    recursive and subdirectories are kept relative to the destination.
    A missing source directory installs nothing.
    """
    if rule.directory is None:
        raise InstallPlanError("Not a directory install rule", {"kind": str(rule.kind)})
    file_adapter = file_adapter or create_file_adapter()

    root = source_dir / rule.directory
    if not file_adapter.is_dir(root):
        logger.warning("install_directory_missing", directory=str(root))
        return []

    entries = [
        InstallEntry(
            source=path,
            destination=prefix / rule.destination / path.relative_to(root),
            kind=ArtifactKind.HEADERS,
        )
        for path in file_adapter.find_files(root, rule.pattern or "*")
    ]
    return entries


def resolve_install_entries(
    rules: tuple[InstallRule, ...],
    source_dir: Path,
    build_dir: Path,
    prefix: Path,
    graph: TargetGraph | None = None,
    platform: str = sys.platform,
    file_adapter: FileAdapterProtocol | None = None,
) -> list[InstallEntry]:
    """Expand every rule into concrete (source, destination) copies.

    Static libraries produce no RUNTIME or LIBRARY artifact, so those rules
    are skipped for them, as the build tool would.
    """
    entries: list[InstallEntry] = []
    for rule in rules:
        if rule.kind == ArtifactKind.HEADERS:
            entries.extend(resolve_directory_rule(rule, source_dir, prefix, file_adapter))
        elif rule.kind == ArtifactKind.FILES:
            base = build_dir if rule.from_build_dir else source_dir
            entries.extend(
                InstallEntry(
                    source=base / name,
                    destination=prefix / rule.destination / Path(name).name,
                    kind=ArtifactKind.FILES,
                )
                for name in rule.files
            )
        else:
            if rule.target is None:
                continue
            if graph is not None and graph.has(rule.target):
                target_kind = graph.get(rule.target).kind
                produces = (
                    rule.kind == ArtifactKind.ARCHIVE
                    if target_kind == TargetKind.STATIC_LIBRARY
                    else rule.kind == ArtifactKind.RUNTIME
                )
                if not produces:
                    continue
            file_name = artifact_file_name(rule.target, rule.kind, platform)
            entries.append(
                InstallEntry(
                    source=build_dir / file_name,
                    destination=prefix / rule.destination / file_name,
                    kind=rule.kind,
                )
            )
    return entries
