"""Render a ConfigurationPlan as a CMakeLists.txt for the external build tool."""

from pathlib import Path
from typing import Any

from lmsbuild.adapters.file_adapter import create_file_adapter
from lmsbuild.adapters.template_adapter import create_template_adapter
from lmsbuild.core.structlog_logger import get_struct_logger
from lmsbuild.generators.templates import CMAKE_LISTS_TEMPLATE
from lmsbuild.install.planner import INCLUDE_DESTINATION
from lmsbuild.models.install import ArtifactKind
from lmsbuild.models.plan import ConfigurationPlan
from lmsbuild.models.target import Target, TargetKind, Visibility
from lmsbuild.protocols.file_adapter_protocol import FileAdapterProtocol
from lmsbuild.protocols.template_adapter_protocol import TemplateAdapterProtocol


logger = get_struct_logger(__name__)

_PROPERTY_COMMANDS = (
    ("include_directories", "target_include_directories"),
    ("compile_features", "target_compile_features"),
    ("compile_definitions", "target_compile_definitions"),
    ("compile_options", "target_compile_options"),
)

_VISIBILITY_ORDER = (Visibility.PUBLIC, Visibility.PRIVATE, Visibility.INTERFACE)

_CLEAN_COMMANDS = (
    "remove_directory ${CMAKE_BINARY_DIR}",
    "remove ${CMAKE_BINARY_DIR}/CMakeCache.txt",
    "remove_directory ${CMAKE_BINARY_DIR}/CMakeFiles",
    "remove ${CMAKE_BINARY_DIR}/Makefile",
    "remove ${CMAKE_BINARY_DIR}/cmake_install.cmake",
)


def _group(items: list[tuple[str, str]]) -> list[tuple[str, list[str]]]:
    """Group (visibility, value) pairs by visibility in a stable order."""
    groups: list[tuple[str, list[str]]] = []
    for visibility in _VISIBILITY_ORDER:
        values = [value for vis, value in items if vis == visibility]
        if values:
            groups.append((visibility.value, values))
    return groups


def _include_value(value: str) -> str:
    if Path(value).is_absolute() or value.startswith("$"):
        return value
    return f"${{CMAKE_SOURCE_DIR}}/{value}"


def _exported_include_values(value: str, install_include: str) -> list[str]:
    # Installed exports must not point into the source tree
    return [
        f'"$<BUILD_INTERFACE:{value}>"',
        f'"$<INSTALL_INTERFACE:{install_include}>"',
    ]


def _target_context(target: Target, install_include: str | None = None) -> dict[str, Any]:
    """Collect the target_* commands for ``target``.

    ``install_include`` is set for targets in an export set; their usage
    include directories then differ between the build and install trees.
    """
    properties = []
    for field, command in _PROPERTY_COMMANDS:
        pairs = []
        for requirement in getattr(target, field):
            visibility = Visibility(requirement.visibility)
            value = requirement.value
            if field != "include_directories":
                pairs.append((visibility, value))
                continue
            value = _include_value(value)
            if install_include is not None and visibility != Visibility.PRIVATE:
                pairs.extend(
                    (visibility, v) for v in _exported_include_values(value, install_include)
                )
            else:
                pairs.append((visibility, value))
        groups = _group(pairs)
        if groups:
            properties.append((command, groups))

    links = _group([(Visibility(link.visibility), link.target) for link in target.links])
    if links:
        properties.append(("target_link_libraries", links))

    return {
        "name": target.name,
        "kind": TargetKind(target.kind).value,
        "sources": list(target.sources),
        "properties": properties,
        "is_test": False,
    }


def build_template_context(plan: ConfigurationPlan) -> dict[str, Any]:
    """Flatten a plan into plain values for the CMakeLists template."""
    imported = {t.name for t in plan.graph.of_kind(TargetKind.IMPORTED)}
    exported = {rule.target for rule in plan.install_rules if rule.export_set}
    install_include = next(
        (
            rule.destination
            for rule in plan.install_rules
            if ArtifactKind(rule.kind) == ArtifactKind.HEADERS
        ),
        INCLUDE_DESTINATION,
    )
    targets = []
    for target in plan.graph.targets:
        if target.kind == TargetKind.IMPORTED:
            continue
        context = _target_context(
            target, install_include if target.name in exported else None
        )
        context["is_test"] = target.kind == TargetKind.EXECUTABLE and any(
            link.target in imported for link in target.links
        )
        targets.append(context)

    install_targets: list[dict[str, Any]] = []
    install_directories = []
    install_files = []
    for rule in plan.install_rules:
        kind = ArtifactKind(rule.kind)
        if kind == ArtifactKind.HEADERS:
            install_directories.append(
                {
                    "directory": rule.directory,
                    "destination": rule.destination,
                    "pattern": rule.pattern or "*",
                }
            )
        elif kind == ArtifactKind.FILES:
            install_files.append(
                {
                    "files": list(rule.files),
                    "destination": rule.destination,
                    "base": (
                        "${CMAKE_CURRENT_BINARY_DIR}"
                        if rule.from_build_dir
                        else "${CMAKE_CURRENT_SOURCE_DIR}"
                    ),
                }
            )
        else:
            entry = next(
                (
                    e
                    for e in install_targets
                    if e["target"] == rule.target and e["export_set"] == rule.export_set
                ),
                None,
            )
            if entry is None:
                entry = {
                    "target": rule.target,
                    "export_set": rule.export_set,
                    "destinations": [],
                }
                install_targets.append(entry)
            entry["destinations"].append((kind.value, rule.destination))

    return {
        "project": {
            "name": plan.project_name,
            "version": plan.project_version,
            "cxx_standard": plan.cxx_standard,
            "cxx_standard_required": "True" if plan.cxx_standard_required else "False",
            "compile_options": list(plan.compile_options),
            "include_directories": list(plan.include_directories),
        },
        "options": [
            (name, "ON" if value else "OFF") for name, value in plan.options.items()
        ],
        "diagnostics": list(plan.diagnostics),
        "test_package": plan.test_package,
        "targets": targets,
        "install_targets": install_targets,
        "install_directories": install_directories,
        "install_files": install_files,
        "generated_files": [
            {"name": generated.name, "content": generated.content}
            for generated in plan.generated_files
        ],
        "export": (
            {
                "name": plan.export.name,
                "targets_file": plan.export.targets_file,
                "destination": plan.export.destination,
            }
            if plan.export
            else None
        ),
        "manifest": plan.manifest.model_dump(),
        "clean_commands": list(_CLEAN_COMMANDS),
    }


def render_cmake_lists(
    plan: ConfigurationPlan, template_adapter: TemplateAdapterProtocol | None = None
) -> str:
    """Render ``plan`` as CMakeLists.txt content."""
    template_adapter = template_adapter or create_template_adapter()
    content = template_adapter.render_string(
        CMAKE_LISTS_TEMPLATE, build_template_context(plan)
    )
    logger.debug("cmake_lists_rendered", project=plan.project_name, lines=content.count("\n"))
    return content


def write_cmake_lists(
    plan: ConfigurationPlan,
    output_path: Path,
    file_adapter: FileAdapterProtocol | None = None,
    template_adapter: TemplateAdapterProtocol | None = None,
) -> Path:
    """Render ``plan`` and write it to ``output_path``.

    A directory is accepted and receives ``CMakeLists.txt``.
    """
    file_adapter = file_adapter or create_file_adapter()
    if file_adapter.is_dir(output_path):
        output_path = output_path / "CMakeLists.txt"
    file_adapter.write_text(output_path, render_cmake_lists(plan, template_adapter))
    logger.info("cmake_lists_written", path=str(output_path))
    return output_path
