"""Install rule and export descriptor planning."""

from lmsbuild.install.planner import (
    artifact_file_name,
    build_export_descriptor,
    plan_install,
    resolve_directory_rule,
    resolve_install_entries,
    validate_install_plan,
)


__all__ = [
    "artifact_file_name",
    "build_export_descriptor",
    "plan_install",
    "resolve_directory_rule",
    "resolve_install_entries",
    "validate_install_plan",
]
