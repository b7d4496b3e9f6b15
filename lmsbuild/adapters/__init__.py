"""Adapters wrapping the filesystem and the template engine."""

from lmsbuild.adapters.file_adapter import FileSystemAdapter, create_file_adapter
from lmsbuild.adapters.template_adapter import TemplateAdapter, create_template_adapter


__all__ = [
    "FileSystemAdapter",
    "TemplateAdapter",
    "create_file_adapter",
    "create_template_adapter",
]
