"""Generators for files produced at configure time."""

from lmsbuild.generators.cmake_writer import render_cmake_lists, write_cmake_lists
from lmsbuild.generators.export_generator import (
    ExportFileGenerator,
    create_export_file_generator,
    prefix_relpath,
)


__all__ = [
    "ExportFileGenerator",
    "create_export_file_generator",
    "prefix_relpath",
    "render_cmake_lists",
    "write_cmake_lists",
]
