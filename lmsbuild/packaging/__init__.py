"""Package manifest emission and installed-package lookup."""

from lmsbuild.packaging.locator import PackageLocator, create_package_locator
from lmsbuild.packaging.manifest import emit_package_manifest


__all__ = ["PackageLocator", "create_package_locator", "emit_package_manifest"]
