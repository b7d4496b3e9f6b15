"""Locating installed packages the way ``find_package`` does in config mode."""

import os
import re
from collections.abc import Iterable, Sequence
from pathlib import Path

from lmsbuild.core.errors import VersionError
from lmsbuild.core.structlog_logger import StructlogMixin
from lmsbuild.models.results import FindPackageResult
from lmsbuild.models.version import VersionCompatibility, is_compatible


PREFIX_PATH_ENV = "CMAKE_PREFIX_PATH"
DEFAULT_SYSTEM_PREFIXES = ("/usr/local", "/usr")

_VERSION_LINE_RE = re.compile(r'^\s*set\(\s*PACKAGE_VERSION\s+"([^"]+)"\s*\)', re.MULTILINE)
_COMPATIBILITY_RE = re.compile(r"^#\s*COMPATIBILITY\s+(\w+)", re.MULTILINE)


def config_file_names(name: str) -> tuple[str, str]:
    return (f"{name}Config.cmake", f"{name.lower()}-config.cmake")


def version_file_for(config_file: Path) -> Path:
    """Version file that sits next to a locator file."""
    if config_file.name.endswith("-config.cmake"):
        stem = config_file.name[: -len("-config.cmake")]
        return config_file.with_name(f"{stem}-config-version.cmake")
    stem = config_file.name[: -len("Config.cmake")]
    return config_file.with_name(f"{stem}ConfigVersion.cmake")


def read_version_file(path: Path) -> tuple[str | None, str]:
    """Return (version, compatibility) declared by a generated version file."""
    text = path.read_text(encoding="utf-8")
    version_match = _VERSION_LINE_RE.search(text)
    compat_match = _COMPATIBILITY_RE.search(text)
    version = version_match.group(1) if version_match else None
    compatibility = (
        compat_match.group(1) if compat_match else VersionCompatibility.ANY_NEWER.value
    )
    return version, compatibility


class PackageLocator(StructlogMixin):
    """Search install prefixes for a package's locator file.

    Prefixes are tried in order: explicit prefix paths, then the
    ``CMAKE_PREFIX_PATH`` environment variable, then the system prefixes.
    """

    def __init__(
        self,
        prefix_paths: Sequence[str | Path] = (),
        use_environment: bool = True,
        system_prefixes: Sequence[str | Path] = DEFAULT_SYSTEM_PREFIXES,
    ) -> None:
        super().__init__()
        self.prefix_paths = [Path(p).expanduser() for p in prefix_paths]
        self.use_environment = use_environment
        self.system_prefixes = [Path(p) for p in system_prefixes]

    def prefixes(self) -> list[Path]:
        prefixes = list(self.prefix_paths)
        if self.use_environment:
            env_value = os.environ.get(PREFIX_PATH_ENV, "")
            prefixes.extend(Path(p) for p in env_value.split(os.pathsep) if p.strip())
        prefixes.extend(self.system_prefixes)

        unique: list[Path] = []
        for prefix in prefixes:
            if prefix not in unique:
                unique.append(prefix)
        return unique

    @staticmethod
    def _matching_dirs(parent: Path, name: str) -> list[Path]:
        """Subdirectories of ``parent`` whose name starts with ``name``, case-insensitive."""
        if not parent.is_dir():
            return []
        lowered = name.lower()
        return sorted(
            child
            for child in parent.iterdir()
            if child.is_dir() and child.name.lower().startswith(lowered)
        )

    def candidate_dirs(self, prefix: Path, name: str) -> Iterable[Path]:
        """Directories searched under one prefix, in search order."""
        yield prefix
        for lib_dir in ("lib", "lib64", "share"):
            yield from self._matching_dirs(prefix / lib_dir / "cmake", name)
        for package_root in self._matching_dirs(prefix, name):
            for lib_dir in ("lib", "share"):
                yield from self._matching_dirs(package_root / lib_dir / "cmake", name)

    def find_package(self, name: str, version: str | None = None) -> FindPackageResult:
        """Locate ``name`` and check the requested version, if any.

        Returns:
            FindPackageResult; ``success`` is False when no compatible
            locator file exists on the search path.
        """
        result = FindPackageResult(success=False, package_name=name)
        for prefix in self.prefixes():
            for directory in self.candidate_dirs(prefix, name):
                result.searched_paths.append(directory)
                for file_name in config_file_names(name):
                    config_file = directory / file_name
                    if not config_file.is_file():
                        continue
                    if self._accept(config_file, version, result):
                        result.success = True
                        result.add_message(f"Found {name}: {config_file}")
                        self.logger.info(
                            "package_found",
                            package=name,
                            config_file=str(config_file),
                            version=result.version,
                        )
                        return result

        self.logger.info("package_not_found", package=name, requested_version=version)
        result.add_error(
            f"Could not find a package configuration file provided by '{name}'"
            + (f" with version >= {version}" if version else "")
            + f". Set {PREFIX_PATH_ENV} to the installation prefix of '{name}'."
        )
        return result

    def _accept(
        self, config_file: Path, requested: str | None, result: FindPackageResult
    ) -> bool:
        version_file = version_file_for(config_file)
        installed: str | None = None
        compatibility = VersionCompatibility.ANY_NEWER.value
        if version_file.is_file():
            installed, compatibility = read_version_file(version_file)

        if requested is not None:
            if installed is None:
                self.logger.debug("package_version_unknown", config_file=str(config_file))
                return False
            try:
                compatible = is_compatible(installed, requested, compatibility)
            except VersionError as e:
                self.log_error_with_context(
                    "package_version_unreadable", e, version_file=str(version_file)
                )
                return False
            if not compatible:
                self.logger.debug(
                    "package_version_rejected",
                    config_file=str(config_file),
                    installed=installed,
                    requested=requested,
                    compatibility=compatibility,
                )
                return False

        result.config_file = config_file
        result.version_file = version_file if version_file.is_file() else None
        result.version = installed
        return True


def create_package_locator(
    prefix_paths: Sequence[str | Path] = (),
    use_environment: bool = True,
    system_prefixes: Sequence[str | Path] = DEFAULT_SYSTEM_PREFIXES,
) -> PackageLocator:
    """Create a package locator."""
    return PackageLocator(prefix_paths, use_environment, system_prefixes)
