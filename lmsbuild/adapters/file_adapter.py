"""File adapter for abstracting file system operations."""

import fnmatch
import shutil
from pathlib import Path

from lmsbuild.core.errors import create_file_error
from lmsbuild.core.structlog_logger import get_struct_logger


logger = get_struct_logger(__name__)


class FileSystemAdapter:
    """Concrete file adapter backed by pathlib and shutil."""

    def read_text(self, path: Path, encoding: str = "utf-8") -> str:
        """Read text content from a file."""
        try:
            content = path.read_text(encoding=encoding)
            logger.debug("file_read", path=str(path), characters=len(content))
            return content
        except (OSError, UnicodeDecodeError) as e:
            logger.error("file_read_failed", path=str(path), error=str(e))
            raise create_file_error(path, "read_text", e, {"encoding": encoding}) from e

    def write_text(self, path: Path, content: str, encoding: str = "utf-8") -> None:
        """Write text content to a file."""
        self.mkdir(path.parent)
        try:
            path.write_text(content, encoding=encoding)
            logger.debug("file_written", path=str(path), characters=len(content))
        except OSError as e:
            logger.error("file_write_failed", path=str(path), error=str(e))
            raise create_file_error(
                path, "write_text", e, {"content_length": len(content)}
            ) from e

    def exists(self, path: Path) -> bool:
        """Check if a path exists."""
        return path.exists()

    def is_file(self, path: Path) -> bool:
        """Check if a path is a file."""
        return path.is_file()

    def is_dir(self, path: Path) -> bool:
        """Check if a path is a directory."""
        return path.is_dir()

    def mkdir(self, path: Path, parents: bool = True, exist_ok: bool = True) -> None:
        """Create a directory."""
        try:
            path.mkdir(parents=parents, exist_ok=exist_ok)
        except OSError as e:
            logger.error("mkdir_failed", path=str(path), error=str(e))
            raise create_file_error(
                path, "mkdir", e, {"parents": parents, "exist_ok": exist_ok}
            ) from e

    def find_files(self, path: Path, pattern: str) -> list[Path]:
        """Recursively list files whose name matches a glob pattern.

        Results are sorted so install manifests are stable across runs.
        """
        if not path.is_dir():
            raise create_file_error(
                path, "find_files", NotADirectoryError(str(path)), {"pattern": pattern}
            )
        matches = sorted(
            candidate
            for candidate in path.rglob("*")
            if candidate.is_file() and fnmatch.fnmatchcase(candidate.name, pattern)
        )
        logger.debug("files_found", path=str(path), pattern=pattern, count=len(matches))
        return matches

    def remove_file(self, path: Path) -> None:
        """Remove a file. Does not raise error if file not found."""
        try:
            path.unlink(missing_ok=True)
        except OSError as e:
            logger.error("file_remove_failed", path=str(path), error=str(e))
            raise create_file_error(path, "remove_file", e) from e

    def remove_dir(self, path: Path) -> None:
        """Recursively remove a directory. Does not raise error if not found."""
        if not path.exists():
            return
        try:
            shutil.rmtree(path)
            logger.debug("directory_removed", path=str(path))
        except OSError as e:
            logger.error("directory_remove_failed", path=str(path), error=str(e))
            raise create_file_error(path, "remove_dir", e) from e


def create_file_adapter() -> FileSystemAdapter:
    """Create a file adapter using the local filesystem."""
    return FileSystemAdapter()
