"""Protocol for file system operations."""

from pathlib import Path
from typing import Protocol, runtime_checkable


@runtime_checkable
class FileAdapterProtocol(Protocol):
    """Protocol for file system operations."""

    def read_text(self, path: Path, encoding: str = "utf-8") -> str:
        """Read text content from a file.

        Raises:
            FileSystemError: If file cannot be read
        """
        ...

    def write_text(self, path: Path, content: str, encoding: str = "utf-8") -> None:
        """Write text content to a file, creating parent directories.

        Raises:
            FileSystemError: If file cannot be written
        """
        ...

    def exists(self, path: Path) -> bool:
        """Check if a path exists."""
        ...

    def is_file(self, path: Path) -> bool:
        """Check if a path is a file."""
        ...

    def is_dir(self, path: Path) -> bool:
        """Check if a path is a directory."""
        ...

    def mkdir(self, path: Path, parents: bool = True, exist_ok: bool = True) -> None:
        """Create a directory."""
        ...

    def find_files(self, path: Path, pattern: str) -> list[Path]:
        """Recursively list files under ``path`` whose name matches ``pattern``."""
        ...

    def remove_file(self, path: Path) -> None:
        """Remove a file. Does not raise error if file not found."""
        ...

    def remove_dir(self, path: Path) -> None:
        """Recursively remove a directory. Does not raise error if not found."""
        ...
