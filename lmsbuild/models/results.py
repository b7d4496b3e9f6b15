"""Result models for operations that touch the filesystem."""

from datetime import datetime
from pathlib import Path

from pydantic import Field, model_validator

from lmsbuild.core.structlog_logger import get_struct_logger
from lmsbuild.models.base import LmsBaseModel


logger = get_struct_logger(__name__)


class BaseResult(LmsBaseModel):
    """Base class for all operation results."""

    success: bool
    timestamp: datetime = Field(default_factory=datetime.now)
    messages: list[str] = Field(default_factory=list)
    errors: list[str] = Field(default_factory=list)

    @model_validator(mode="after")
    def validate_success_consistency(self) -> "BaseResult":
        """Ensure success flag is consistent with errors."""
        if self.errors and self.success:
            logger.warning("result_success_mismatch", error_count=len(self.errors))
            # Bypass validate_assignment to avoid re-entering this validator
            object.__setattr__(self, "success", False)
        return self

    def add_message(self, message: str) -> None:
        """Add an informational message."""
        self.messages.append(message)
        logger.debug("result_message_added", message=message)

    def add_error(self, error: str) -> None:
        """Add an error message and mark the result as failed."""
        self.errors.append(error)
        logger.error("result_error_added", error=error)
        self.success = False

    def is_success(self) -> bool:
        """Check if the operation was successful."""
        return self.success and not self.errors


class MaterializeResult(BaseResult):
    """Result of writing generated files into the build directory."""

    build_dir: Path | None = None
    written_files: list[Path] = Field(default_factory=list)


class FindPackageResult(BaseResult):
    """Result of locating an installed package."""

    package_name: str
    config_file: Path | None = None
    version_file: Path | None = None
    version: str | None = None
    searched_paths: list[Path] = Field(default_factory=list)

    @property
    def found(self) -> bool:
        return self.success and self.config_file is not None


class CleanResult(BaseResult):
    """Result of removing build output."""

    removed_paths: list[Path] = Field(default_factory=list)
