"""Project configuration models."""

from typing import Any

from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from lmsbuild.core.errors import VersionError
from lmsbuild.models.version import Version, VersionCompatibility, parse_compatibility


def _check_version(v: str) -> str:
    try:
        return Version.parse(v).text
    except VersionError as e:
        raise ValueError(e.message) from e


class ProjectInfo(BaseModel):
    """Project metadata and project-wide compile settings."""

    name: str = "CMakeTut"
    version: str = "2.0"
    cxx_standard: int = 17
    cxx_standard_required: bool = True
    compile_options: list[str] = Field(
        default_factory=lambda: ["-Wall", "-Wextra", "-Werror"],
        description="Options added to every buildable target",
    )
    include_directories: list[str] = Field(
        default_factory=lambda: ["include"],
        description="Include directories added to every buildable target",
    )

    @field_validator("version")
    @classmethod
    def validate_version(cls, v: str) -> str:
        return _check_version(v)

    @field_validator("cxx_standard")
    @classmethod
    def validate_cxx_standard(cls, v: int) -> int:
        valid = [98, 11, 14, 17, 20, 23, 26]
        if v not in valid:
            raise ValueError(f"C++ standard must be one of {valid}")
        return v


class LayoutConfig(BaseModel):
    """Target names and the source files that make them up."""

    settings_target: str = "ProjectSettings"
    executable: str = "CMakeTut"
    executable_sources: list[str] = Field(default_factory=lambda: ["src/main.cpp"])
    library: str = "Library"
    library_sources: list[str] = Field(
        default_factory=lambda: [
            "lib/Library/Library.cpp",
            "lib/Library/User.cpp",
            "lib/Library/Book.cpp",
        ]
    )
    library_include_dir: str = "include"
    library_definition: str = "USE_LIBRARY"
    test_executable: str = "TestLibrary"
    test_sources: list[str] = Field(default_factory=lambda: ["tests/TestLibrary.cpp"])
    header_dir: str = "include"
    header_pattern: str = "*.h"


class UnitTestConfig(BaseModel):
    """Testing framework package and the imported targets it provides."""

    package: str = "GTest"
    targets: list[str] = Field(default_factory=lambda: ["GTest::GTest", "GTest::Main"])


class ExportConfig(BaseModel):
    """Export descriptor settings."""

    name: str = "LibraryTargets"
    package_name: str = "Library"
    destination: str = Field(
        default="lib/cmake/LMS",
        description="Install destination of the locator and version files",
    )
    compatibility: VersionCompatibility = VersionCompatibility.ANY_NEWER
    locator_file: str | None = None
    version_file: str | None = None

    @field_validator("compatibility", mode="before")
    @classmethod
    def validate_compatibility(cls, v: Any) -> VersionCompatibility:
        try:
            return parse_compatibility(v)
        except VersionError as e:
            raise ValueError(e.message) from e

    @field_validator("destination")
    @classmethod
    def validate_destination(cls, v: str) -> str:
        v = v.strip().strip("/")
        if not v:
            raise ValueError("Export destination cannot be empty")
        return v

    def get_locator_file(self) -> str:
        return self.locator_file or f"{self.package_name}Config.cmake"

    def get_version_file(self) -> str:
        return self.version_file or f"{self.package_name}ConfigVersion.cmake"


class PackageConfig(BaseModel):
    """Package manifest settings.

    ``version`` is tracked independently of the project version.
    """

    generator: str = "DEB"
    name: str = "CMakeTut"
    version: str = "4.0"
    contact: str = "yourname@example.com"
    description: str | None = None
    vendor: str | None = None

    @field_validator("version")
    @classmethod
    def validate_version(cls, v: str) -> str:
        return _check_version(v)


class ProjectConfig(BaseSettings):
    """Complete configure-time input with environment variable support.

    Precedence order (highest to lowest):
    1. Environment variables (LMSBUILD_*, nested with ``__``)
    2. Constructor arguments (file data and explicit overrides)
    3. Default values
    """

    model_config = SettingsConfigDict(
        env_prefix="LMSBUILD_",
        env_nested_delimiter="__",
        case_sensitive=False,
        extra="ignore",
    )

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: Any,
        env_settings: Any,
        dotenv_settings: Any,
        file_secret_settings: Any,
    ) -> tuple[Any, ...]:
        """Environment variables override file configuration."""
        return (env_settings, init_settings)

    project: ProjectInfo = Field(default_factory=ProjectInfo)
    options: dict[str, str | bool] = Field(
        default_factory=dict,
        description="Raw option values, e.g. {'USE_LIBRARY': 'OFF'}",
    )
    layout: LayoutConfig = Field(default_factory=LayoutConfig)
    testing: UnitTestConfig = Field(default_factory=UnitTestConfig)
    export: ExportConfig = Field(default_factory=ExportConfig)
    package: PackageConfig = Field(default_factory=PackageConfig)
    prefix_paths: list[str] = Field(default_factory=list)
    log_level: str = "WARNING"

    @field_validator("options", mode="before")
    @classmethod
    def normalize_option_names(cls, v: Any) -> Any:
        """Upper-case option names and keep numbers as their CMake spelling."""
        if isinstance(v, dict):
            return {
                str(key).upper(): (
                    str(value)
                    if isinstance(value, int | float) and not isinstance(value, bool)
                    else value
                )
                for key, value in v.items()
            }
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level is a recognized value."""
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        upper_v = v.strip().upper()
        if upper_v not in valid_levels:
            raise ValueError(f"Log level must be one of {valid_levels}")
        return upper_v

    def option_value(self, name: str) -> str | bool | None:
        """Raw value of an option, or None when unset."""
        return self.options.get(name.upper())
