"""Pydantic base classes shared by every lmsbuild model."""

from typing import Any

from pydantic import BaseModel, ConfigDict


class LmsBaseModel(BaseModel):
    """Base model with strict fields and JSON-ready dumps.

    Enum fields are stored as their string values, so plans and manifests can
    be handed to ``json.dumps`` or ``yaml.safe_dump`` as they are.
    """

    model_config = ConfigDict(
        extra="forbid",
        str_strip_whitespace=True,
        use_enum_values=True,
        validate_assignment=True,
    )

    def to_dict(self) -> dict[str, Any]:
        """Convert model to dictionary with consistent serialization parameters.

        Returns:
            Dictionary representation using JSON-compatible serialization
        """
        return self.model_dump(by_alias=True, exclude_unset=True, mode="json")

    def to_dict_full(self) -> dict[str, Any]:
        """Convert model to dictionary including all fields (even unset ones).

        Returns:
            Dictionary representation including all fields
        """
        return self.model_dump(by_alias=True, exclude_unset=False, mode="json")


class LmsFrozenModel(LmsBaseModel):
    """Immutable base for configure-time entities.

    Targets, rules and descriptors are built once during configuration and
    never updated afterwards.
    """

    model_config = ConfigDict(frozen=True)
