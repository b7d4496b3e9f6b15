"""Target graph model."""

from pydantic import model_validator

from lmsbuild.models.base import LmsFrozenModel
from lmsbuild.models.target import LinkEdge, Target, TargetKind


class TargetGraph(LmsFrozenModel):
    """Set of targets plus the link edges between them.

    Construction validates that target names are unique and that every link
    refers to a target present in the graph.
    """

    targets: tuple[Target, ...] = ()

    @model_validator(mode="after")
    def validate_graph(self) -> "TargetGraph":
        seen: set[str] = set()
        for target in self.targets:
            if target.name in seen:
                raise ValueError(f"Duplicate target name: '{target.name}'")
            seen.add(target.name)

        for target in self.targets:
            for link in target.links:
                if link.target not in seen:
                    raise ValueError(
                        f"Target '{target.name}' links to unknown target "
                        f"'{link.target}'"
                    )
                if link.target == target.name:
                    raise ValueError(f"Target '{target.name}' links to itself")
        return self

    @property
    def edges(self) -> tuple[LinkEdge, ...]:
        return tuple(
            LinkEdge(
                consumer=target.name,
                dependency=link.target,
                visibility=link.visibility,
            )
            for target in self.targets
            for link in target.links
        )

    def names(self) -> tuple[str, ...]:
        return tuple(target.name for target in self.targets)

    def has(self, name: str) -> bool:
        return any(target.name == name for target in self.targets)

    def get(self, name: str) -> Target:
        for target in self.targets:
            if target.name == name:
                return target
        raise KeyError(name)

    def links_of(self, name: str) -> tuple[str, ...]:
        """Names of the direct dependencies of ``name``."""
        return tuple(link.target for link in self.get(name).links)

    def of_kind(self, kind: TargetKind) -> tuple[Target, ...]:
        return tuple(target for target in self.targets if target.kind == kind)
