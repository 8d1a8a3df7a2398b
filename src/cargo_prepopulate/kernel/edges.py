"""Dependency-edge classification.

A lock file records each dependency of a package as one raw string:

    "name version (source)"   external dependency, source in parentheses
    "name version"            local/workspace package, no source segment

Package names and versions never contain spaces, so splitting on a single
space is safe. Any other token count means an incompatible lock format.
"""

from enum import Enum
from typing import Iterable, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict

from cargo_prepopulate.codes import NoticeCode
from cargo_prepopulate.config import CRATES_IO_REGISTRY
from cargo_prepopulate.contracts import Notice
from cargo_prepopulate.errors import FormatError


class EdgeKind(str, Enum):
    """Classification of one dependency edge."""
    REGISTRY = "registry"  # re-declarable as name = "version"
    EXTERNAL = "external"  # git/path/alternate registry, dropped
    LOCAL = "local"  # workspace member, dropped


class DependencyEdge(BaseModel):
    """A classified dependency edge."""
    raw: str
    kind: EdgeKind
    name: str
    version: str
    source: Optional[str] = None

    model_config = ConfigDict(frozen=True)

    @property
    def is_registry(self) -> bool:
        return self.kind is EdgeKind.REGISTRY


def classify_edge(raw: str, registry_source: str = CRATES_IO_REGISTRY) -> DependencyEdge:
    """Classify a raw edge string.

    Raises FormatError when the edge has neither two nor three tokens, or
    when a doubled space leaves an empty token.
    """
    parts = raw.split(" ")
    if "" in parts:
        raise FormatError(
            f"Malformed dependency entry '{raw}': empty token",
            context={"tokens": str(len(parts))},
        )
    if len(parts) == 3:
        name, version, source = parts
        kind = EdgeKind.REGISTRY if source == registry_source else EdgeKind.EXTERNAL
        return DependencyEdge(raw=raw, kind=kind, name=name, version=version, source=source)
    if len(parts) == 2:
        name, version = parts
        return DependencyEdge(raw=raw, kind=EdgeKind.LOCAL, name=name, version=version)
    raise FormatError(
        f"Malformed dependency entry '{raw}': expected 'name version' or 'name version (source)'",
        context={"tokens": str(len(parts))},
    )


def edge_notice(edge: DependencyEdge, package_name: str) -> Optional[Notice]:
    """Describe why an edge was dropped, or None for registry edges."""
    if edge.kind is EdgeKind.EXTERNAL:
        return Notice(
            code=NoticeCode.NON_REGISTRY_DEPENDENCY,
            message=f"Ignoring non-crates-io dep '{edge.name} {edge.version}' from {edge.source}",
            element_id=package_name,
        )
    if edge.kind is EdgeKind.LOCAL:
        return Notice(
            code=NoticeCode.LOCAL_DEPENDENCY,
            message=f"Skipping local dependency '{edge.name} {edge.version}'",
            element_id=package_name,
        )
    return None


def registry_dependencies(
    raw_edges: Iterable[str],
    registry_source: str = CRATES_IO_REGISTRY,
) -> List[Tuple[str, str]]:
    """Return (name, version) for every registry edge, in input order."""
    pairs = []
    for raw in raw_edges:
        edge = classify_edge(raw, registry_source)
        if edge.is_registry:
            pairs.append((edge.name, edge.version))
    return pairs
