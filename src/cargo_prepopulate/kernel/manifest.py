"""Manifest synthesis: first-party packages to Cargo.toml data."""

from typing import Any, Dict, Iterable, List, Sequence, Tuple

from pydantic import BaseModel, ConfigDict, Field

from cargo_prepopulate.config import CRATES_IO_REGISTRY, PLACEHOLDER_AUTHOR, PLACEHOLDER_VERSION
from cargo_prepopulate.contracts import Notice
from cargo_prepopulate.kernel.edges import classify_edge, edge_notice
from cargo_prepopulate.kernel.lockfile import Package


class ManifestPackage(BaseModel):
    name: str
    version: str = PLACEHOLDER_VERSION
    authors: List[str] = Field(default_factory=lambda: [PLACEHOLDER_AUTHOR])


class ManifestData(BaseModel):
    """Minimal manifest of one member: identity and registry dependencies."""
    package: ManifestPackage
    dependencies: Dict[str, str] = Field(default_factory=dict)

    model_config = ConfigDict(extra="forbid")

    def to_toml_dict(self) -> Dict[str, Any]:
        return {
            "package": self.package.model_dump(),
            "dependencies": dict(self.dependencies),
        }


class WorkspaceManifestData(BaseModel):
    """Top-level workspace manifest listing member directories."""
    members: List[str] = Field(default_factory=list)

    model_config = ConfigDict(extra="forbid")

    def to_toml_dict(self) -> Dict[str, Any]:
        return {"workspace": {"members": list(self.members)}}


def synthesize_manifest(
    package: Package,
    registry_source: str = CRATES_IO_REGISTRY,
    version: str = PLACEHOLDER_VERSION,
    authors: Sequence[str] = (PLACEHOLDER_AUTHOR,),
) -> Tuple[ManifestData, List[Notice]]:
    """Build the manifest for a first-party package.

    Only registry edges become dependencies; a repeated name keeps the
    last version seen. Dropped edges are reported as notices.
    """
    dependencies: Dict[str, str] = {}
    notices: List[Notice] = []
    for raw in package.dependencies:
        edge = classify_edge(raw, registry_source)
        if edge.is_registry:
            dependencies[edge.name] = edge.version
            continue
        notice = edge_notice(edge, package.name)
        if notice is not None:
            notices.append(notice)

    manifest = ManifestData(
        package=ManifestPackage(name=package.name, version=version, authors=list(authors)),
        dependencies=dependencies,
    )
    return manifest, notices


def synthesize_workspace_manifest(members: Iterable[Package]) -> WorkspaceManifestData:
    """Workspace manifest in member order."""
    return WorkspaceManifestData(members=[member.name for member in members])
