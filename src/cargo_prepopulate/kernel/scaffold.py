"""Scaffold planning: project shape to an ordered list of filesystem steps.

The plan is pure data. Paths are POSIX-style and relative to the target
base directory ("." is the base itself). Members are planned one after
another in member order; the workspace manifest is always the last step.
"""

import posixpath
from typing import List, Literal, Optional, Union

import toml
from pydantic import BaseModel, ConfigDict, Field

from cargo_prepopulate.codes import NoticeCode
from cargo_prepopulate.config import MANIFEST_NAME, ScaffoldConfig
from cargo_prepopulate.contracts import Notice
from cargo_prepopulate.errors import InvalidProject
from cargo_prepopulate.kernel.lockfile import Package, SingleProject, Workspace
from cargo_prepopulate.kernel.manifest import (
    ManifestData,
    WorkspaceManifestData,
    synthesize_manifest,
    synthesize_workspace_manifest,
)


class PlannedStep(BaseModel):
    """Create a directory, or write a file with the given content."""
    kind: Literal["directory", "file"]
    path: str
    content: Optional[str] = None  # files only
    member: Optional[str] = None

    model_config = ConfigDict(frozen=True)


class ScaffoldPlan(BaseModel):
    """Everything needed to scaffold one lock file, in execution order."""
    shape: Literal["project", "workspace"]
    members: List[str]
    steps: List[PlannedStep] = Field(default_factory=list)
    manifests: List[ManifestData] = Field(default_factory=list)
    workspace_manifest: Optional[WorkspaceManifestData] = None
    notices: List[Notice] = Field(default_factory=list)

    @property
    def directories(self) -> List[str]:
        return [step.path for step in self.steps if step.kind == "directory"]

    @property
    def files(self) -> List[str]:
        return [step.path for step in self.steps if step.kind == "file"]


def relpath(*parts: str) -> str:
    """Join path parts, treating empty and "." as the base directory."""
    kept = [part for part in parts if part and part != "."]
    return posixpath.join(*kept) if kept else "."


def render_manifest(manifest: Union[ManifestData, WorkspaceManifestData]) -> str:
    return toml.dumps(manifest.to_toml_dict())


def _plan_member(plan: ScaffoldPlan, member_dir: str, package: Package, config: ScaffoldConfig) -> None:
    manifest, notices = synthesize_manifest(
        package,
        registry_source=config.registry_source,
        version=config.manifest_version,
        authors=config.authors,
    )
    src_dir = relpath(member_dir, "src")
    plan.steps.extend([
        PlannedStep(kind="directory", path=member_dir, member=package.name),
        PlannedStep(kind="directory", path=src_dir, member=package.name),
        PlannedStep(kind="file", path=relpath(src_dir, config.stub_file), content="", member=package.name),
        PlannedStep(
            kind="file",
            path=relpath(member_dir, MANIFEST_NAME),
            content=render_manifest(manifest),
            member=package.name,
        ),
    ])
    plan.manifests.append(manifest)
    plan.notices.extend(notices)


def plan_scaffold(
    shape: Union[SingleProject, Workspace],
    config: Optional[ScaffoldConfig] = None,
) -> ScaffoldPlan:
    """Build the scaffold plan for a project shape.

    Raises InvalidProject for a memberless workspace when the config does
    not allow one.
    """
    config = config or ScaffoldConfig()
    plan = ScaffoldPlan(shape=shape.kind, members=shape.member_names())

    if isinstance(shape, SingleProject):
        _plan_member(plan, ".", shape.package, config)
        return plan

    if not shape.members:
        if not config.allow_empty_workspace:
            raise InvalidProject(
                "Lock file contains no first-party packages",
                context={"hint": "every [[package]] entry has a source"},
            )
        plan.notices.append(Notice(
            code=NoticeCode.EMPTY_WORKSPACE,
            message="No first-party packages found, writing a workspace without members",
        ))

    plan.steps.append(PlannedStep(kind="directory", path="."))
    for member in shape.members:
        _plan_member(plan, member.name, member, config)

    workspace_manifest = synthesize_workspace_manifest(shape.members)
    plan.workspace_manifest = workspace_manifest
    plan.steps.append(PlannedStep(kind="file", path=MANIFEST_NAME, content=render_manifest(workspace_manifest)))
    return plan
