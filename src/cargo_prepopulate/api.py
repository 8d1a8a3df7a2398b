"""Public API for cargo_prepopulate.

High-level functions that return complete, structured results. The CLI is
a thin wrapper over `prepopulate`.
"""

import os
from pathlib import Path
from typing import Dict, List, Literal, Optional, Union

from pydantic import BaseModel, Field

from cargo_prepopulate.config import ScaffoldConfig
from cargo_prepopulate.contracts import Notice
from cargo_prepopulate.kernel.lockfile import ProjectShape, interpret_lockfile
from cargo_prepopulate.kernel.scaffold import ScaffoldPlan, plan_scaffold
from cargo_prepopulate._internal.io.lockfile import read_lockfile_text, validate_lockfile_path
from cargo_prepopulate._internal.io.scaffold import apply_plan, check_destination


PathLike = Union[str, os.PathLike, Path]


class ScaffoldReport(BaseModel):
    """Stable result model for one prepopulate run."""
    ok: bool
    dry_run: bool
    shape: Literal["project", "workspace"]
    base_dir: str
    members: List[str]
    planned_files: List[str] = Field(default_factory=list)
    created_directories: List[str] = Field(default_factory=list)  # empty on dry runs
    written_files: List[str] = Field(default_factory=list)  # empty on dry runs
    dependencies: Dict[str, Dict[str, str]] = Field(default_factory=dict)  # member -> {name: version}
    notices: List[Notice] = Field(default_factory=list)

    @property
    def warnings(self) -> List[Notice]:
        return [notice for notice in self.notices if notice.is_warning]


def interpret(text: str) -> ProjectShape:
    """Interpret raw lock text into a project shape."""
    return interpret_lockfile(text)


def plan(lock_path: PathLike, config: Optional[ScaffoldConfig] = None) -> ScaffoldPlan:
    """Read a lock file and plan its scaffold without writing anything."""
    text = read_lockfile_text(lock_path)
    return plan_scaffold(interpret_lockfile(text), config)


def prepopulate(
    lock_path: PathLike,
    out_dir: Optional[PathLike] = None,
    config: Optional[ScaffoldConfig] = None,
) -> ScaffoldReport:
    """Scaffold the project recorded in a Cargo.lock file.

    Args:
        lock_path: Path to a file named Cargo.lock
        out_dir: Target base directory (defaults to the lock file's directory)
        config: Scaffold options; ScaffoldConfig() when omitted

    Raises:
        PathError: wrong file name, unreadable input, unwritable output, or
            (strict mode, dry runs included) an occupied destination
        FormatError: lock file encoding, syntax or field violations
        InvalidProject: no first-party packages and empty workspaces disallowed
    """
    config = config or ScaffoldConfig()
    lock_file = validate_lockfile_path(lock_path)
    base_dir = Path(out_dir) if out_dir is not None else lock_file.parent

    scaffold_plan = plan(lock_file, config)
    report = ScaffoldReport(
        ok=True,
        dry_run=config.dry_run,
        shape=scaffold_plan.shape,
        base_dir=str(base_dir),
        members=list(scaffold_plan.members),
        planned_files=scaffold_plan.files,
        dependencies={
            manifest.package.name: dict(manifest.dependencies)
            for manifest in scaffold_plan.manifests
        },
        notices=list(scaffold_plan.notices),
    )
    if config.dry_run:
        if config.on_existing == "fail":
            check_destination(scaffold_plan, base_dir)
        return report

    outcome = apply_plan(scaffold_plan, base_dir, config)
    report.created_directories = outcome.created_directories
    report.written_files = outcome.written_files
    report.notices.extend(outcome.notices)
    return report
