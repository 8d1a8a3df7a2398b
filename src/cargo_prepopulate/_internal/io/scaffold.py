"""Scaffold writer: persists a ScaffoldPlan under a base directory (internal)."""

from pathlib import Path
from typing import List, Optional, Tuple

from pydantic import BaseModel, Field

from cargo_prepopulate.codes import NoticeCode
from cargo_prepopulate.config import ScaffoldConfig
from cargo_prepopulate.contracts import Notice
from cargo_prepopulate.errors import PathError
from cargo_prepopulate.kernel.scaffold import PlannedStep, ScaffoldPlan


class WriteOutcome(BaseModel):
    created_directories: List[str] = Field(default_factory=list)
    written_files: List[str] = Field(default_factory=list)
    notices: List[Notice] = Field(default_factory=list)


def check_destination(plan: ScaffoldPlan, base_dir: Path) -> None:
    """Refuse to scaffold over existing content.

    The base directory may exist (it usually holds the lock file). Other
    planned directories may exist only while empty; planned files must be
    absent.
    """
    for step in plan.steps:
        if step.path == ".":
            continue
        target = base_dir / step.path
        if step.kind == "directory" and target.is_dir() and not any(target.iterdir()):
            continue
        if target.exists():
            raise PathError(
                "Destination already exists",
                context={"path": str(target), "hint": "remove it or run without --strict"},
            )


def ensure_directory(base_dir: Path, step: PlannedStep) -> Tuple[bool, Optional[Notice]]:
    """Create a planned directory if absent. Returns (created, notice)."""
    path = base_dir / step.path
    if path.is_dir():
        if step.path == "." and step.member is None:
            return False, None
        return False, Notice(
            code=NoticeCode.DIRECTORY_EXISTS,
            message=f"Member-path {path} already exists...",
            element_id=step.member,
            path=step.path,
        )
    try:
        path.mkdir(parents=True)
    except OSError as e:
        raise PathError(f"Could not create directory: {e}", context={"path": str(path)}) from e
    return True, Notice(
        code=NoticeCode.DIRECTORY_CREATED,
        message=f"Creating {path}",
        element_id=step.member,
        path=step.path,
    )


def write_file(base_dir: Path, step: PlannedStep) -> None:
    path = base_dir / step.path
    try:
        path.write_text(step.content or "", encoding="utf-8")
    except OSError as e:
        raise PathError(f"Could not write {path}: {e}", context={"path": str(path)}) from e


def apply_plan(
    plan: ScaffoldPlan,
    base_dir: Path,
    config: Optional[ScaffoldConfig] = None,
) -> WriteOutcome:
    """Execute the plan's steps in order.

    Any filesystem failure raises PathError; steps already done are left
    in place.
    """
    config = config or ScaffoldConfig()
    if config.on_existing == "fail":
        check_destination(plan, base_dir)

    outcome = WriteOutcome()
    for step in plan.steps:
        if step.kind == "directory":
            created, notice = ensure_directory(base_dir, step)
            if created:
                outcome.created_directories.append(step.path)
            if notice is not None:
                outcome.notices.append(notice)
        else:
            write_file(base_dir, step)
            outcome.written_files.append(step.path)
    return outcome
