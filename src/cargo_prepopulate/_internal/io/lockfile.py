"""Lock file I/O helpers (internal)."""

from pathlib import Path
from typing import Union

from cargo_prepopulate.config import LOCKFILE_NAME
from cargo_prepopulate.errors import FormatError, PathError


def validate_lockfile_path(path: Union[str, Path]) -> Path:
    """Check the path names a Cargo.lock file without touching the filesystem."""
    lock_path = Path(path)
    if lock_path.name != LOCKFILE_NAME:
        raise PathError(
            f"Path does not point to a {LOCKFILE_NAME} file",
            context={"path": str(lock_path)},
        )
    return lock_path


def read_lockfile_text(path: Union[str, Path]) -> str:
    """Read the raw text of a lock file."""
    lock_path = validate_lockfile_path(path)
    try:
        return lock_path.read_text(encoding="utf-8")
    except FileNotFoundError as e:
        raise PathError("Lock file does not exist", context={"path": str(lock_path)}) from e
    except UnicodeDecodeError as e:
        raise FormatError(
            "Lock file is not valid UTF-8",
            context={"path": str(lock_path), "offset": str(e.start)},
        ) from e
    except OSError as e:
        raise PathError(f"Could not read lock file: {e}", context={"path": str(lock_path)}) from e
