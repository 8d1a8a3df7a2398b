"""cargo_prepopulate: rebuild a Cargo project skeleton from its Cargo.lock."""

from importlib.metadata import version, PackageNotFoundError

try:
    __version__ = version("cargo-prepopulate")
except PackageNotFoundError:
    __version__ = "dev"

# Public API exports
from cargo_prepopulate.api import prepopulate, plan, interpret, ScaffoldReport
from cargo_prepopulate.config import ScaffoldConfig
from cargo_prepopulate.contracts import Notice
from cargo_prepopulate.codes import ErrorCode, NoticeCode
from cargo_prepopulate.errors import PrepopulateError, PathError, FormatError, InvalidProject

__all__ = [
    "__version__",
    "prepopulate",
    "plan",
    "interpret",
    "ScaffoldReport",
    "ScaffoldConfig",
    "Notice",
    "ErrorCode",
    "NoticeCode",
    "PrepopulateError",
    "PathError",
    "FormatError",
    "InvalidProject",
]
