"""Error taxonomy for cargo_prepopulate.

Every fatal condition is a PrepopulateError. Dropped dependency edges and
pre-existing directories are not errors; they surface as notices on the
result models instead.
"""

from typing import Dict, Mapping, Optional

from cargo_prepopulate.codes import ErrorCode


class PrepopulateError(ValueError):
    """Base error carrying a stable code and optional context."""

    code: ErrorCode

    def __init__(self, message: str, *, context: Optional[Mapping[str, str]] = None) -> None:
        super().__init__(message)
        self.message = message
        self.context: Dict[str, str] = dict(context or {})

    def __str__(self) -> str:
        parts = [self.message]
        for key, value in self.context.items():
            if value:
                parts.append(f"  {key}: {value}")
        return "\n".join(parts)

    def to_dict(self) -> Dict[str, object]:
        return {
            "code": self.code.value,
            "message": self.message,
            "context": dict(self.context),
        }


class PathError(PrepopulateError):
    """Wrong input filename, or an unreadable/unwritable path."""

    code = ErrorCode.PATH


class FormatError(PrepopulateError):
    """Lock document violates its own syntax or required-field rules."""

    code = ErrorCode.FORMAT


class InvalidProject(PrepopulateError):
    """Project-shape invariant cannot be satisfied (e.g. no first-party packages)."""

    code = ErrorCode.INVALID_PROJECT
