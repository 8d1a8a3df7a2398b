"""Error and notice code constants for cargo_prepopulate.

These constants prevent stringly-typed codes and give client code
stable identifiers to match on.
"""

from enum import Enum


class ErrorCode(str, Enum):
    """Fatal error codes (one per error class)."""

    PATH = "E_PATH"
    FORMAT = "E_FORMAT"
    INVALID_PROJECT = "E_INVALID_PROJECT"


class NoticeCode(str, Enum):
    """Non-fatal diagnostic codes."""

    # Dependency edges dropped from a manifest
    NON_REGISTRY_DEPENDENCY = "NON_REGISTRY_DEPENDENCY"
    LOCAL_DEPENDENCY = "LOCAL_DEPENDENCY"

    # Project shape
    EMPTY_WORKSPACE = "EMPTY_WORKSPACE"

    # Filesystem
    DIRECTORY_CREATED = "DIRECTORY_CREATED"
    DIRECTORY_EXISTS = "DIRECTORY_EXISTS"


# Notices that the CLI reports as warnings rather than progress
WARNING_CODES = frozenset({
    NoticeCode.NON_REGISTRY_DEPENDENCY,
    NoticeCode.EMPTY_WORKSPACE,
    NoticeCode.DIRECTORY_EXISTS,
})
