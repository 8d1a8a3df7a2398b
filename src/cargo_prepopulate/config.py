"""Run configuration for scaffolding."""

from typing import Literal, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator


CRATES_IO_REGISTRY = "(registry+https://github.com/rust-lang/crates.io-index)"
LOCKFILE_NAME = "Cargo.lock"
MANIFEST_NAME = "Cargo.toml"
PLACEHOLDER_VERSION = "0.0.0"
PLACEHOLDER_AUTHOR = "cargo-prepopulate"


class ScaffoldConfig(BaseModel):
    """Options controlling how a lock file is turned into a skeleton.

    Defaults reproduce the reference behaviour: existing directories are
    reported and reused, and a lock file without first-party packages
    produces an empty workspace.
    """
    registry_source: str = Field(
        CRATES_IO_REGISTRY,
        description="Source descriptor that marks a dependency edge as re-declarable"
    )
    stub_file: str = Field("lib.rs", description="Empty source file created under each src/ directory")
    manifest_version: str = PLACEHOLDER_VERSION
    authors: Tuple[str, ...] = (PLACEHOLDER_AUTHOR,)
    on_existing: Literal["warn", "fail"] = "warn"
    allow_empty_workspace: bool = True
    dry_run: bool = False

    model_config = ConfigDict(frozen=True, extra="forbid")

    @field_validator('stub_file')
    @classmethod
    def validate_stub_file(cls, v: str) -> str:
        """Stub file must be a bare file name, it is always placed in src/."""
        if not v or "/" in v or "\\" in v or v in (".", ".."):
            raise ValueError(f"stub_file must be a plain file name, got '{v}'")
        return v

    @field_validator('registry_source')
    @classmethod
    def validate_registry_source(cls, v: str) -> str:
        """Edges are split on spaces, so a marker containing one could never match."""
        if not v or " " in v:
            raise ValueError(f"registry_source must be a non-empty token without spaces, got '{v}'")
        return v

    @classmethod
    def strict(cls, **overrides) -> "ScaffoldConfig":
        """Config that refuses non-empty destinations and empty workspaces."""
        values = {"on_existing": "fail", "allow_empty_workspace": False}
        values.update(overrides)
        return cls(**values)
