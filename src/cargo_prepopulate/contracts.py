"""Public diagnostic models for cargo_prepopulate."""

from typing import Optional

from pydantic import BaseModel, ConfigDict

from cargo_prepopulate.codes import NoticeCode, WARNING_CODES


class Notice(BaseModel):
    """A non-fatal diagnostic raised while interpreting or scaffolding."""
    code: NoticeCode
    message: str
    element_id: Optional[str] = None  # package name the notice belongs to
    path: Optional[str] = None  # relative path for filesystem notices

    model_config = ConfigDict(frozen=True)

    @property
    def is_warning(self) -> bool:
        return self.code in WARNING_CODES
