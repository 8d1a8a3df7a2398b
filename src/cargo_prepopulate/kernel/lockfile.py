"""Lock-file models and interpretation into a project shape."""

from typing import Annotated, Any, Dict, List, Literal, Optional, Union

import toml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from cargo_prepopulate.errors import FormatError


class PackageRecord(BaseModel):
    """One [[package]] entry of a lock file.

    `source` is present iff the package comes from outside the project
    (registry, git, ...). Unknown keys such as `checksum` are ignored.
    """
    name: str
    version: str
    source: Optional[str] = None
    dependencies: Optional[List[str]] = None

    model_config = ConfigDict(frozen=True, extra="ignore")

    @property
    def is_first_party(self) -> bool:
        return self.source is None


class Package(BaseModel):
    """First-party package view: identity plus raw dependency edges."""
    name: str
    version: str
    dependencies: List[str] = Field(default_factory=list)

    model_config = ConfigDict(frozen=True)

    @classmethod
    def from_record(cls, record: PackageRecord) -> "Package":
        return cls(
            name=record.name,
            version=record.version,
            dependencies=list(record.dependencies or []),
        )


class SingleProject(BaseModel):
    kind: Literal["project"] = "project"
    package: Package

    model_config = ConfigDict(frozen=True)

    def member_names(self) -> List[str]:
        return [self.package.name]


class Workspace(BaseModel):
    kind: Literal["workspace"] = "workspace"
    members: List[Package] = Field(default_factory=list)

    model_config = ConfigDict(frozen=True)

    def member_names(self) -> List[str]:
        return [member.name for member in self.members]


ProjectShape = Annotated[Union[SingleProject, Workspace], Field(discriminator="kind")]


def load_document(text: str) -> Dict[str, Any]:
    """Parse raw lock text into a generic TOML document."""
    try:
        return toml.loads(text)
    except toml.TomlDecodeError as e:
        raise FormatError(
            f"Lock file is not valid TOML: {e.msg}",
            context={"line": str(e.lineno), "column": str(e.colno)},
        ) from e


def parse_records(document: Dict[str, Any]) -> List[PackageRecord]:
    """Decode the top-level package array into records, in document order."""
    entries = document.get("package")
    if entries is None:
        raise FormatError("Lock file has no [[package]] entries", context={"path": "package"})
    if not isinstance(entries, list):
        raise FormatError(
            "Lock file 'package' must be an array of tables",
            context={"path": "package", "found": type(entries).__name__},
        )

    records = []
    for index, entry in enumerate(entries):
        try:
            records.append(PackageRecord.model_validate(entry))
        except ValidationError as e:
            first = e.errors()[0]
            path = f"package[{index}]"
            if first["loc"]:
                path += "." + ".".join(str(part) for part in first["loc"])
            raise FormatError(
                f"Invalid lock file package entry: {first['msg']}",
                context={"path": path},
            ) from e
    return records


def first_party(records: List[PackageRecord]) -> List[Package]:
    """Packages without a source, order preserved."""
    return [Package.from_record(record) for record in records if record.is_first_party]


def project_shape(packages: List[Package]) -> ProjectShape:
    """Exactly one package is a single project; anything else is a workspace."""
    if len(packages) == 1:
        return SingleProject(package=packages[0])
    return Workspace(members=list(packages))


def parse_lockfile(text: str) -> List[PackageRecord]:
    """Parse raw lock text into package records."""
    return parse_records(load_document(text))


def interpret_lockfile(text: str) -> ProjectShape:
    """Raw lock text to project shape."""
    return project_shape(first_party(parse_lockfile(text)))
