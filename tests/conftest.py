"""Pytest configuration for tests.

No sys.path hacks - tests import from the installed cargo_prepopulate package.
"""

from pathlib import Path

import pytest


REGISTRY = "(registry+https://github.com/rust-lang/crates.io-index)"
FIXTURES = Path(__file__).resolve().parent.parent / "fixtures"


def lock_entry(name, version, source=None, dependencies=None):
    """Render one [[package]] table the way cargo writes it."""
    lines = ["[[package]]", f'name = "{name}"', f'version = "{version}"']
    if source is not None:
        lines.append(f'source = "{source}"')
    if dependencies is not None:
        lines.append("dependencies = [")
        lines.extend(f' "{dep}",' for dep in dependencies)
        lines.append("]")
    return "\n".join(lines) + "\n"


def lock_text(*entries):
    return "\n".join(entries)


@pytest.fixture
def fixtures_dir():
    return FIXTURES


@pytest.fixture
def write_lock(tmp_path):
    """Write lock text to <tmp>/<subdir>/Cargo.lock and return the path."""
    def _write(text, subdir="project", filename="Cargo.lock"):
        project_dir = tmp_path / subdir
        project_dir.mkdir(parents=True, exist_ok=True)
        lock_path = project_dir / filename
        lock_path.write_text(text, encoding="utf-8")
        return lock_path
    return _write


@pytest.fixture
def copy_fixture(tmp_path):
    """Copy fixtures/<name>/Cargo.lock into a fresh tmp directory."""
    def _copy(name):
        project_dir = tmp_path / name
        project_dir.mkdir(parents=True, exist_ok=True)
        lock_path = project_dir / "Cargo.lock"
        lock_path.write_text((FIXTURES / name / "Cargo.lock").read_text(encoding="utf-8"), encoding="utf-8")
        return lock_path
    return _copy
