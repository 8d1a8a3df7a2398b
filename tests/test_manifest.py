"""Tests for manifest synthesis."""

import toml

from cargo_prepopulate.codes import NoticeCode
from cargo_prepopulate.kernel.lockfile import Package
from cargo_prepopulate.kernel.manifest import (
    ManifestData,
    ManifestPackage,
    synthesize_manifest,
    synthesize_workspace_manifest,
)

from conftest import REGISTRY


def test_only_registry_edges_become_dependencies():
    package = Package(
        name="app",
        version="0.4.2",
        dependencies=[f"foo 1.0.0 {REGISTRY}", "bar 2.0.0"],
    )
    manifest, notices = synthesize_manifest(package)

    assert manifest.dependencies == {"foo": "1.0.0"}
    assert [notice.code for notice in notices] == [NoticeCode.LOCAL_DEPENDENCY]


def test_identity_copied_and_version_replaced():
    package = Package(name="app", version="0.4.2", dependencies=[])
    manifest, notices = synthesize_manifest(package)

    assert manifest.package.name == "app"
    assert manifest.package.version == "0.0.0"
    assert manifest.package.authors == ["cargo-prepopulate"]
    assert manifest.dependencies == {}
    assert notices == []


def test_git_dependency_dropped_with_notice():
    package = Package(
        name="tool",
        version="0.3.1",
        dependencies=[
            f"clap 2.32.0 {REGISTRY}",
            "mylib 0.2.0 (git+https://github.com/example/mylib#0123abcd)",
        ],
    )
    manifest, notices = synthesize_manifest(package)

    assert manifest.dependencies == {"clap": "2.32.0"}
    assert len(notices) == 1
    assert notices[0].code == NoticeCode.NON_REGISTRY_DEPENDENCY
    assert notices[0].element_id == "tool"


def test_repeated_name_last_write_wins():
    package = Package(
        name="app",
        version="0.1.0",
        dependencies=[f"rand 0.4.6 {REGISTRY}", f"rand 0.6.5 {REGISTRY}"],
    )
    manifest, _ = synthesize_manifest(package)
    assert manifest.dependencies == {"rand": "0.6.5"}


def test_custom_placeholders():
    package = Package(name="app", version="0.1.0")
    manifest, _ = synthesize_manifest(package, version="0.1.0-dev", authors=("Build Bot",))
    assert manifest.package.version == "0.1.0-dev"
    assert manifest.package.authors == ["Build Bot"]


def test_manifest_toml_shape():
    manifest = ManifestData(
        package=ManifestPackage(name="app"),
        dependencies={"serde": "1.0.0", "proc-macro2": "0.4.24"},
    )
    data = toml.loads(toml.dumps(manifest.to_toml_dict()))
    assert data == {
        "package": {"name": "app", "version": "0.0.0", "authors": ["cargo-prepopulate"]},
        "dependencies": {"serde": "1.0.0", "proc-macro2": "0.4.24"},
    }


def test_workspace_manifest_lists_members_in_order():
    members = [Package(name="zeta", version="0.1.0"), Package(name="alpha", version="0.1.0")]
    workspace = synthesize_workspace_manifest(members)

    assert workspace.members == ["zeta", "alpha"]
    assert workspace.to_toml_dict() == {"workspace": {"members": ["zeta", "alpha"]}}


def test_empty_workspace_manifest():
    assert synthesize_workspace_manifest([]).to_toml_dict() == {"workspace": {"members": []}}
