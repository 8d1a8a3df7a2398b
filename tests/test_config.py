"""Tests for ScaffoldConfig."""

import pytest
from pydantic import ValidationError

from cargo_prepopulate.config import CRATES_IO_REGISTRY, ScaffoldConfig


def test_defaults_match_reference_behaviour():
    config = ScaffoldConfig()
    assert config.registry_source == CRATES_IO_REGISTRY
    assert config.stub_file == "lib.rs"
    assert config.manifest_version == "0.0.0"
    assert config.authors == ("cargo-prepopulate",)
    assert config.on_existing == "warn"
    assert config.allow_empty_workspace is True
    assert config.dry_run is False


def test_strict_preset():
    config = ScaffoldConfig.strict(dry_run=True)
    assert config.on_existing == "fail"
    assert config.allow_empty_workspace is False
    assert config.dry_run is True


def test_config_is_frozen():
    config = ScaffoldConfig()
    with pytest.raises(ValidationError):
        config.dry_run = True


@pytest.mark.parametrize("stub", ["", "src/lib.rs", "..", "a\\b"])
def test_stub_file_must_be_plain_name(stub):
    with pytest.raises(ValidationError, match="plain file name"):
        ScaffoldConfig(stub_file=stub)


def test_registry_source_without_spaces():
    with pytest.raises(ValidationError, match="without spaces"):
        ScaffoldConfig(registry_source="(registry+https://x y)")


def test_unknown_option_rejected():
    with pytest.raises(ValidationError):
        ScaffoldConfig(verbose=True)
