"""Test public API surface - ensure exports work and _internal stays private."""

import types


def test_root_exports():
    import cargo_prepopulate

    for name in ("prepopulate", "plan", "interpret", "ScaffoldConfig", "ScaffoldReport",
                 "PathError", "FormatError", "InvalidProject"):
        assert name in cargo_prepopulate.__all__
        assert hasattr(cargo_prepopulate, name)

    assert isinstance(cargo_prepopulate.prepopulate, types.FunctionType)
    assert "_internal" not in cargo_prepopulate.__all__


def test_error_taxonomy():
    from cargo_prepopulate import ErrorCode, FormatError, InvalidProject, PathError, PrepopulateError

    for error_cls, code in ((PathError, ErrorCode.PATH),
                            (FormatError, ErrorCode.FORMAT),
                            (InvalidProject, ErrorCode.INVALID_PROJECT)):
        err = error_cls("boom", context={"path": "Cargo.lock"})
        assert isinstance(err, PrepopulateError)
        assert isinstance(err, ValueError)
        assert err.code is code
        assert err.to_dict() == {"code": code.value, "message": "boom", "context": {"path": "Cargo.lock"}}
        assert str(err) == "boom\n  path: Cargo.lock"


def test_cli_main_is_callable():
    from cargo_prepopulate import cli
    assert callable(cli.main)
