"""Smoke tests — version, exception hierarchy, exit codes, error boundary.

These tests prove that:
* The CLI entry point is importable and callable.
* The exception hierarchy is correctly structured.
* The error boundary maps exceptions to exit codes.
"""

from __future__ import annotations

from unittest.mock import patch

import pytest

from topo_cli import __version__
from topo_cli.cli import exit_codes
from topo_cli.cli.app import cli, main
from topo_cli.exceptions import (
    ConnectionFailedError,
    EnvironmentError,
    GetObjectError,
    GetTimeoutError,
    ListObjectsError,
    TopoCliError,
    service_address_hint,
)


# ---------------------------------------------------------------------------
# Version
# ---------------------------------------------------------------------------

class TestVersion:
    def test_version_is_semver_like(self) -> None:
        parts = __version__.split(".")
        assert len(parts) == 3
        assert all(part.isdigit() for part in parts)


# ---------------------------------------------------------------------------
# Exception hierarchy
# ---------------------------------------------------------------------------

class TestExceptions:
    @pytest.mark.parametrize(
        "exc_class",
        [
            ConnectionFailedError,
            ListObjectsError,
            GetObjectError,
            GetTimeoutError,
            EnvironmentError,
        ],
    )
    def test_all_exceptions_inherit_from_base(
        self, exc_class: type[TopoCliError]
    ) -> None:
        assert issubclass(exc_class, TopoCliError)

    def test_timeout_is_a_get_error(self) -> None:
        assert issubclass(GetTimeoutError, GetObjectError)

    def test_hint_and_detail_are_stored(self) -> None:
        err = TopoCliError("boom", hint="try this", detail="rpc said no")
        assert str(err) == "boom"
        assert err.hint == "try this"
        assert err.detail == "rpc said no"

    def test_hint_and_detail_default_to_none(self) -> None:
        err = TopoCliError("boom")
        assert err.hint is None
        assert err.detail is None

    def test_service_address_hint_names_address(self) -> None:
        hint = service_address_hint("topo:5150")
        assert "topo:5150" in hint
        assert "--service-address" in hint


# ---------------------------------------------------------------------------
# Exit codes
# ---------------------------------------------------------------------------

class TestExitCodes:
    def test_values(self) -> None:
        assert exit_codes.SUCCESS == 0
        assert exit_codes.GENERAL_ERROR == 1
        assert exit_codes.UNEXPECTED_ERROR == 2
        assert exit_codes.KEYBOARD_INTERRUPT == 130


# ---------------------------------------------------------------------------
# CLI routing
# ---------------------------------------------------------------------------

class TestCLIRouting:
    def test_no_args_returns_success(self) -> None:
        assert main([]) == exit_codes.SUCCESS

    def test_version_flag(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["--version"])
        assert exc_info.value.code == 0
        assert __version__ in capsys.readouterr().out

    @patch("topo_cli.cli.doctor.run_doctor", return_value=exit_codes.SUCCESS)
    def test_doctor_routes(self, mock_doctor: object) -> None:
        assert main(["doctor"]) == exit_codes.SUCCESS

    def test_unknown_command_rejected(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["describe"])
        assert exc_info.value.code == 2


# ---------------------------------------------------------------------------
# Error boundary
# ---------------------------------------------------------------------------

class TestErrorBoundary:
    def _exit_code(self, side_effect: BaseException) -> int:
        with patch("topo_cli.cli.app.main", side_effect=side_effect):
            with pytest.raises(SystemExit) as exc_info:
                cli()
        return int(exc_info.value.code)

    def test_success(self) -> None:
        with patch("topo_cli.cli.app.main", return_value=exit_codes.SUCCESS):
            with pytest.raises(SystemExit) as exc_info:
                cli()
        assert exc_info.value.code == exit_codes.SUCCESS

    def test_get_error_is_general_error(self, capsys: pytest.CaptureFixture[str]) -> None:
        err = GetObjectError(
            "Object 'x' not found.",
            hint="Run the command without an ID to list known objects.",
            detail="x not found",
        )
        assert self._exit_code(err) == exit_codes.GENERAL_ERROR
        stderr = capsys.readouterr().err
        assert "Object 'x' not found." in stderr
        assert "x not found" in stderr
        assert "list known objects" in stderr

    def test_unbalanced_closing_tag_in_id(self, capsys: pytest.CaptureFixture[str]) -> None:
        err = GetObjectError("Object 'x[/]' not found.", detail="x[/] not found")
        assert self._exit_code(err) == exit_codes.GENERAL_ERROR
        stderr = capsys.readouterr().err
        assert "Object 'x[/]' not found." in stderr
        assert "x[/] not found" in stderr

    def test_style_like_id_is_printed_verbatim(self, capsys: pytest.CaptureFixture[str]) -> None:
        err = GetObjectError("Object '[red]e1' not found.", hint="see [bold]docs")
        assert self._exit_code(err) == exit_codes.GENERAL_ERROR
        stderr = capsys.readouterr().err
        assert "Object '[red]e1' not found." in stderr
        assert "see [bold]docs" in stderr

    def test_unexpected_error_text_is_printed_verbatim(
        self, capsys: pytest.CaptureFixture[str]
    ) -> None:
        assert self._exit_code(RuntimeError("bad [/] tag")) == exit_codes.UNEXPECTED_ERROR
        assert "RuntimeError: bad [/] tag" in capsys.readouterr().err

    def test_keyboard_interrupt(self) -> None:
        assert self._exit_code(KeyboardInterrupt()) == exit_codes.KEYBOARD_INTERRUPT

    def test_unexpected_error(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert self._exit_code(RuntimeError("kaboom")) == exit_codes.UNEXPECTED_ERROR
        assert "RuntimeError: kaboom" in capsys.readouterr().err
