"""``topo doctor`` — environment diagnostics command.

Reports the interpreter and the versions of the runtime libraries the
client needs to reach the topology service.  No network calls are made.
Rendered as a Rich table, or as plain text when Rich is missing.
"""

from __future__ import annotations

import importlib
import platform
import sys
from importlib import metadata

from topo_cli.cli import exit_codes
from topo_cli.cli.console import console
from topo_cli.version import __version__

Check = tuple[str, str, str]
"""(label, value, status markup)."""

_OK = "[green]OK[/green]"
_FAIL = "[red]FAIL[/red]"


# ---------------------------------------------------------------------------
# Diagnostic collectors
# ---------------------------------------------------------------------------

def _python_version_check() -> Check:
    version = platform.python_version()
    ok = sys.version_info[:2] >= (3, 10)
    status = _OK if ok else "[red]FAIL (>=3.10 required)[/red]"
    return "Python", version, status


def _distribution_check(label: str, distribution: str, module: str) -> Check:
    """Report whether *module* imports and which *distribution* version is installed."""
    try:
        importlib.import_module(module)
    except ImportError:
        return label, "NOT INSTALLED", _FAIL
    try:
        version = metadata.version(distribution)
    except metadata.PackageNotFoundError:
        version = "unknown"
    return label, version, _OK


def _grpc_check() -> Check:
    return _distribution_check("grpcio", "grpcio", "grpc")


def _protobuf_check() -> Check:
    return _distribution_check("protobuf", "protobuf", "google.protobuf")


def _os_check() -> Check:
    system_raw = platform.system()
    system_display = {"Darwin": "macOS"}.get(system_raw, system_raw)
    value = f"{system_display} {platform.release()} ({platform.machine()})"
    return "OS", value, _OK


def _topo_cli_version_check() -> Check:
    return "topo-cli", __version__, _OK


def _status_plain(status: str) -> str:
    """Convert rich-markup status to plain text."""
    for word in ("FAIL", "OK"):
        if word in status:
            return word
    return status


def _print_plain_doctor_table(checks: list[Check]) -> None:
    """Render doctor output without Rich."""
    print("\ntopo doctor", file=sys.stderr)
    print("=" * 56, file=sys.stderr)
    print(f"{'Component':<12} {'Value':<32} {'Status':<8}", file=sys.stderr)
    print("-" * 56, file=sys.stderr)
    for label, value, status in checks:
        print(f"{label:<12} {value:<32} {_status_plain(status):<8}", file=sys.stderr)
    print(file=sys.stderr)


def collect_checks() -> list[Check]:
    return [
        _topo_cli_version_check(),
        _python_version_check(),
        _grpc_check(),
        _protobuf_check(),
        _os_check(),
    ]


# ---------------------------------------------------------------------------
# Public entry point
# ---------------------------------------------------------------------------

def run_doctor() -> int:
    """Execute all diagnostic checks and render a summary table.

    Returns
    -------
    int
        :data:`exit_codes.SUCCESS` when all checks pass,
        :data:`exit_codes.GENERAL_ERROR` if any check fails.
    """
    checks = collect_checks()
    has_failure = any("FAIL" in status for _, _, status in checks)

    try:
        from rich.table import Table
    except ModuleNotFoundError:
        _print_plain_doctor_table(checks)
        summary = "Some checks failed." if has_failure else "All checks passed."
        print(summary, file=sys.stderr)
    else:
        table = Table(
            title="topo doctor",
            show_header=True,
            header_style="bold cyan",
            border_style="dim",
        )
        table.add_column("Component", style="bold", min_width=12)
        table.add_column("Value", min_width=20)
        table.add_column("Status", justify="center", min_width=8)
        for label, value, status in checks:
            table.add_row(label, value, status)

        console.print()
        console.print(table)
        console.print()
        if has_failure:
            console.print("[bold red]Some checks failed.[/bold red]")
        else:
            console.print("[bold green]All checks passed.[/bold green]")

    return exit_codes.GENERAL_ERROR if has_failure else exit_codes.SUCCESS
