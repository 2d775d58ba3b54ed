"""CLI application entry point and command routing for topo-cli.

This module is the **sole error boundary** for the entire application.
It catches :class:`~topo_cli.exceptions.TopoCliError`, ``KeyboardInterrupt``,
and any unexpected ``Exception``, rendering user-friendly messages via Rich
and returning well-defined exit codes.

Architecture notes
------------------
* No business logic lives here — all work is delegated to the core
  layer, the infrastructure layer, and the get dispatcher.
* Table output goes to stdout; diagnostics go to stderr through the
  console proxy.
* This module is the only place that translates between the domain world
  and the OS process exit code.
"""

from __future__ import annotations

import argparse
import sys

from topo_cli.cli import exit_codes
from topo_cli.cli.console import console, escape_markup, print_error
from topo_cli.cli.get_command import SUBCOMMANDS
from topo_cli.core.models import DEFAULT_SERVICE_ADDRESS, ConnectionConfig, ObjectType
from topo_cli.exceptions import TopoCliError
from topo_cli.version import __version__


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

def _connection_parent() -> argparse.ArgumentParser:
    """Options shared by every command that talks to the topology service."""
    parent = argparse.ArgumentParser(add_help=False)
    group = parent.add_argument_group("connection")
    group.add_argument(
        "--service-address",
        default=DEFAULT_SERVICE_ADDRESS,
        help=f"topology service address (default: {DEFAULT_SERVICE_ADDRESS})",
    )
    group.add_argument(
        "--tls-cert-path",
        default=None,
        help="path to the client certificate (PEM)",
    )
    group.add_argument(
        "--tls-key-path",
        default=None,
        help="path to the client private key (PEM)",
    )
    group.add_argument(
        "--no-tls",
        action="store_true",
        help="connect without TLS",
    )
    return parent


def _output_parent() -> argparse.ArgumentParser:
    parent = argparse.ArgumentParser(add_help=False)
    parent.add_argument(
        "--no-headers",
        action="store_true",
        help="disables output headers",
    )
    parent.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="verbose output",
    )
    return parent


def _build_parser() -> argparse.ArgumentParser:
    """Construct the top-level argument parser.

    The CLI supports:
    * ``topo get entity|relation|kind [ID]`` — print topology objects
    * ``topo doctor``                        — environment diagnostics
    * ``topo --version``
    """
    parser = argparse.ArgumentParser(
        prog="topo",
        description="Query the ONOS topology service.",
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    commands = parser.add_subparsers(dest="command", metavar="<command>")

    get_parser = commands.add_parser("get", help="Get topology objects")
    get_parser.set_defaults(get_parser=get_parser)
    get_commands = get_parser.add_subparsers(dest="type_name", metavar="<type>")

    parents = [_output_parent(), _connection_parent()]
    for object_type, (name, alias, short) in SUBCOMMANDS.items():
        sub = get_commands.add_parser(
            name,
            aliases=[alias],
            parents=parents,
            help=short,
            description=short,
        )
        sub.add_argument("id", nargs="?", default=None, metavar="<id>")
        sub.set_defaults(object_type=object_type)

    commands.add_parser("doctor", help="Run environment diagnostics")
    return parser


def _connection_config(args: argparse.Namespace) -> ConnectionConfig:
    return ConnectionConfig(
        address=args.service_address,
        tls_cert_path=args.tls_cert_path,
        tls_key_path=args.tls_key_path,
        no_tls=args.no_tls,
    )


# ---------------------------------------------------------------------------
# Command dispatch
# ---------------------------------------------------------------------------

def _handle_get(args: argparse.Namespace) -> int:
    """Dispatch ``topo get <type> [ID]``.

    Flow:
    1. Build the gRPC connector from the connection options.
    2. Wrap it in an :class:`ObjectFetcher`.
    3. Hand over to the get dispatcher, which prints to stdout.
    """
    from topo_cli.cli.get_command import run_get
    from topo_cli.core.object_fetcher import ObjectFetcher
    from topo_cli.infra.grpc_topo import GrpcTopoConnector

    fetcher = ObjectFetcher(GrpcTopoConnector(_connection_config(args)))
    object_type: ObjectType = args.object_type
    return run_get(
        object_type,
        args.id,
        no_headers=args.no_headers,
        verbose=args.verbose,
        fetcher=fetcher,
    )


def _handle_doctor() -> int:
    """Dispatch the ``doctor`` diagnostics command."""
    from topo_cli.cli.doctor import run_doctor

    return run_doctor()


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None) -> int:
    """Run the topo CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.  Accepting *argv* enables deterministic testing without
        monkeypatching.

    Returns
    -------
    int
        OS process exit code.
    """
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return exit_codes.SUCCESS

    if args.command == "doctor":
        return _handle_doctor()

    if getattr(args, "object_type", None) is None:
        args.get_parser.print_help()
        return exit_codes.SUCCESS

    return _handle_get(args)


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point.

    This function wraps :func:`main` and guarantees the process never
    exits with a raw stack trace during normal usage.
    """
    try:
        code = main()
        sys.exit(code)
    except TopoCliError as exc:
        print_error(exc)
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        console.print(
            "[bold red]Unexpected error.[/bold red] "
            "Please report this issue.\n"
            f"  {type(exc).__name__}: {escape_markup(exc)}"
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
