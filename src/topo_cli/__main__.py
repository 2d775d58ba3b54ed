"""Allow ``python -m topo_cli`` invocation.

This module simply delegates to the CLI error-boundary entry point so
that ``python -m topo_cli`` behaves identically to the ``topo``
console script.
"""

from __future__ import annotations

from topo_cli.cli.app import cli

if __name__ == "__main__":
    cli()
