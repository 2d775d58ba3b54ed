"""Diagnostic console for the CLI layer.

Table output goes to stdout through the get dispatcher; everything meant
for a human operator (errors, hints, doctor output) goes to stderr
through :data:`console`.  Rich is imported lazily so ``--help`` and
``--version`` keep working when it is not installed.
"""

from __future__ import annotations

import sys
from typing import Any

from topo_cli.exceptions import EnvironmentError, TopoCliError


def _load_rich_console_class() -> type[Any]:
	"""Return ``rich.console.Console`` class or raise ``EnvironmentError``."""
	try:
		from rich.console import Console
	except ModuleNotFoundError as exc:
		raise EnvironmentError(
			"rich is not installed. Install with: pip install rich",
		) from exc
	return Console


def get_rich_console() -> Any:
	"""Create a Rich console instance targeting stderr."""
	console_class = _load_rich_console_class()
	return console_class(stderr=True, highlight=False)


class _ConsoleProxy:
	"""Minimal ``print``-compatible proxy with a plain stderr fallback."""

	def print(self, *objects: object) -> None:
		"""Render with Rich when available, else plain stderr print."""
		try:
			rich_console = get_rich_console()
		except EnvironmentError:
			print(*objects, file=sys.stderr)
			return
		rich_console.print(*objects)


console = _ConsoleProxy()


def escape_markup(text: object) -> str:
	"""Escape Rich markup in *text*; the plain fallback prints it verbatim."""
	try:
		from rich.markup import escape
	except ModuleNotFoundError:
		return str(text)
	return escape(str(text))


def print_error(exc: TopoCliError) -> None:
	"""Render a :class:`TopoCliError` with its detail and hint, if any.

	Message, detail and hint may carry object IDs or server text, so they
	are escaped before being wrapped in markup.
	"""
	console.print(f"[bold red]Error:[/bold red] {escape_markup(exc)}")
	if exc.detail:
		console.print(f"[dim]  {escape_markup(exc.detail)}[/dim]")
	if exc.hint:
		console.print(f"[yellow]Hint:[/yellow] {escape_markup(exc.hint)}")
