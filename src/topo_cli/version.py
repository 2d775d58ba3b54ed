"""Single source of truth for the topo-cli version string."""

__version__: str = "0.1.0"
