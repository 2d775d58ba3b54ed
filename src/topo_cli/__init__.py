"""topo-cli — command-line client for the ONOS topology service.

Fetches entities, relations, and kinds over gRPC and renders them as
fixed-width tabular text.
"""

from topo_cli.version import __version__

__all__: list[str] = ["__version__"]
