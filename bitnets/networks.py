"""
The process-wide default registry, pre-populated with the well-known networks

Code that needs an isolated catalog should build its own with default_registry() or NetworkRegistry().
"""
from typing import Any, Mapping, Optional

from bitnets.core.formats import FIELDS
from bitnets.network.known_networks import default_registry
from bitnets.network.network import Network

__all__ = ["NETWORKS", "add", "remove", "get", "get_network"]

NETWORKS = default_registry()


def add(data: Mapping) -> Network:
    """Register a custom network in the default registry"""
    return NETWORKS.register(data)


def remove(network: Network) -> None:
    """Remove a network from the default registry"""
    NETWORKS.unregister(network)


def get(key: Any, fields=None) -> Optional[Network]:
    """Resolve a network in the default registry. See NetworkRegistry.resolve"""
    return NETWORKS.resolve(key, fields)


def get_network(name: str) -> Optional[Network]:
    """Return the default registry's network with the given name or alias"""
    return NETWORKS.resolve(name, (FIELDS.NAME, FIELDS.ALIAS))
