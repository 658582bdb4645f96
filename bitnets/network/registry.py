"""
The NetworkRegistry: an in-memory catalog of Network descriptors with a reverse index for lookup by any
identifying scalar value
"""
import threading
from typing import Any, Iterable, Iterator, Mapping, Optional, Union

from bitnets.core.exceptions import NetworkCollisionError
from bitnets.core.formats import FIELDS, NETWORK
from bitnets.core.logging import get_logger
from bitnets.data.encoding import integer_as_buffer
from bitnets.network.config import load_network_config
from bitnets.network.network import Network, normalize_field

__all__ = ["NetworkRegistry"]

logger = get_logger(__name__)

FieldNames = Union[str, Iterable[str]]


def _matches(network: Network, field: str, key: Any) -> bool:
    """
    Equality test used by restricted lookups. Structured fields also accept list/bytearray keys.
    """
    value = getattr(network, field)
    if value is None or isinstance(key, bool):
        return False
    if field not in FIELDS.STRUCTURED:
        return value == key
    if isinstance(value, bytes) and isinstance(key, (bytearray, memoryview, list, tuple)):
        try:
            return value == bytes(key)
        except (TypeError, ValueError):
            return False
    if isinstance(value, tuple) and isinstance(key, list):
        return value == tuple(key)
    return value == key


def _well_known(name: str):
    """Read-only property resolving a pre-registered network by name or alias"""
    return property(lambda self: self.resolve(name, (FIELDS.NAME, FIELDS.ALIAS)), doc=f"The {name} network")


class NetworkRegistry:
    """
    Keeps registered networks in registration order, plus a secondary index mapping every scalar field value
    (name, alias, prefixes, xkey versions, port) to its network.

    Index collisions are last-write-wins unless strict=True, in which case the colliding registration is
    rejected with NetworkCollisionError. Input records are not validated.
    """

    def __init__(self, networks: Iterable[Mapping] = (), strict: bool = False):
        self.strict = strict
        self._networks: list[Network] = []
        self._index: dict[Any, Network] = {}
        self._lock = threading.RLock()
        self.register_all(networks)

    # --- CORE --- #

    def register(self, data: Mapping) -> Network:
        """
        Create a Network from the given record, index its scalar values and append it to the registry.
        """
        network = Network.from_dict(data)
        with self._lock:
            if self.strict:
                self._check_collisions(network)

            for field, value in network.scalar_items():
                previous = self._index.get(value)
                if previous is not None and previous is not network:
                    logger.debug(f"{field}={value!r} of network {network} overwrites index entry for {previous}")
                self._index[value] = network

            self._networks.append(network)
        logger.debug(f"Registered network {network}")
        return network

    def unregister(self, network: Network) -> None:
        """
        Remove every occurrence of the network and purge its index entries. Unknown networks are ignored.
        """
        with self._lock:
            if not any(n is network for n in self._networks):
                return
            self._networks = [n for n in self._networks if n is not network]
            for key in [k for k, v in self._index.items() if v is network]:
                del self._index[key]
        logger.info(f"Unregistered network {network}")

    def resolve(self, key: Any, fields: Optional[FieldNames] = None) -> Optional[Network]:
        """
        Retrieve the network associated with the given key.

        A registered Network is returned as-is. If fields is given (a field name or a list of them) the first
        network in registration order with any of those fields equal to key is returned. Otherwise key is looked
        up in the index of scalar values. Returns None when nothing matches.
        """
        with self._lock:
            if self._is_registered(key):
                return key

            if fields is not None:
                names = self._field_names(fields)
                for network in self._networks:
                    if any(_matches(network, f, key) for f in names):
                        return network
                return None

            # True and False would otherwise hit the 1 and 0 index entries
            if isinstance(key, bool):
                return None
            try:
                return self._index.get(key)
            except TypeError:
                # Unhashable keys (lists, dicts) are never indexed
                return None

    # --- CONVENIENCE --- #

    def register_all(self, records: Iterable[Mapping]) -> list[Network]:
        """Register each record in order"""
        return [self.register(r) for r in records]

    def load(self, filepath) -> list[Network]:
        """Register every network defined in a JSON config file"""
        networks = self.register_all(load_network_config(filepath))
        logger.info(f"Loaded {len(networks)} network(s) from {filepath}")
        return networks

    def by_magic(self, magic: Union[bytes, int]) -> Optional[Network]:
        """Find the network whose handshake magic matches the given bytes or 32-bit integer"""
        if isinstance(magic, int) and not isinstance(magic, bool):
            if not 0 <= magic <= NETWORK.MAX_U32:
                return None
            magic = integer_as_buffer(magic)
        return self.resolve(magic, FIELDS.NETWORK_MAGIC)

    def by_xkey_version(self, version: Union[bytes, int]) -> Optional[Network]:
        """Find the network using the given extended key version, public or private"""
        if isinstance(version, (bytes, bytearray)):
            version = int.from_bytes(version, "big")
        return self.resolve(version, FIELDS.XKEYS)

    def values(self, field: str) -> list:
        """Return the value of the given field for every network, in registration order"""
        field = normalize_field(field)
        with self._lock:
            return [getattr(n, field, None) for n in self._networks]

    @property
    def networks(self) -> tuple:
        with self._lock:
            return tuple(self._networks)

    # --- WELL-KNOWN NETWORKS --- #

    livenet = _well_known("livenet")
    mainnet = _well_known("mainnet")
    testnet = _well_known("testnet")
    dogecoin = _well_known("dogecoin")
    litecoin = _well_known("litecoin")
    dash = _well_known("dash")
    peercoin = _well_known("peercoin")
    namecoin = _well_known("namecoin")
    digibyte = _well_known("digibyte")
    blackcoin = _well_known("blackcoin")
    bitcoindark = _well_known("bitcoindark")
    default_network = _well_known(NETWORK.DEFAULT_NAME)

    # --- HELPERS --- #

    def _is_registered(self, obj: Any) -> bool:
        return isinstance(obj, Network) and any(n is obj for n in self._networks)

    def _check_collisions(self, network: Network) -> None:
        for field, value in network.scalar_items():
            owner = self._index.get(value)
            if owner is not None:
                raise NetworkCollisionError(
                    f"{field}={value!r} of network {network} is already indexed for network {owner}")

    @staticmethod
    def _field_names(fields: FieldNames) -> tuple:
        if isinstance(fields, str):
            fields = (fields,)
        names = (normalize_field(f) for f in fields if isinstance(f, str))
        return tuple(f for f in names if f in FIELDS.ALL)

    def __len__(self) -> int:
        with self._lock:
            return len(self._networks)

    def __iter__(self) -> Iterator[Network]:
        return iter(self.networks)

    def __contains__(self, network: Any) -> bool:
        with self._lock:
            return self._is_registered(network)
