"""
The Network class: the immutable set of constants identifying one blockchain network

-------------------------------------------------------------------------
|   Name            | Data type     | Formatted             | Size      |
-------------------------------------------------------------------------
|   name            | str           | canonical identifier  | var       |
|   alias           | str           | secondary identifier  | var       |
|   pubkeyhash      | int           | address prefix        | 1         |
|   privatekey      | int           | WIF prefix            | 1         |
|   scripthash      | int           | p2sh address prefix   | 1         |
|   xpubkey         | int           | xpub version          | 4         |
|   xprivkey        | int           | xprv version          | 4         |
|   network_magic   | bytes         | big-endian            | 4         |
|   port            | int           | default peer port     | 2         |
|   dns_seeds       | tuple[str]    | bootstrap hostnames   | var       |
-------------------------------------------------------------------------
"""
import json
from dataclasses import dataclass
from typing import Mapping, Optional

from bitnets.core.formats import FIELDS, NETWORK
from bitnets.data.encoding import integer_as_buffer, buffer_as_integer, to_big_bytes

__all__ = ["Network", "normalize_record", "normalize_field"]


def normalize_field(field: str) -> str:
    """Map an accepted alternate spelling (e.g. networkMagic) to the descriptor field name"""
    return FIELDS.ALIASES.get(field, field)


def normalize_record(data: Mapping) -> dict:
    """
    Returns a dict keyed by descriptor field names. Unknown keys are dropped, missing keys are None.
    """
    record = {normalize_field(k): v for k, v in data.items()}
    return {f: record.get(f) for f in FIELDS.ALL}


@dataclass(frozen=True, eq=False)
class Network:
    """
    A network is a fixed map of the version numbers used by one chain.

    Instances are created by NetworkRegistry.register and compare by identity: two networks built from the same
    data are still two registry entries.
    """
    name: Optional[str]
    alias: Optional[str]
    pubkeyhash: Optional[int]
    privatekey: Optional[int]
    scripthash: Optional[int]
    xpubkey: Optional[int]
    xprivkey: Optional[int]
    network_magic: Optional[bytes]
    port: Optional[int]
    dns_seeds: tuple = ()

    @classmethod
    def from_dict(cls, data: Mapping) -> "Network":
        """
        Build a Network from a registration record. network_magic is given as a 32-bit integer.
        """
        record = normalize_record(data)
        magic = record[FIELDS.NETWORK_MAGIC]
        record[FIELDS.NETWORK_MAGIC] = integer_as_buffer(magic) if magic is not None else None
        record[FIELDS.DNS_SEEDS] = tuple(record[FIELDS.DNS_SEEDS] or ())
        return cls(**record)

    @property
    def magic_int(self) -> Optional[int]:
        return buffer_as_integer(self.network_magic) if self.network_magic is not None else None

    @property
    def xpubkey_bytes(self) -> Optional[bytes]:
        return to_big_bytes(self.xpubkey, NETWORK.XKEY_VERSION_BYTES) if self.xpubkey is not None else None

    @property
    def xprivkey_bytes(self) -> Optional[bytes]:
        return to_big_bytes(self.xprivkey, NETWORK.XKEY_VERSION_BYTES) if self.xprivkey is not None else None

    def scalar_items(self):
        """Yield (field, value) for every indexed field that holds a value"""
        for field in FIELDS.INDEXED:
            value = getattr(self, field)
            if value is not None:
                yield field, value

    def to_dict(self) -> dict:
        """Return a registration record for this network"""
        return {
            FIELDS.NAME: self.name,
            FIELDS.ALIAS: self.alias,
            FIELDS.PUBKEYHASH: self.pubkeyhash,
            FIELDS.PRIVATEKEY: self.privatekey,
            FIELDS.SCRIPTHASH: self.scripthash,
            FIELDS.XPUBKEY: self.xpubkey,
            FIELDS.XPRIVKEY: self.xprivkey,
            FIELDS.NETWORK_MAGIC: self.magic_int,
            FIELDS.PORT: self.port,
            FIELDS.DNS_SEEDS: list(self.dns_seeds),
        }

    def to_json(self) -> str:
        """Return a pretty-printed JSON string of the network"""
        return json.dumps(self.to_dict(), indent=2)

    def __str__(self) -> str:
        return str(self.name)

    def __repr__(self) -> str:
        magic = self.network_magic.hex() if self.network_magic is not None else None
        return f"Network(name={self.name!r}, alias={self.alias!r}, network_magic={magic!r}, port={self.port!r})"
