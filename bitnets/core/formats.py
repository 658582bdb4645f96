"""
The reference formats for network descriptors
"""
from typing import Final

__all__ = ["FIELDS", "NETWORK", "LOG"]


class FIELDS:
    """
    Descriptor field names, in declaration order.

    INDEXED fields hold plain scalars and go into the registry's secondary index. STRUCTURED fields hold byte
    sequences or lists and can only be matched by naming the field in a restricted lookup.
    """
    NAME: Final[str] = "name"
    ALIAS: Final[str] = "alias"
    PUBKEYHASH: Final[str] = "pubkeyhash"
    PRIVATEKEY: Final[str] = "privatekey"
    SCRIPTHASH: Final[str] = "scripthash"
    XPUBKEY: Final[str] = "xpubkey"
    XPRIVKEY: Final[str] = "xprivkey"
    NETWORK_MAGIC: Final[str] = "network_magic"
    PORT: Final[str] = "port"
    DNS_SEEDS: Final[str] = "dns_seeds"

    ALL: Final[tuple] = (NAME, ALIAS, PUBKEYHASH, PRIVATEKEY, SCRIPTHASH, XPUBKEY, XPRIVKEY, NETWORK_MAGIC, PORT,
                         DNS_SEEDS)
    INDEXED: Final[tuple] = (NAME, ALIAS, PUBKEYHASH, PRIVATEKEY, SCRIPTHASH, XPUBKEY, XPRIVKEY, PORT)
    STRUCTURED: Final[tuple] = (NETWORK_MAGIC, DNS_SEEDS)
    XKEYS: Final[tuple] = (XPUBKEY, XPRIVKEY)

    # Alternate spellings accepted on input
    ALIASES: Final[dict] = {
        "networkMagic": NETWORK_MAGIC,
        "dnsSeeds": DNS_SEEDS,
    }


class NETWORK:
    """
    Byte sizes and limits for network constants
    """
    MAGIC_BYTES: Final[int] = 4
    XKEY_VERSION_BYTES: Final[int] = 4
    MAX_U32: Final[int] = 0xffffffff
    MAX_PORT: Final[int] = 0xffff
    DEFAULT_NAME: Final[str] = "livenet"


class LOG:
    """
    Logging defaults
    """
    LEVEL: Final[str] = "INFO"
    FORMAT: Final[str] = '%(asctime)s [%(name)s] [%(levelname)s]: %(message)s'
