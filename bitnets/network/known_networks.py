"""
Registration records for the well-known networks, in registration order
"""
from bitnets.network.registry import NetworkRegistry

__all__ = ["KNOWN_NETWORKS", "default_registry"]

LIVENET = {
    "name": "livenet",
    "alias": "mainnet",
    "pubkeyhash": 0x00,
    "privatekey": 0x80,
    "scripthash": 0x05,
    "xpubkey": 0x0488b21e,
    "xprivkey": 0x0488ade4,
    "network_magic": 0xf9beb4d9,
    "port": 8333,
    "dns_seeds": [
        "seed.bitcoin.sipa.be",
        "dnsseed.bluematt.me",
        "dnsseed.bitcoin.dashjr.org",
        "seed.bitcoinstats.com",
        "seed.bitnodes.io",
        "bitseed.xf2.org",
    ],
}

TESTNET = {
    "name": "testnet",
    "alias": "testnet",
    "pubkeyhash": 0x6f,
    "privatekey": 0xef,
    "scripthash": 0xc4,
    "xpubkey": 0x043587cf,
    "xprivkey": 0x04358394,
    "network_magic": 0x0b110907,
    "port": 18333,
    "dns_seeds": [
        "testnet-seed.bitcoin.petertodd.org",
        "testnet-seed.bluematt.me",
        "testnet-seed.alexykot.me",
        "testnet-seed.bitcoin.schildbach.de",
    ],
}

# --- ALTCOINS --- #

DOGECOIN = {
    "name": "dogecoin",
    "alias": "dogecoin",
    "pubkeyhash": 0x1e,
    "privatekey": 0x9e,
    "scripthash": 0x22,
    "xpubkey": 0x0488c42e,
    "xprivkey": 0x0488e1f4,
    "network_magic": 0xc0c0c0c0,
    "port": 22556,
    "dns_seeds": [
        "seed.dogecoin.com",
        "seed.multidoge.org",
        "seed2.multidoge.org",
        "seed.doger.dogecoin.com",
    ],
}

LITECOIN = {
    "name": "litecoin",
    "alias": "litecoin",
    "pubkeyhash": 0x30,
    "privatekey": 0xb0,
    "scripthash": 0x05,
    "xpubkey": 0x0488b21e,
    "xprivkey": 0x0488ade4,
    "network_magic": 0xfbc0b6db,
    "port": 9333,
    "dns_seeds": [
        "dnsseed.litecointools.com",
        "dnsseed.litecoinpool.org",
        "dnsseed.ltc.xurious.com",
        "dnsseed.koin-project.com",
        "dnsseed.weminemnc.com",
    ],
}

DASH = {
    "name": "dash",
    "alias": "dash",
    "pubkeyhash": 0x4c,
    "privatekey": 0xcc,
    "scripthash": 0x16,
    "xpubkey": 0x02fe52f8,
    "xprivkey": 0x02fe52cc,
    "network_magic": 0xbf0c6bbd,
    "port": 9999,
    "dns_seeds": [
        "dnsseed.darkcoin.io",
        "dnsseed.darkcoin.qa",
        "dnsseed.ltc.xurious.com",
        "dnsseed.masternode.io",
        "dnsseed.dashpay.io",
    ],
}

PEERCOIN = {
    "name": "peercoin",
    "alias": "peercoin",
    "pubkeyhash": 0x37,
    "privatekey": 0xb7,
    "scripthash": 0x05,
    "xpubkey": 0x0488b21e,
    "xprivkey": 0x0488ade4,
    "network_magic": 0xbf0c6bbd,
    "port": 9901,
    "dns_seeds": [
        "seed.ppcoin.net",
        "seedppc.ppcoin.net",
        "ppcseed.ns.7server.net",
        "dnsseed.ppc.altcointech.net",
        "seed.diandianbi.org",
        "tnseed.ppcoin.net",
        "tnseedppc.ppcoin.net",
    ],
}

NAMECOIN = {
    "name": "namecoin",
    "alias": "namecoin",
    "pubkeyhash": 0x34,
    "privatekey": 0xb4,
    "scripthash": 0x13,
    "xpubkey": 0x0488b21e,
    "xprivkey": 0x0488ade4,
    "network_magic": 0xf9beb4fe,
    "port": 8334,
    "dns_seeds": [
        "namecoindnsseed.digi-masters.com",
        "namecoindnsseed.digi-masters.uk",
        "seed.namecoin.domob.eu",
        "nmc.seed.quisquis.de",
        "dnsseed.namecoin.webbtc.com",
    ],
}

DIGIBYTE = {
    "name": "digibyte",
    "alias": "digibyte",
    "pubkeyhash": 0x1e,
    "privatekey": 0x80,
    "scripthash": 0x05,
    "xpubkey": 0x0488b21e,
    "xprivkey": 0x0488ade4,
    "network_magic": 0xfac3b6da,
    "port": 12024,
    "dns_seeds": [
        "74.208.230.160",
        "216.250.125.121",
        "195.130.216.149",
        "96.18.212.86",
        "188.226.239.21",
        "54.201.183.106",
        "213.81.142.62",
    ],
}

BLACKCOIN = {
    "name": "blackcoin",
    "alias": "blackcoin",
    "pubkeyhash": 0x19,
    "privatekey": 0x99,
    "scripthash": 0x85,
    "xpubkey": 0x0488b21e,
    "xprivkey": 0x0488ade4,
    "network_magic": 0x70352205,
    "port": 15714,
    "dns_seeds": [
        "seed.blackcoin.co",
        "bcseed.syllabear.us.to",
    ],
}

BITCOINDARK = {
    "name": "bitcoindark",
    "alias": "bitcoindark",
    "pubkeyhash": 0x3c,
    "privatekey": 0xbc,
    "scripthash": 0x85,
    "xpubkey": 0x0488b21e,
    "xprivkey": 0x0488ade4,
    "network_magic": 0xe4c2d8e6,
    "port": 14631,
    "dns_seeds": [],  # No live seeds known
}

KNOWN_NETWORKS = (LIVENET, TESTNET, DOGECOIN, LITECOIN, DASH, PEERCOIN, NAMECOIN, DIGIBYTE, BLACKCOIN, BITCOINDARK)


def default_registry(strict: bool = False) -> NetworkRegistry:
    """Return a new registry holding the well-known networks"""
    return NetworkRegistry(KNOWN_NETWORKS, strict=strict)
