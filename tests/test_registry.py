"""
Tests for the NetworkRegistry: register, unregister and resolve
"""
import logging
import threading

import pytest

from bitnets.core import NetworkCollisionError
from bitnets.network import NetworkRegistry, Network
from tests.utility import testcoin_record, getrand_record

MAGIC = [0xaa, 0xbb, 0xcc, 0xdd]


def test_testcoin_scenario(registry):
    """
    Register a single network and resolve it through each kind of key
    """
    testcoin = registry.register(testcoin_record())

    assert isinstance(testcoin, Network)
    assert registry.resolve("testcoin") is testcoin, "Lookup by name failed"
    assert registry.resolve(0x1a, "pubkeyhash") is testcoin, "Restricted lookup by pubkeyhash failed"
    assert registry.resolve(9000) is testcoin, "Lookup by port failed"

    # Magic bytes are never indexed
    assert registry.resolve(MAGIC) is None
    assert registry.resolve(bytes(MAGIC)) is None
    assert registry.resolve(MAGIC, "networkMagic") is testcoin
    assert registry.resolve(bytes(MAGIC), "network_magic") is testcoin
    assert registry.resolve(bytearray(MAGIC), ["network_magic"]) is testcoin


def test_resolve_every_scalar(registry):
    testcoin = registry.register(testcoin_record())
    for field, value in testcoin.scalar_items():
        assert registry.resolve(value) is testcoin, f"Unrestricted lookup by {field} failed"
        assert registry.resolve(value, field) is testcoin, f"Restricted lookup by {field} failed"


def test_identity_passthrough(known_registry):
    for network in known_registry:
        assert known_registry.resolve(network) is network
        assert known_registry.resolve(network, "port") is network


def test_foreign_network_not_resolved(registry):
    foreign = NetworkRegistry().register(testcoin_record())
    assert registry.resolve(foreign) is None
    assert foreign not in registry


def test_restricted_fields(registry):
    testcoin = registry.register(testcoin_record())

    assert registry.resolve(9000, ["pubkeyhash", "port"]) is testcoin
    assert registry.resolve(9000, ("pubkeyhash", "scripthash")) is None
    assert registry.resolve("testcoin", "bogus_field") is None
    assert registry.resolve(0xaabbccdd, "magic_int") is None, "Properties are not descriptor fields"
    assert registry.resolve(Network, "__class__") is None
    assert registry.resolve(testcoin.to_dict, "to_dict") is None
    assert registry.resolve(9000, ["__class__", "port"]) is testcoin

    # dns seeds are only reachable through a restricted lookup
    assert registry.resolve("seed.testcoin.example") is None
    assert registry.resolve(["seed.testcoin.example"]) is None
    assert registry.resolve(["seed.testcoin.example"], "dnsSeeds") is testcoin
    assert registry.resolve(("seed.testcoin.example",), "dns_seeds") is testcoin


@pytest.mark.parametrize("key", [None, [], {}, {"name": "testcoin"}, [0x1a], b"", object()])
def test_resolve_never_raises(registry, key):
    registry.register(testcoin_record())
    assert registry.resolve(key) is None
    assert registry.resolve(key, "network_magic") is None


def test_restricted_scan_order(registry):
    """
    Restricted lookups return the first registered network with a matching value
    """
    first = registry.register(getrand_record(1))
    second = registry.register({**getrand_record(2), "port": first.port})

    assert registry.resolve(first.port, "port") is first
    assert registry.resolve(second.name, "name") is second


def test_overwrite_on_collision(registry):
    """
    A later registration reusing an indexed value takes over that index entry
    """
    first = registry.register(getrand_record(1))
    second = registry.register({**getrand_record(2), "port": first.port, "pubkeyhash": first.pubkeyhash})

    assert registry.resolve(first.port) is second, "Index should hold the last writer"
    assert registry.resolve(first.pubkeyhash) is second
    assert registry.resolve(first.name) is first, "Non-colliding values keep their owner"

    # Removing the last writer does not restore the earlier owner
    registry.unregister(second)
    assert registry.resolve(first.port) is None
    assert registry.resolve(first.port, "port") is first


def test_collision_logged(registry, caplog):
    caplog.set_level(logging.DEBUG, logger="bitnets.network.registry")
    registry.register(getrand_record(1))
    registry.register({**getrand_record(2), "port": 40001})
    assert "overwrites index entry" in caplog.text


def test_strict_rejects_collision():
    registry = NetworkRegistry(strict=True)
    testcoin = registry.register(testcoin_record())

    with pytest.raises(NetworkCollisionError):
        registry.register(testcoin_record(name="othercoin", alias="othercoin-alias"))

    # Rejected registration leaves no trace
    assert len(registry) == 1
    assert registry.resolve("othercoin") is None
    assert registry.resolve(9000) is testcoin

    # name == alias within a single network is not a collision
    same = registry.register({**getrand_record(5), "alias": "coin5"})
    assert registry.resolve("coin5") is same


def test_unregister(registry):
    keep = registry.register(getrand_record(1))
    testcoin = registry.register(testcoin_record())
    assert len(registry) == 2

    registry.unregister(testcoin)

    assert len(registry) == 1
    assert testcoin not in registry
    assert keep in registry
    for field, value in testcoin.scalar_items():
        assert registry.resolve(value) is None, f"{field} still resolves after unregister"
        assert registry.resolve(value, field) is None
    assert registry.resolve(MAGIC, "network_magic") is None
    assert registry.resolve(testcoin) is None
    assert registry.resolve(keep.name) is keep


def test_unregister_unknown_is_noop(registry):
    testcoin = registry.register(testcoin_record())
    registry.unregister(testcoin)
    registry.unregister(testcoin)
    registry.unregister(NetworkRegistry().register(getrand_record(1)))
    assert len(registry) == 0


def test_no_range_validation(registry):
    network = registry.register(testcoin_record(pubkeyhash=0x1ff, port=-1))
    assert registry.resolve(0x1ff) is network
    assert registry.resolve(-1, "port") is network


def test_missing_fields_not_indexed(registry):
    partial = registry.register({"name": "partial"})
    assert registry.resolve("partial") is partial
    assert registry.resolve(None) is None
    assert registry.resolve(None, "alias") is None


def test_collection_helpers(registry):
    records = [getrand_record(n) for n in range(3)]
    networks = registry.register_all(records)

    assert list(registry) == networks, "Iteration should follow registration order"
    assert registry.networks == tuple(networks)
    assert registry.values("port") == [40000, 40001, 40002]
    assert registry.values("networkMagic") == [n.network_magic for n in networks]


def test_concurrent_register_and_resolve(registry):
    """
    Threads registering and resolving at once leave every network reachable
    """
    errors = []

    def worker(offset):
        for n in range(offset, offset + 25):
            network = registry.register(getrand_record(n))
            if registry.resolve(network.name) is not network:
                errors.append(n)

    threads = [threading.Thread(target=worker, args=(i * 25,)) for i in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert not errors
    assert len(registry) == 200
    assert all(registry.resolve(f"coin{n}") is not None for n in range(200))


def test_bool_keys_do_not_match_ints(known_registry):
    """
    livenet's pubkeyhash is 0, but False is not a network identifier
    """
    assert known_registry.resolve(0) is known_registry.livenet
    assert known_registry.resolve(False) is None
    assert known_registry.resolve(False, "pubkeyhash") is None
    assert known_registry.resolve(True) is None
