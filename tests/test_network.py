"""
Tests for the Network descriptor
"""
import json
from dataclasses import FrozenInstanceError

import pytest

from bitnets.network import Network
from tests.utility import testcoin_record


def test_from_dict():
    network = Network.from_dict(testcoin_record())

    assert network.name == "testcoin"
    assert network.pubkeyhash == 0x1a
    assert network.network_magic == bytes([0xaa, 0xbb, 0xcc, 0xdd]), "network_magic should be 4 big-endian bytes"
    assert network.dns_seeds == ("seed.testcoin.example",)
    assert network.magic_int == 0xaabbccdd
    assert network.xpubkey_bytes == bytes.fromhex("01020304")
    assert network.xprivkey_bytes == bytes.fromhex("05060708")


def test_missing_fields_are_none():
    network = Network.from_dict({"name": "partial"})
    assert network.alias is None
    assert network.network_magic is None
    assert network.magic_int is None
    assert network.dns_seeds == ()
    assert list(network.scalar_items()) == [("name", "partial")]


@pytest.mark.parametrize("field", ["name", "alias", "pubkeyhash", "port", "network_magic", "dns_seeds"])
def test_immutable(field):
    network = Network.from_dict(testcoin_record())
    with pytest.raises(FrozenInstanceError):
        setattr(network, field, None)


def test_dns_seeds_not_mutable():
    seeds = ["seed.testcoin.example"]
    network = Network.from_dict(testcoin_record(dnsSeeds=seeds))
    seeds.append("other.example")

    assert network.dns_seeds == ("seed.testcoin.example",), "Mutating the input list must not affect the network"
    with pytest.raises(AttributeError):
        network.dns_seeds.append("other.example")


def test_identity_equality():
    n1 = Network.from_dict(testcoin_record())
    n2 = Network.from_dict(testcoin_record())
    assert n1 != n2
    assert n1 == n1
    assert len({n1, n2}) == 2


def test_str_and_json():
    network = Network.from_dict(testcoin_record())
    assert str(network) == "testcoin"
    assert "aabbccdd" in repr(network)

    recovered = json.loads(network.to_json())
    assert recovered["network_magic"] == 0xaabbccdd
    assert recovered["dns_seeds"] == ["seed.testcoin.example"]

    # to_dict output is a valid registration record
    copy = Network.from_dict(network.to_dict())
    assert copy.to_dict() == network.to_dict()
