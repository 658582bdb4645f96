"""
Loading network definitions from JSON

A config file holds either a list of network records or an object mapping network names to records. The 32-bit
values (network_magic, xpubkey, xprivkey) may be written as integers or hex strings.
"""
import json
from pathlib import Path
from typing import Union

from bitnets.core.exceptions import NetworkConfigError
from bitnets.core.formats import FIELDS, NETWORK
from bitnets.network.network import normalize_record

__all__ = ["parse_network_config", "load_network_config"]

HEX_FIELDS = (FIELDS.NETWORK_MAGIC, FIELDS.XPUBKEY, FIELDS.XPRIVKEY)


def _to_int(value, label: str) -> int:
    if isinstance(value, bool):
        raise NetworkConfigError(f"{label}: expected integer or hex string, received bool")
    if isinstance(value, str):
        try:
            value = int(value, 16)
        except ValueError as e:
            raise NetworkConfigError(f"{label}: invalid hex string {value!r}") from e
    if not isinstance(value, int):
        raise NetworkConfigError(f"{label}: expected integer or hex string, received {type(value).__name__}")
    if not 0 <= value <= NETWORK.MAX_U32:
        raise NetworkConfigError(f"{label}: {value:#x} out of range for a 32-bit value")
    return value


def _parse_record(raw, position: str) -> dict:
    if not isinstance(raw, dict):
        raise NetworkConfigError(f"Network record {position} must be an object")

    record = normalize_record(raw)
    missing = [f for f in FIELDS.ALL if record[f] is None]
    if missing:
        raise NetworkConfigError(f"Network record {position} missing field(s): {', '.join(missing)}")

    for field in HEX_FIELDS:
        record[field] = _to_int(record[field], f"{position}.{field}")

    port = record[FIELDS.PORT]
    if isinstance(port, bool) or not isinstance(port, int) or not 0 <= port <= NETWORK.MAX_PORT:
        raise NetworkConfigError(f"{position}.{FIELDS.PORT}: expected an integer in 0..{NETWORK.MAX_PORT}")

    seeds = record[FIELDS.DNS_SEEDS]
    if not isinstance(seeds, list) or not all(isinstance(s, str) for s in seeds):
        raise NetworkConfigError(f"{position}.{FIELDS.DNS_SEEDS}: expected a list of hostnames")
    return record


def parse_network_config(text: str) -> list[dict]:
    """
    Parse a JSON document of network definitions into registration records
    """
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise NetworkConfigError(f"Invalid network config JSON: {e}") from e

    if isinstance(data, dict):
        records = []
        for name, raw in data.items():
            if isinstance(raw, dict):
                raw = {FIELDS.NAME: name, **raw}
            records.append(_parse_record(raw, repr(name)))
        return records
    if isinstance(data, list):
        return [_parse_record(raw, f"#{i}") for i, raw in enumerate(data)]
    raise NetworkConfigError("Network config must be a list or an object of network records")


def load_network_config(filepath: Union[str, Path]) -> list[dict]:
    """Read and parse a network definition file"""
    try:
        with open(filepath, "r") as f:
            text = f.read()
    except OSError as e:
        raise NetworkConfigError(f"Unable to read network config {filepath}: {e}") from e
    return parse_network_config(text)
