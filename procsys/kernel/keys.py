"""
Key management limits under `/proc/sys/kernel/keys`.

See keyrings(7).
"""
from typing import Optional

from ..reader import RawReader, parse_u32, read_value

KEYS_ROOT = "/proc/sys/kernel/keys"


def _read(name: str, reader: Optional[RawReader]) -> int:
    return read_value(f"{KEYS_ROOT}/{name}", parse_u32, reader)


def maxkeys(reader: Optional[RawReader] = None) -> int:
    "Maximum number of keys that a non-root user may own."
    return _read("maxkeys", reader)


def maxbytes(reader: Optional[RawReader] = None) -> int:
    "Maximum number of bytes of data that a non-root user can hold in the payloads of their keys."
    return _read("maxbytes", reader)


def root_maxkeys(reader: Optional[RawReader] = None) -> int:
    return _read("root_maxkeys", reader)


def root_maxbytes(reader: Optional[RawReader] = None) -> int:
    return _read("root_maxbytes", reader)


def gc_delay(reader: Optional[RawReader] = None) -> int:
    "Seconds before a revoked or expired key is garbage collected."
    return _read("gc_delay", reader)


def persistent_keyring_expiry(reader: Optional[RawReader] = None) -> int:
    "Seconds a persistent keyring is kept after its last use."
    return _read("persistent_keyring_expiry", reader)
