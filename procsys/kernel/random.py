"""
Kernel random number generator values under `/proc/sys/kernel/random`.
"""
from typing import Optional
from uuid import UUID

from ..reader import RawReader, parse_u32, parse_uuid, read_value

RANDOM_ROOT = "/proc/sys/kernel/random"


def entropy_avail(reader: Optional[RawReader] = None) -> int:
    "Number of bits of entropy currently available in the input pool."
    return read_value(f"{RANDOM_ROOT}/entropy_avail", parse_u32, reader)


def poolsize(reader: Optional[RawReader] = None) -> int:
    "Size of the entropy pool, in bits."
    return read_value(f"{RANDOM_ROOT}/poolsize", parse_u32, reader)


def write_wakeup_threshold(reader: Optional[RawReader] = None) -> int:
    return read_value(f"{RANDOM_ROOT}/write_wakeup_threshold", parse_u32, reader)


def urandom_min_reseed_secs(reader: Optional[RawReader] = None) -> int:
    return read_value(f"{RANDOM_ROOT}/urandom_min_reseed_secs", parse_u32, reader)


def boot_id(reader: Optional[RawReader] = None) -> UUID:
    "Random UUID generated once per boot."
    return read_value(f"{RANDOM_ROOT}/boot_id", parse_uuid, reader)


def uuid(reader: Optional[RawReader] = None) -> UUID:
    "A new random UUID on every read."
    return read_value(f"{RANDOM_ROOT}/uuid", parse_uuid, reader)
