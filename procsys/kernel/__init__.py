"""
Global kernel info and tuning values under `/proc/sys/kernel`.
"""
import re
from dataclasses import dataclass
from typing import List, Optional

from .._private.util.integer import check_unsigned, parse_unsigned
from ..error import InvalidComponent, InvalidField, MissingComponent, MissingField, VersionComponent
from ..reader import RawReader, parse_i32, read_value
from . import keys, random  # noqa: F401

__all__ = [
    "Version",
    "SemaphoreLimits",
    "pid_max",
]

OSRELEASE_PATH = "/proc/sys/kernel/osrelease"
PID_MAX_PATH = "/proc/sys/kernel/pid_max"
SEM_PATH = "/proc/sys/kernel/sem"

_NOT_VERSION_CHAR = re.compile(r"[^0-9.]")
# `str.split()` would also split on non-ASCII whitespace.
_ASCII_WHITESPACE = re.compile(r"[ \t\n\r\f]+")


def _strip_build_suffix(s: str) -> str:
    "Drop everything from the first character that is neither an ASCII digit nor `.`."
    m = _NOT_VERSION_CHAR.search(s)
    if m is None:
        return s
    return s[: m.start()]


def _split_components(s: str) -> List[str]:
    return s.split(".")


# Kernel version, in major.minor.patch form.
@dataclass(frozen=True, eq=True, order=True)
class Version:
    major: int
    minor: int
    patch: int

    def __post_init__(self) -> None:
        check_unsigned("major", self.major, 8)
        check_unsigned("minor", self.minor, 8)
        check_unsigned("patch", self.patch, 8)

    @classmethod
    def parse(cls, s: str) -> "Version":
        """
        Parse a kernel release string such as `3.16.0-6-amd64`.

        Anything from the first character other than a digit or `.` is ignored,
        as are components after the third.

        Exceptions:
            Raise :class:`~procsys.error.MissingComponent` if fewer than three components are present.
            Raise :class:`~procsys.error.InvalidComponent` if a component is empty or does not fit in 0..255.
        """
        parts = _split_components(_strip_build_suffix(s))

        components = [VersionComponent.MAJOR, VersionComponent.MINOR, VersionComponent.PATCH]
        for i, component in enumerate(components):
            if i >= len(parts):
                raise MissingComponent(component)

        values: List[int] = []
        for component, text in zip(components, parts):
            x = parse_unsigned(text, 8)
            if x is None:
                raise InvalidComponent(component, text)
            values.append(x)

        (major, minor, patch) = values
        return cls(major, minor, patch)

    @classmethod
    def current(cls, reader: Optional[RawReader] = None) -> "Version":
        "Version of the running kernel, from `/proc/sys/kernel/osrelease`."
        return read_value(OSRELEASE_PATH, cls.parse, reader)

    def compare(self, other: "Version") -> int:
        "-1, 0 or 1 as `self` is older than, equal to or newer than `other`."
        if self < other:
            return -1
        if self > other:
            return 1
        return 0

    def to_str(self) -> str:
        return f"{self.major}.{self.minor}.{self.patch}"

    def __str__(self) -> str:
        return self.to_str()


@dataclass(frozen=True, eq=True)
class SemaphoreLimits:
    """
    System-wide System V semaphore limits, from `/proc/sys/kernel/sem`.
    """

    # The maximum semaphores per semaphore set (SEMMSL).
    max_per_set: int
    # A system-wide limit on the number of semaphores in all semaphore sets (SEMMNS).
    max_total: int
    # The maximum number of operations that may be specified in a semop(2) call (SEMOPM).
    max_ops_per_call: int
    # A system-wide limit on the maximum number of semaphore identifiers (SEMMNI).
    max_set_identifiers: int

    def __post_init__(self) -> None:
        check_unsigned("max_per_set", self.max_per_set, 64)
        check_unsigned("max_total", self.max_total, 64)
        check_unsigned("max_ops_per_call", self.max_ops_per_call, 64)
        check_unsigned("max_set_identifiers", self.max_set_identifiers, 64)

    @classmethod
    def parse(cls, s: str) -> "SemaphoreLimits":
        """
        Parse a line of four whitespace separated unsigned integers.

        Exceptions:
            Raise :class:`~procsys.error.MissingField` for the first absent field (1-based).
            Raise :class:`~procsys.error.InvalidField` for the first field that is not a u64.
        """
        tokens = [t for t in _ASCII_WHITESPACE.split(s) if t != ""]

        for index in range(1, 5):
            if index > len(tokens):
                raise MissingField(index)

        values: List[int] = []
        for index, text in enumerate(tokens[:4], start=1):
            x = parse_unsigned(text, 64)
            if x is None:
                raise InvalidField(index, text)
            values.append(x)

        (max_per_set, max_total, max_ops_per_call, max_set_identifiers) = values
        return cls(max_per_set, max_total, max_ops_per_call, max_set_identifiers)

    @classmethod
    def current(cls, reader: Optional[RawReader] = None) -> "SemaphoreLimits":
        return read_value(SEM_PATH, cls.parse, reader)

    def to_str(self) -> str:
        "Same layout as the kernel prints: tab separated."
        return f"{self.max_per_set}\t{self.max_total}\t{self.max_ops_per_call}\t{self.max_set_identifiers}"


def pid_max(reader: Optional[RawReader] = None) -> int:
    """
    Maximum process ID number, from `/proc/sys/kernel/pid_max`.

    Example:

        >>> pid = 42
        >>> pid <= pid_max()
        True
    """
    return read_value(PID_MAX_PATH, parse_i32, reader)
