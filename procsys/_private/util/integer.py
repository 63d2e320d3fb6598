import re
from typing import Optional

_UNSIGNED = re.compile(r"\+?[0-9]+")
_SIGNED = re.compile(r"[+-]?[0-9]+")


def parse_unsigned(s: str, bits: int) -> Optional[int]:
    "ASCII decimal digits with an optional `+`, no underscores. `None` if malformed or out of range."
    if _UNSIGNED.fullmatch(s) is None:
        return None
    x = int(s)
    if x >= 1 << bits:
        return None
    return x


def parse_signed(s: str, bits: int) -> Optional[int]:
    if _SIGNED.fullmatch(s) is None:
        return None
    x = int(s)
    if not -(1 << (bits - 1)) <= x < 1 << (bits - 1):
        return None
    return x


def check_unsigned(name: str, x: int, bits: int) -> None:
    if type(x) is not int:
        raise ValueError(f"{name} must be int")
    if not 0 <= x < 1 << bits:
        raise ValueError(f"{name} must be in range 0..{(1 << bits) - 1}: {x}")
