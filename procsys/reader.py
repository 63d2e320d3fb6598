import logging
import uuid
from pathlib import Path, PurePosixPath
from typing import Callable, Optional, TypeVar

from ._private.util.integer import parse_signed, parse_unsigned
from .envvar import DEFAULT_PROC_ROOT, EnvVar
from .error import AcquisitionError, InvalidEncoding, InvalidScalar, ParseError

__all__ = [
    "RawReader",
    "ProcFsReader",
    "default_reader",
    "read_value",
    "parse_i32",
    "parse_u32",
    "parse_u64",
    "parse_uuid",
]

logger = logging.getLogger(__name__)

T = TypeVar("T")

# Returns the whole text of `path`. Raises `OSError` when it is unavailable.
RawReader = Callable[[str], str]


class ProcFsReader:
    """
    Reads kernel pseudo-files.

    Paths are given as seen on a normal host (`/proc/sys/...`) and are rebased onto `root`,
    so a procfs mounted somewhere else can be read with the same paths.
    """

    def __init__(self, root: Path = DEFAULT_PROC_ROOT) -> None:
        self.root = root

    def resolve(self, path: str) -> Path:
        p = PurePosixPath(path)
        try:
            rel = p.relative_to(PurePosixPath(DEFAULT_PROC_ROOT))
        except ValueError:
            return Path(path)
        return self.root / rel

    def __call__(self, path: str) -> str:
        with open(self.resolve(path), encoding="utf-8") as f:
            return f.read()


def default_reader() -> ProcFsReader:
    return ProcFsReader(EnvVar.load().proc_root)


def read_value(path: str, parse: Callable[[str], T], reader: Optional[RawReader] = None) -> T:
    """
    Read the text of `path` and parse it.

    One trailing newline is removed before `parse` sees the text.

    Exceptions:
        Raise :class:`~procsys.error.AcquisitionError` if the text could not be read.
        Raise :class:`~procsys.error.ParseError` (with `path` set) if `parse` rejects it,
        or :class:`~procsys.error.InvalidEncoding` if the file is not UTF-8 text.
    """
    if reader is None:
        reader = default_reader()

    logger.debug("reading %s", path)
    try:
        text = reader(path)
    except OSError as e:
        logger.debug("%s is not available: %s", path, e)
        raise AcquisitionError(path, e) from e
    except UnicodeDecodeError as e:
        err = InvalidEncoding(str(e))
        err.path = path
        raise err from e

    if text.endswith("\n"):
        text = text[:-1]

    try:
        return parse(text)
    except ParseError as e:
        e.path = path
        raise


def parse_i32(s: str) -> int:
    x = parse_signed(s.strip(), 32)
    if x is None:
        raise InvalidScalar("i32", s)
    return x


def parse_u32(s: str) -> int:
    x = parse_unsigned(s.strip(), 32)
    if x is None:
        raise InvalidScalar("u32", s)
    return x


def parse_u64(s: str) -> int:
    x = parse_unsigned(s.strip(), 64)
    if x is None:
        raise InvalidScalar("u64", s)
    return x


def parse_uuid(s: str) -> uuid.UUID:
    try:
        return uuid.UUID(s.strip())
    except ValueError:
        raise InvalidScalar("uuid", s) from None
