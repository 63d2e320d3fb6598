import enum
from typing import Any, Optional

__all__ = [
    "ProcSysError",
    "AcquisitionError",
    "ParseError",
    "VersionComponent",
    "VersionParseError",
    "MissingComponent",
    "InvalidComponent",
    "LimitsParseError",
    "MissingField",
    "InvalidField",
    "InvalidScalar",
    "InvalidEncoding",
]


class ProcSysError(Exception):
    pass


class AcquisitionError(ProcSysError):
    """
    The text of a kernel value could not be obtained.

    Wraps the :class:`~OSError` raised by the reader (missing path, permission denied, ...).
    """

    def __init__(self, path: str, cause: OSError) -> None:
        super().__init__(path, cause)
        self.path = path
        self.cause = cause

    def __str__(self) -> str:
        return f"failed to read {self.path}: {self.cause}"


class ParseError(ProcSysError, ValueError):
    """
    The text of a kernel value was obtained but is malformed.

    `path` is `None` when the parser was called directly, and is filled in by `read_value`.
    """

    path: Optional[str] = None

    def _describe(self) -> str:
        return "malformed value"

    def __str__(self) -> str:
        if self.path is None:
            return self._describe()
        return f"{self.path}: {self._describe()}"


class VersionComponent(enum.Enum):
    MAJOR = "major"
    MINOR = "minor"
    PATCH = "patch"


class VersionParseError(ParseError):
    # Every constructor argument goes to `args` so that the exception survives pickling.
    def __init__(self, component: VersionComponent, *args: Any) -> None:
        super().__init__(component, *args)
        self.component = component


class MissingComponent(VersionParseError):
    def _describe(self) -> str:
        return f"missing {self.component.value} component"


class InvalidComponent(VersionParseError):
    def __init__(self, component: VersionComponent, text: str) -> None:
        super().__init__(component, text)
        self.text = text

    def _describe(self) -> str:
        return f"failed to parse {self.component.value}: {self.text!r}"


class LimitsParseError(ParseError):
    # 1-based position of the field on the line.
    def __init__(self, index: int, *args: Any) -> None:
        super().__init__(index, *args)
        self.index = index


class MissingField(LimitsParseError):
    def _describe(self) -> str:
        return f"missing field {self.index}"


class InvalidField(LimitsParseError):
    def __init__(self, index: int, text: str) -> None:
        super().__init__(index, text)
        self.text = text

    def _describe(self) -> str:
        return f"failed to parse field {self.index}: {self.text!r}"


class InvalidScalar(ParseError):
    def __init__(self, kind: str, text: str) -> None:
        super().__init__(kind, text)
        self.kind = kind
        self.text = text

    def _describe(self) -> str:
        return f"failed to parse {self.kind}: {self.text!r}"


class InvalidEncoding(ParseError):
    "The file holds bytes that are not valid UTF-8 text."

    def __init__(self, reason: str) -> None:
        super().__init__(reason)
        self.reason = reason

    def _describe(self) -> str:
        return f"not UTF-8 text: {self.reason}"
