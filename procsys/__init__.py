from . import envvar, error, kernel, reader  # noqa: F401
from ._version import __version__  # noqa: F401
from .error import AcquisitionError, ParseError, ProcSysError  # noqa: F401
from .kernel import SemaphoreLimits, Version, pid_max  # noqa: F401
from .reader import ProcFsReader, read_value  # noqa: F401
