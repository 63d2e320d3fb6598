import os
from dataclasses import dataclass
from pathlib import Path

__all__ = [
    "EnvVar",
]


DEFAULT_PROC_ROOT = Path("/proc")


@dataclass(frozen=True)
class EnvVar:
    """
    Configuration taken from environment variables.

    PROCSYS_PROC_ROOT: mount point of procfs. Defaults to `/proc`.
    Useful when the host's procfs is bind-mounted elsewhere inside a container.
    """

    proc_root: Path = DEFAULT_PROC_ROOT

    @classmethod
    def load(cls) -> "EnvVar":
        """
        Load environment variables into dataclass.

        Exceptions:
            Raise :class:`~RuntimeError` if `PROCSYS_PROC_ROOT` is not an absolute path.
        """

        name = "PROCSYS_PROC_ROOT"
        x = os.environ.get(name)
        if x is None or x == "":
            proc_root = DEFAULT_PROC_ROOT
        else:
            proc_root = Path(x)
            if not proc_root.is_absolute():
                raise RuntimeError(f"environment variable must be an absolute path: {name}={x}")

        return cls(proc_root)
