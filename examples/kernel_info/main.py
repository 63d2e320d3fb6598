import logging
import sys

import procsys
from procsys.kernel import keys, random


def main() -> int:
    logging.basicConfig(level=logging.DEBUG, stream=sys.stderr)

    try:
        version = procsys.Version.current()
    except procsys.AcquisitionError as e:
        print(f"kernel version unavailable: {e}", file=sys.stderr)
        return 1
    print(f"kernel: {version}")
    if version < procsys.Version(4, 14, 0):
        print("kernel is older than 4.14", file=sys.stderr)

    print(f"pid_max: {procsys.pid_max()}")

    sem = procsys.SemaphoreLimits.current()
    print(f"sem: per set {sem.max_per_set}, total {sem.max_total}, ops per call {sem.max_ops_per_call}, sets {sem.max_set_identifiers}")

    print(f"boot_id: {random.boot_id()}")
    print(f"entropy_avail: {random.entropy_avail()}")

    # Not present on kernels built without CONFIG_KEYS.
    try:
        print(f"keys.maxkeys: {keys.maxkeys()}")
    except procsys.AcquisitionError as e:
        print(f"keys unavailable: {e}", file=sys.stderr)

    return 0


if __name__ == "__main__":
    sys.exit(main())
