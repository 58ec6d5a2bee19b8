"""Command-line entry point: validate a map file named ``map.ber``."""

from __future__ import annotations

import os
import sys

from berlint.output import put_str
from berlint.validate import check_map_file

MAP_NAME = "map.ber"


def main(argv=None) -> int:
    """Validate the map named by the single argument.

    The argument must be exactly ``map.ber``. The file is created if it does
    not exist. On failure ``Error`` is written to standard error and 1 is
    returned; otherwise 0.
    """
    args = sys.argv[1:] if argv is None else list(argv)
    if not args:
        return 0
    path = args[0]
    try:
        fd = os.open(path, os.O_CREAT | os.O_RDONLY, 0o400)
    except OSError:
        return 0
    os.close(fd)
    if len(args) != 1:
        return 0
    if path != MAP_NAME or not check_map_file(path):
        put_str("Error\n", sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())