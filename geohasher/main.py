"""
geohasher - append geohash columns to delimited records.

Reads CSV-style records from a file or standard input and writes them back
with a geohash column computed from their latitude and longitude cells.
"""

import sys
from typing import List, Optional

from .batch import run_batch
from .utils import parse_args


def main(argv: Optional[List[str]] = None) -> int:
    """
    Entry point for the ``geohasher`` command.

    :param argv: Argument list including the program name; defaults to
        ``sys.argv``.
    :returns: Process exit status: ``0`` on success, ``1`` on an invalid
        argument, coordinate or precision, ``2`` on a missing column.
    """
    try:
        config = parse_args(argv)
    except ValueError as ex:
        print(f"[Main] Error: invalid arguments: {ex}", file=sys.stderr)
        return 1

    print(
        f"[Main] Geohashing with precision {config.precision} "
        f"(lat={config.lat_column!r}, lon={config.lon_column!r})",
        file=sys.stderr,
    )

    try:
        run_batch(config)
    except KeyError as ex:
        print(f"[Main] Error: {ex.args[0]}", file=sys.stderr)
        return 2
    except ValueError as ex:
        print(f"[Main] Error: {ex}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
