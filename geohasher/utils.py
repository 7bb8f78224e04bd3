"""
Command-line helpers for the batch tool.
"""

import sys
from typing import List, Optional

from .models import BatchConfig
from .protocol import parse_column_ref


def parse_args(argv: Optional[List[str]] = None) -> BatchConfig:
    """
    Parse batch tool command-line arguments.

    Unknown options are skipped.

    :param argv: Argument list including the program name; defaults to
        ``sys.argv``.
    :returns: Populated ``BatchConfig``.
    :raises ValueError: If ``--precision`` is not an integer.
    """
    args = sys.argv if argv is None else argv
    config = BatchConfig()

    i = 1
    while i < len(args):
        arg = args[i]
        has_value = i + 1 < len(args)
        if arg == "--precision" and has_value:
            config.precision = int(args[i + 1])
            i += 2
        elif arg == "--delimiter" and has_value:
            config.delimiter = args[i + 1]
            i += 2
        elif arg == "--lat-column" and has_value:
            config.lat_column = parse_column_ref(args[i + 1])
            i += 2
        elif arg == "--lon-column" and has_value:
            config.lon_column = parse_column_ref(args[i + 1])
            i += 2
        elif arg == "--output-column" and has_value:
            config.output_column = args[i + 1]
            i += 2
        elif arg == "--input" and has_value:
            config.input_path = args[i + 1]
            i += 2
        elif arg == "--output" and has_value:
            config.output_path = args[i + 1]
            i += 2
        elif arg == "--no-header":
            config.header = False
            i += 1
        else:
            i += 1

    return config
