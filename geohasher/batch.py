"""
Batch geohashing of delimited records.

Every record gets one extra column holding the geohash of its latitude and
longitude cells. Empty cells are treated as nulls and produce an empty value.
"""

import csv
import sys
from typing import IO, Iterable, Iterator, List, Optional, Union

from .adapter import try_encode_from_text
from .geo import validate_precision
from .models import BatchConfig, BatchStats


def _resolve_column(header: Optional[List[str]], column: Union[int, str]) -> int:
    """
    Turn a column name or index into a zero-based index.

    A numeric reference that also appears as a header name selects that
    named column; otherwise it is a zero-based index.

    :param header: Header row, or ``None`` when the input has no header.
    :param column: Column name or zero-based index.
    :returns: Zero-based column index.
    :raises KeyError: If a named column is absent or there is no header.
    """
    if isinstance(column, int):
        if header is not None and str(column) in header:
            return header.index(str(column))
        return column
    if header is None:
        raise KeyError(f"column '{column}' requires a header row")
    try:
        return header.index(column)
    except ValueError:
        raise KeyError(f"column '{column}' not found in header") from None


def _cell(row: List[str], index: int) -> Optional[str]:
    if index >= len(row) or not row[index].strip():
        return None
    return row[index]


def geohash_records(
    rows: Iterable[List[str]],
    config: BatchConfig,
    stats: Optional[BatchStats] = None,
) -> Iterator[List[str]]:
    """
    Append a geohash column to each record.

    Both columns are resolved before the header is yielded, so a missing
    column fails before any output is produced.

    :param rows: Records already split into cells.
    :param config: Column, header and precision settings.
    :param stats: Optional counters updated as rows are processed.
    :returns: Iterator over the extended records, header first when present.
    :raises KeyError: If a named column cannot be found.
    :raises CoordinateRangeError: If a row holds out-of-range coordinates.
    :raises PrecisionError: If the configured precision is invalid.
    """
    validate_precision(config.precision)
    if stats is None:
        stats = BatchStats()

    it = iter(rows)
    header: Optional[List[str]] = None
    if config.header:
        header = next(it, None)
        if header is None:
            return

    lat_index = _resolve_column(header, config.lat_column)
    lon_index = _resolve_column(header, config.lon_column)

    if header is not None:
        yield header + [config.output_column]

    for row in it:
        stats.rows += 1
        latitude = _cell(row, lat_index)
        longitude = _cell(row, lon_index)
        if latitude is None or longitude is None:
            stats.nulls += 1
            yield row + [""]
            continue

        result = try_encode_from_text(latitude, longitude, config.precision)
        if result.ok:
            stats.encoded += 1
        else:
            stats.unparseable += 1
        yield row + [result.value]


def run_batch(
    config: BatchConfig,
    stdin: Optional[IO[str]] = None,
    stdout: Optional[IO[str]] = None,
) -> BatchStats:
    """
    Read records, geohash them and write them out.

    Files named in *config* are opened and closed here; otherwise *stdin* and
    *stdout* are used as-is. The output file is only opened once the
    precision, the columns and the first record have been checked.

    :param config: Batch settings.
    :param stdin: Fallback input stream; defaults to ``sys.stdin``.
    :param stdout: Fallback output stream; defaults to ``sys.stdout``.
    :returns: Counters for the processed rows.
    :raises PrecisionError: If the configured precision is invalid.
    """
    validate_precision(config.precision)
    if stdin is None:
        stdin = sys.stdin
    if stdout is None:
        stdout = sys.stdout

    stats = BatchStats()
    source = open(config.input_path, newline="") if config.input_path else stdin
    try:
        reader = csv.reader(source, delimiter=config.delimiter)
        records = geohash_records(reader, config, stats)
        first = next(records, None)

        sink = open(config.output_path, "w", newline="") if config.output_path else stdout
        try:
            writer = csv.writer(sink, delimiter=config.delimiter, lineterminator="\n")
            if first is not None:
                writer.writerow(first)
                for record in records:
                    writer.writerow(record)
        finally:
            if sink is not stdout:
                sink.close()
    finally:
        if source is not stdin:
            source.close()

    print(
        f"[Batch] Processed {stats.rows} rows: {stats.encoded} encoded, "
        f"{stats.unparseable} unparseable, {stats.nulls} null",
        file=sys.stderr,
    )
    return stats
