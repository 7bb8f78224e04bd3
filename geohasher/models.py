"""
Data model definitions for the geohasher package.
"""

from dataclasses import dataclass
from typing import Optional, Union

from . import state


@dataclass(frozen=True)
class TextEncodeResult:
    """
    Outcome of encoding a coordinate pair given as text.

    ``geohash`` is ``None`` when either field could not be parsed as a number.
    """

    geohash: Optional[str] = None

    @classmethod
    def unparseable(cls) -> "TextEncodeResult":
        return cls(geohash=None)

    @property
    def ok(self) -> bool:
        return self.geohash is not None

    @property
    def value(self) -> str:
        """
        The geohash, or the ``"error"`` sentinel for unparseable input.
        """
        if self.geohash is None:
            return state.ERROR_HASH_VALUE
        return self.geohash


@dataclass
class BatchConfig:
    """
    Settings for one run of the batch tool.

    Columns are names when ``header`` is true, or zero-based indices. ``None``
    paths mean standard input and standard output.
    """

    precision: int = state.DEFAULT_CHARACTER_PRECISION
    delimiter: str = state.DEFAULT_DELIMITER
    lat_column: Union[int, str] = state.DEFAULT_LAT_COLUMN
    lon_column: Union[int, str] = state.DEFAULT_LON_COLUMN
    output_column: str = state.DEFAULT_OUTPUT_COLUMN
    header: bool = True
    input_path: Optional[str] = None
    output_path: Optional[str] = None


@dataclass
class BatchStats:
    """
    Row counters collected while processing a batch.
    """

    rows: int = 0
    encoded: int = 0
    unparseable: int = 0
    nulls: int = 0
