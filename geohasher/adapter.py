"""
Geohash encoding for coordinates supplied as text.

Unparseable text is absorbed here and reported as the ``"error"`` sentinel.
Out-of-range coordinates and bad precision values are not: the encoder's
exceptions reach the caller unchanged.
"""

from . import state
from .geo import encode
from .models import TextEncodeResult
from .protocol import parse_coordinate


def try_encode_from_text(
    latitude_text: str,
    longitude_text: str,
    precision: int = state.DEFAULT_CHARACTER_PRECISION,
) -> TextEncodeResult:
    """
    Parse two coordinate strings and encode them.

    :param latitude_text: Latitude as decimal text.
    :param longitude_text: Longitude as decimal text.
    :param precision: Number of geohash characters (0 to 12).
    :returns: A successful result, or ``TextEncodeResult.unparseable()`` when
        either field is not a number.
    :raises CoordinateRangeError: If the parsed coordinates are out of range.
    :raises PrecisionError: If *precision* is outside ``[0, 12]``.
    """
    latitude = parse_coordinate(latitude_text)
    longitude = parse_coordinate(longitude_text)
    if latitude is None or longitude is None:
        return TextEncodeResult.unparseable()
    return TextEncodeResult(geohash=encode(latitude, longitude, precision))


def encode_from_text(
    latitude_text: str,
    longitude_text: str,
    precision: int = state.DEFAULT_CHARACTER_PRECISION,
) -> str:
    """
    Return the geohash for two coordinate strings, or ``"error"``.

    :param latitude_text: Latitude as decimal text.
    :param longitude_text: Longitude as decimal text.
    :param precision: Number of geohash characters (0 to 12).
    :returns: Geohash string, or ``"error"`` when either field is not a number.
    """
    return try_encode_from_text(latitude_text, longitude_text, precision).value
