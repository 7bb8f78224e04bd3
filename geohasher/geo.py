"""
Geohash encoding of WGS-84 coordinates.
"""

import math

from . import state


class CoordinateRangeError(ValueError):
    """
    Raised when a latitude or longitude lies outside its valid range.
    """


class PrecisionError(ValueError):
    """
    Raised when the requested geohash length is not in ``[0, 12]``.
    """


def validate_coordinates(latitude: float, longitude: float) -> None:
    """
    Check that a coordinate pair is finite and within WGS-84 bounds.

    Both bounds are inclusive, so the poles and the antimeridian are valid.

    :param latitude: Latitude in decimal degrees (−90 to 90).
    :param longitude: Longitude in decimal degrees (−180 to 180).
    :raises CoordinateRangeError: If either value is out of range, infinite or NaN.
    """
    lat_ok = math.isfinite(latitude) and state.MIN_LATITUDE <= latitude <= state.MAX_LATITUDE
    lon_ok = (
        math.isfinite(longitude)
        and state.MIN_LONGITUDE <= longitude <= state.MAX_LONGITUDE
    )
    if not (lat_ok and lon_ok):
        raise CoordinateRangeError(
            f"The supplied coordinates ({latitude:.7f},{longitude:.7f}) are out of range."
        )


def validate_precision(precision: int) -> None:
    """
    Check that *precision* is an integer geohash length in ``[0, 12]``.

    :param precision: Requested number of geohash characters.
    :raises TypeError: If *precision* is not an integer.
    :raises PrecisionError: If *precision* is negative or larger than 12.
    """
    if isinstance(precision, bool) or not isinstance(precision, int):
        raise TypeError(f"precision must be an int, not {type(precision).__name__}")
    if precision < 0 or precision > state.MAX_CHARACTER_PRECISION:
        raise PrecisionError(
            f"A geohash can only be {state.MAX_CHARACTER_PRECISION} character long."
        )


def encode(
    latitude: float,
    longitude: float,
    precision: int = state.DEFAULT_CHARACTER_PRECISION,
) -> str:
    """
    Encode a WGS-84 coordinate into a base-32 geohash string.

    Longitude and latitude are bisected alternately, longitude first. Each
    bisection contributes one bit (``1`` when the value is at or above the
    midpoint) and every five bits select one character of the alphabet
    ``0123456789bcdefghjkmnpqrstuvwxyz``.

    :param latitude: Latitude in decimal degrees (−90 to 90).
    :param longitude: Longitude in decimal degrees (−180 to 180).
    :param precision: Number of characters to produce (0 to 12).
    :returns: Geohash string of exactly *precision* characters.
    :raises PrecisionError: If *precision* is outside ``[0, 12]``.
    :raises CoordinateRangeError: If the coordinate pair is out of range.
    """
    validate_precision(precision)
    validate_coordinates(latitude, longitude)

    lon_range = [state.MIN_LONGITUDE, state.MAX_LONGITUDE]
    lat_range = [state.MIN_LATITUDE, state.MAX_LATITUDE]

    chars = []
    value = 0
    bit_count = 0
    is_lon = True

    for _ in range(precision * state.BITS_PER_CHARACTER):
        if is_lon:
            target, interval = longitude, lon_range
        else:
            target, interval = latitude, lat_range

        mid = (interval[0] + interval[1]) / 2
        value <<= 1
        if target >= mid:
            value |= 1
            interval[0] = mid
        else:
            interval[1] = mid

        is_lon = not is_lon
        bit_count += 1
        if bit_count == state.BITS_PER_CHARACTER:
            chars.append(state.BASE32_ALPHABET[value])
            value = 0
            bit_count = 0

    return "".join(chars)
