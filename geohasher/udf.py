"""
Row-level ``geohash(latitude, longitude)`` query function.

The query engine calls ``initialize`` once with the argument column types and
then ``evaluate`` for every row. Null propagation happens here, before the
text adapter is reached.
"""

from typing import List, Optional, Sequence

from . import state
from .adapter import encode_from_text
from .geo import validate_precision


class UDFArgumentError(ValueError):
    """
    Raised when the function is declared with unusable arguments.
    """


class UDFArgumentLengthError(UDFArgumentError):
    """
    Raised when the function is declared with the wrong number of arguments.
    """


class UDFArgumentTypeError(UDFArgumentError):
    """
    Raised when an argument column is not a string column.
    """


class GeohashUDF:
    """
    Two-column string function returning the geohash of each row.

    Arguments are ``(latitude, longitude)``, both string columns. The result
    column is a string column.
    """

    def __init__(self, precision: int = state.DEFAULT_CHARACTER_PRECISION) -> None:
        validate_precision(precision)
        self.precision = precision
        self.argument_types: Optional[List[str]] = None

    def initialize(self, argument_types: Sequence[str]) -> str:
        """
        Validate the declared argument column types.

        :param argument_types: Type names of the argument columns.
        :returns: Type name of the result column.
        :raises UDFArgumentLengthError: Unless exactly two arguments are given.
        :raises UDFArgumentTypeError: Unless both arguments are strings.
        """
        if len(argument_types) != 2:
            raise UDFArgumentLengthError(
                f"{state.FUNCTION_NAME} only takes 2 arguments: latitude, longitude"
            )
        for arg_type in argument_types:
            if not isinstance(arg_type, str) or arg_type.lower() != state.STRING_TYPE:
                raise UDFArgumentTypeError("arguments must be a string")

        self.argument_types = [t.lower() for t in argument_types]
        return state.STRING_TYPE

    def evaluate(self, arguments: Sequence[Optional[str]]) -> Optional[str]:
        """
        Compute the geohash for one row.

        :param arguments: ``[latitude_text, longitude_text]`` row values.
        :returns: Geohash string, ``"error"`` for non-numeric text, or ``None``
            when either value is null.
        """
        if self.argument_types is None:
            raise UDFArgumentError(f"{state.FUNCTION_NAME} has not been initialized")
        if len(arguments) != 2:
            raise UDFArgumentLengthError(
                f"{state.FUNCTION_NAME} only takes 2 arguments: latitude, longitude"
            )

        latitude, longitude = arguments
        if latitude is None or longitude is None:
            return None
        return encode_from_text(latitude, longitude, self.precision)

    def get_display_string(self, children: Sequence[str]) -> str:
        return f"{state.FUNCTION_NAME}({', '.join(children)})"
