"""
Exact-decimal persistence of unsigned big integers.

A ``StoredBigUint`` is written to a ``NUMERIC`` column as a ``Decimal`` with
no fractional digits and read back losslessly. The conversion runs in two
hops so each check stays separate:

  unsigned int  ->  Decimal            (biguint_to_decimal)
  Decimal       ->  int                (decimal_to_int, integrality check)
  int           ->  unsigned int       (int_to_biguint, sign check)
"""

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from typing import Optional, Union

from zkcodec.exceptions import (
    MissingValueError,
    NegativeValueError,
    NonIntegralError,
    ValueOutOfRangeError,
)

PersistedNumeric = Union[Decimal, int, str]

# PostgreSQL NUMERIC holds at most 131072 digits before the decimal point
MAX_PERSISTED_DIGITS = 131072


def format_digits(value: int) -> str:
    """Format an integer as decimal digits, free of the int-to-str size limit."""
    return format(Decimal(value), "f")


def _check_int(value) -> int:
    # bool is an int subclass but never a big integer
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"Expected int, got {type(value).__name__}")
    return value


def biguint_to_decimal(value: int) -> Decimal:
    """
    Convert an unsigned big integer to an exact decimal.

    Args:
        value: Non-negative integer of any size

    Returns:
        Decimal: Equal value with exponent 0

    Raises:
        NegativeValueError: If value is negative
    """
    value = int_to_biguint(_check_int(value))
    # Decimal(int) is exact regardless of the context precision
    return Decimal(value)


def decimal_to_int(raw: Decimal) -> int:
    """
    Convert an exact decimal to an integer, rejecting fractional values.

    Trailing fractional zeros ("7.000") and positive exponents ("1E+3")
    are integral.

    Raises:
        NonIntegralError: If raw is not finite or has a fractional part
        ValueOutOfRangeError: If raw has more than MAX_PERSISTED_DIGITS digits
    """
    if not raw.is_finite():
        raise NonIntegralError(f"decimal number stored where an integer was expected: {raw}")
    if raw and raw.adjusted() >= MAX_PERSISTED_DIGITS:
        raise ValueOutOfRangeError(
            f"decimal number has more than {MAX_PERSISTED_DIGITS} integer digits"
        )
    # int() truncates exactly at any magnitude, so equality means no fractional part
    integral = int(raw)
    if raw != integral:
        raise NonIntegralError(f"decimal number stored where an integer was expected: {raw}")
    return integral


def int_to_biguint(value: int) -> int:
    """
    Check that an integer is representable as unsigned.

    Raises:
        NegativeValueError: If value is negative
    """
    if value < 0:
        raise NegativeValueError(f"not an unsigned integer: -{format_digits(-value)}")
    return value


def _as_decimal(raw: PersistedNumeric) -> Decimal:
    if isinstance(raw, Decimal):
        return raw
    if isinstance(raw, int) and not isinstance(raw, bool):
        return Decimal(raw)
    if isinstance(raw, str):
        try:
            return Decimal(raw.strip())
        except InvalidOperation as e:
            raise NonIntegralError(f"not a decimal number: {raw!r}") from e
    raise TypeError(f"Expected a decimal value, got {type(raw).__name__}")


@dataclass(frozen=True, order=True, repr=False)
class StoredBigUint:
    """
    Unsigned big integer persisted as an exact decimal.

    Immutable value object; equality and ordering follow the wrapped value.
    """

    value: int = 0

    def __post_init__(self):
        int_to_biguint(_check_int(self.value))

    def __int__(self) -> int:
        return self.value

    def __index__(self) -> int:
        return self.value

    def __str__(self) -> str:
        return format_digits(self.value)

    def __repr__(self) -> str:
        return f"StoredBigUint({self})"

    @classmethod
    def from_biguint(cls, value: int) -> "StoredBigUint":
        return cls(value)

    def to_persisted(self) -> Decimal:
        return to_persisted(self)

    @classmethod
    def from_persisted(cls, raw: Optional[PersistedNumeric]) -> "StoredBigUint":
        return from_persisted(raw)


def to_persisted(value: StoredBigUint) -> Decimal:
    """Convert a stored big integer to its persisted decimal form."""
    return biguint_to_decimal(value.value)


def from_persisted(raw: Optional[PersistedNumeric]) -> StoredBigUint:
    """
    Rebuild a stored big integer from a persisted decimal.

    Args:
        raw: Column value; ``int`` and ``str`` are accepted from drivers
             that do not return ``Decimal``

    Returns:
        StoredBigUint: The unique unsigned value equal to raw

    Raises:
        MissingValueError: If raw is None
        NonIntegralError: If raw has a fractional part
        NegativeValueError: If raw is negative
        ValueOutOfRangeError: If raw has more than MAX_PERSISTED_DIGITS digits
    """
    if raw is None:
        raise MissingValueError("persisted numeric value is missing")
    return StoredBigUint(int_to_biguint(decimal_to_int(_as_decimal(raw))))
