"""
Canonical text rendering of decimal numbers.

The rendering never goes through ``str(int)`` or any other generic
number-to-text routine. Digits are placed directly into a fixed-size byte
buffer, right to left, and the result is the tail of that buffer.

The buffer length covers the widest possible rendering::

     1 '-' sign
     1 leading '0' of a purely fractional number
     1 '.' separator
    10 digits of the widest coefficient (MAX_PRECISION)
    --
    13
"""

from typing import Final

from fixedpoint.domain.values import MAX_PRECISION, DecimalValue

BUFFER_LENGTH: Final[int] = MAX_PRECISION + 3

_ZERO: Final[int] = ord("0")
_DOT: Final[int] = ord(".")
_MINUS: Final[int] = ord("-")

# ASCII "000102...9899": the tens and ones digits of i are at 2*i and 2*i + 1
_DIGIT_PAIRS: Final[bytes] = bytes(
    code for i in range(100) for code in (_ZERO + i // 10, _ZERO + i % 10)
)


def _ones_digit(i: int) -> int:
    """ASCII code of the ones digit of ``i`` (0 <= i < 100), e.g. 45 -> '5'."""
    return _DIGIT_PAIRS[2 * i + 1]


def _tens_digit(i: int) -> int:
    """ASCII code of the tens digit of ``i`` (0 <= i < 100), e.g. 45 -> '4'."""
    return _DIGIT_PAIRS[2 * i]


def _shift_left(buffer: bytearray, pos: int, fill: int) -> None:
    """Shift ``buffer[1:pos + 1]`` one slot to the left and put ``fill`` at ``pos``."""
    for i in range(pos):
        buffer[i] = buffer[i + 1]
    buffer[pos] = fill


def _insert_digits(buffer: bytearray, coefficient: int) -> int:
    """
    Write the digits of ``abs(coefficient)`` at the right end of the buffer.

    :return: Number of digits written
    """
    pos = BUFFER_LENGTH

    # The sign is placed separately.
    c = abs(coefficient)

    # Two digits per step while at least three digits remain.
    while c >= 100:
        q = c // 100
        i = c - q * 100
        pos -= 1
        buffer[pos] = _ones_digit(i)
        pos -= 1
        buffer[pos] = _tens_digit(i)
        c = q

    pos -= 1
    buffer[pos] = _ones_digit(c)
    if c >= 10:
        pos -= 1
        buffer[pos] = _tens_digit(c)

    return BUFFER_LENGTH - pos


def _apply_scaling(buffer: bytearray, scaling: int, digit_count: int) -> int:
    """
    Place the decimal point, if any.

    :return: Index of the first character of the rendering
    """
    if scaling == 0:
        return BUFFER_LENGTH - digit_count

    last_index = BUFFER_LENGTH - 1
    pos = last_index - scaling

    if scaling < digit_count:
        # The point falls between digits: make room for it.
        _shift_left(buffer, pos, _DOT)
        return last_index - digit_count

    if scaling == digit_count:
        buffer[pos - 1] = _ZERO
        buffer[pos] = _DOT
        return pos - 1

    # scaling > digit_count: the slots between the point and the first digit
    # still hold the '0' the buffer was filled with.
    buffer[pos] = _DOT
    return pos - 1


def _apply_sign(buffer: bytearray, coefficient: int, first: int) -> int:
    if coefficient < 0:
        buffer[first - 1] = _MINUS
        return first - 1

    return first


def format_decimal(value: DecimalValue) -> str:
    """
    Render ``value`` in canonical form.

    ``DecimalValue(123456, 2)`` renders as ``"1234.56"``, ``DecimalValue(12, 8)``
    as ``"0.00000012"`` and ``DecimalValue(0, 1)`` as ``"0.0"``.
    """
    buffer = bytearray(b"0" * BUFFER_LENGTH)

    digit_count = _insert_digits(buffer, value.coefficient)
    first = _apply_scaling(buffer, value.scaling, digit_count)
    first = _apply_sign(buffer, value.coefficient, first)

    # ASCII only, see module docstring
    return buffer[first:].decode("ascii")
