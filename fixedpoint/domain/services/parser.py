from typing import Optional

from fixedpoint.domain.exceptions import BadFormatError, CoefficientOverflowError
from fixedpoint.domain.values import DecimalValue
from fixedpoint.shared.utils.checked_math import checked_add, checked_mul, checked_sub


def parse_decimal(text: str) -> DecimalValue:
    """
    Parse a decimal number from text such as ``"-1234.56"`` or ``".5"``.

    The accepted format is an optional leading sign followed by digits with at
    most one ``.`` among them. No exponent, grouping separators or whitespace.

    :param text: Text to parse
    :return: Decimal number whose scaling is the count of digits after the dot

    :raises BadFormatError: If the text breaks the format
    :raises CoefficientOverflowError: If the digits do not fit in 32 bits
    :raises ScalingOverflowError: If there are more than MAX_SCALING fractional digits
    """
    if len(text) == 0:
        raise BadFormatError("Empty string")

    coefficient = 0
    scaling = 0
    negative = False
    dot_seen = False
    digit_seen = False

    for i, char in enumerate(text):
        if char == "+":
            if i > 0:
                raise BadFormatError("Misplaced + (plus)")

        elif char == "-":
            if i > 0:
                raise BadFormatError("Misplaced - (minus)")
            negative = True

        elif char == ".":
            if dot_seen:
                raise BadFormatError("Double . (dot)")
            dot_seen = True

        elif "0" <= char <= "9":
            digit = ord(char) - ord("0")

            # coefficient = coefficient * 10 +/- digit, accumulating negative
            # numbers downwards so that MIN_COEFFICIENT is reachable
            accumulated: Optional[int] = checked_mul(coefficient, 10)
            if accumulated is not None:
                if negative:
                    accumulated = checked_sub(accumulated, digit)
                else:
                    accumulated = checked_add(accumulated, digit)

            if accumulated is None:
                raise CoefficientOverflowError()

            coefficient = accumulated
            digit_seen = True
            if dot_seen:
                scaling += 1

        else:
            raise BadFormatError("Invalid character")

    if not digit_seen:
        raise BadFormatError("No digits")

    return DecimalValue.try_new(coefficient, scaling)
