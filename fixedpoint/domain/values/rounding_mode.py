from enum import Enum


class RoundingMode(str, Enum):
    """Rounding mode applied when a decimal number loses fractional digits."""

    # Round towards the nearest neighbour; ties round away from zero.
    HALF_UP = "HALF_UP"

    def __str__(self) -> str:
        return self.value
