from dataclasses import dataclass

from fixedpoint.domain.exceptions import ScalingOverflowError
from fixedpoint.domain.values import MAX_SCALING, MIN_SCALING, DecimalValue, RoundingMode
from fixedpoint.shared.logging import get_logger

from .scaling import rescale_to, try_upscale_by

logger = get_logger(__name__)


@dataclass(frozen=True)
class PrecisionPolicy:
    """Policy defining the scaling decimal numbers are normalized to."""

    scaling: int = 2
    rounding_mode: RoundingMode = RoundingMode.HALF_UP

    def __post_init__(self) -> None:
        if not MIN_SCALING <= self.scaling <= MAX_SCALING:
            raise ScalingOverflowError(
                f"Policy scaling must be {MIN_SCALING}-{MAX_SCALING}: {self.scaling}"
            )


class PrecisionService:
    """
    Domain service for handling numeric precision.
    """

    def __init__(self, policy: PrecisionPolicy = None):
        self._policy = policy or PrecisionPolicy()

    @property
    def policy(self) -> PrecisionPolicy:
        return self._policy

    def normalize(self, value: DecimalValue) -> DecimalValue:
        """
        Normalize a decimal number to the policy scaling.

        :param value: Decimal number
        :return: Decimal number with the policy scaling, rounded if digits were dropped

        :raises CoefficientOverflowError: If upscaling overflows the coefficient
        """
        normalized = rescale_to(value, self._policy.scaling, self._policy.rounding_mode)

        if normalized.scaling < value.scaling and normalized != value:
            logger.debug(
                "decimal_rounded",
                value=str(value),
                normalized=str(normalized),
                rounding_mode=str(self._policy.rounding_mode),
            )

        return normalized

    def align(
        self, a: DecimalValue, b: DecimalValue
    ) -> tuple[DecimalValue, DecimalValue]:
        """
        Bring two decimal numbers to the same scaling without losing precision.

        :return: Both numbers upscaled to the larger of their scalings
        :raises CoefficientOverflowError: If the upscaled coefficient does not fit
        """
        if a.is_aligned_to(b):
            return a, b

        if a.scaling < b.scaling:
            return try_upscale_by(a, b.scaling - a.scaling), b

        return a, try_upscale_by(b, a.scaling - b.scaling)

    def validate_precision(self, value: DecimalValue, scaling: int) -> bool:
        """
        Check if value can be expressed with the expected scaling.

        :param value: Value to check
        :param scaling: Expected scaling, e.g. 2 for cents

        :return: bool(does rescaling keep the value unchanged?)
        """
        if scaling >= value.scaling:
            return True

        return value == rescale_to(value, scaling, self._policy.rounding_mode)
