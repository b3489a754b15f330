from fixedpoint.domain.services.parser import parse_decimal
from fixedpoint.domain.services.precision_service import PrecisionService
from fixedpoint.domain.values import DecimalValue


class DecimalFactory:
    def __init__(self, precision_service: PrecisionService):
        self._precision = precision_service

    def create(self, coefficient: int, scaling: int = 0) -> DecimalValue:
        return self._precision.normalize(DecimalValue.try_new(coefficient, scaling))

    def from_string(self, value: str) -> DecimalValue:
        return self._precision.normalize(parse_decimal(value))

    def from_int(self, value: int) -> DecimalValue:
        return self.create(value, 0)
