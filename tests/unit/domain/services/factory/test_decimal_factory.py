from fixedpoint.domain.services.factory import DecimalFactory
from fixedpoint.domain.services.precision_service import (
    PrecisionPolicy,
    PrecisionService,
)


def _factory(scaling: int = 2) -> DecimalFactory:
    return DecimalFactory(PrecisionService(PrecisionPolicy(scaling=scaling)))


def test_create_normalizes_to_policy_scaling():
    d = _factory().create(123456, 4)

    assert d.coefficient == 1235
    assert d.scaling == 2


def test_from_string():
    d = _factory(3).from_string("-1.5")

    assert d.coefficient == -1500
    assert d.scaling == 3
    assert str(d) == "-1.500"


def test_from_int():
    d = _factory().from_int(7)

    assert str(d) == "7.00"
