from fixedpoint.domain.services.factory import DecimalFactory
from fixedpoint.domain.services.precision_service import PrecisionService
from fixedpoint.domain.values import RoundingMode
from fixedpoint.shared.di import get_container


def test_container_wires_policy_from_settings(monkeypatch):
    monkeypatch.setenv("DEFAULT_SCALING", "4")

    container = get_container()
    service = container.precision_service()

    assert isinstance(service, PrecisionService)
    assert service.policy.scaling == 4
    assert service.policy.rounding_mode is RoundingMode.HALF_UP


def test_container_scaling_override():
    container = get_container(default_scaling=0)

    factory = container.decimal_factory()

    assert isinstance(factory, DecimalFactory)
    assert str(factory.from_string("12.5")) == "13"


def test_container_singletons():
    container = get_container()

    assert container.decimal_factory() is container.decimal_factory()
