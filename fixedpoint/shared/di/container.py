from dependency_injector import containers, providers

from fixedpoint.domain.services.factory import DecimalFactory
from fixedpoint.domain.services.precision_service import (
    PrecisionPolicy,
    PrecisionService,
)
from fixedpoint.domain.values import RoundingMode
from fixedpoint.shared.config import get_settings
from fixedpoint.shared.logging import get_logger

logger = get_logger(__name__)


class Container(containers.DeclarativeContainer):
    config = providers.Configuration()

    precision_policy = providers.Singleton(
        PrecisionPolicy,
        scaling=config.default_scaling,
        rounding_mode=config.rounding_mode,
    )

    precision_service = providers.Singleton(
        PrecisionService,
        policy=precision_policy,
    )

    decimal_factory = providers.Singleton(
        DecimalFactory,
        precision_service=precision_service,
    )


def get_container(default_scaling: int = None) -> Container:
    settings = get_settings()

    container = Container()

    scaling = settings.DEFAULT_SCALING if default_scaling is None else default_scaling

    container.config.from_dict(
        {
            "default_scaling": scaling,
            "rounding_mode": RoundingMode(settings.ROUNDING_MODE),
        }
    )

    logger.debug(
        "di_container_configured",
        default_scaling=scaling,
        rounding_mode=str(settings.ROUNDING_MODE),
    )

    return container
