import logging

from fixedpoint.shared.logging import configure_logging


def test_configure_logging_keeps_host_handlers():
    # Given a host application that already configured the root logger
    root = logging.getLogger()
    saved_handlers, saved_level = root.handlers[:], root.level
    handler = logging.StreamHandler()
    root.addHandler(handler)
    root.setLevel(logging.DEBUG)

    try:
        # When
        configure_logging()

        # Then
        assert handler in root.handlers
        assert root.level == logging.DEBUG
    finally:
        root.handlers[:] = saved_handlers
        root.setLevel(saved_level)


def test_configure_logging_force_replaces_handlers():
    root = logging.getLogger()
    saved_handlers, saved_level = root.handlers[:], root.level
    handler = logging.StreamHandler()
    root.addHandler(handler)

    try:
        configure_logging(log_level="INFO", force=True)

        assert handler not in root.handlers
        assert root.level == logging.INFO
    finally:
        root.handlers[:] = saved_handlers
        root.setLevel(saved_level)
        configure_logging()
