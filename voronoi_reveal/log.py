"""structlog setup for applications embedding the renderer.

Library modules only call ``structlog.get_logger()`` and emit debug events;
the hosting application decides where they go by calling
:func:`configure_logging` once at start-up.
"""

import logging
import sys

import structlog


def configure_logging(level: int = logging.INFO, json: bool = True) -> None:
    """Route structlog through the stdlib ``logging`` module at ``level``."""
    logging.basicConfig(format="%(message)s", stream=sys.stderr, level=level)
    renderer = (
        structlog.processors.JSONRenderer()
        if json
        else structlog.dev.ConsoleRenderer(colors=False)
    )
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            renderer,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )
