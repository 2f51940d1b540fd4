"""
Structured logging for rendermath.

The value types never log on their hot paths. Only rare numeric and
configuration events are emitted:

- ``singular_matrix_inverted`` (debug): ``Matrix.invert_to_ref`` fell back
  to an infinite reciprocal; carries ``determinant``.
- ``decompose_zero_scale`` (debug): ``Matrix.decompose`` found a zero scale
  axis; carries ``scale``.
- ``config_loaded`` (info): a YAML configuration was read; carries ``path``.
- ``numerics_configured`` (info): the active numerics changed; carries
  ``strict``, ``matrix_dtype`` and ``singular_tolerance``.

Console output is meant for development, JSON lines for benchmark runs and
services embedding the library.
"""

import logging
import sys
from typing import Any, Optional

import numpy as np
import structlog
from structlog.types import EventDict, Processor, WrappedLogger


def configure_logging(
    level: str = "INFO",
    run_id: Optional[str] = None,
    json_format: bool = False,
) -> None:
    """
    Configure structlog and the stdlib root logger for rendermath events.

    Args:
        level: Log level name; use DEBUG to see the numeric fallback events.
        run_id: Identifier stamped on every event, e.g. one benchmark run.
        json_format: Render JSON lines instead of colored console output.
    """
    numeric_level = getattr(logging, str(level).upper(), logging.INFO)

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=numeric_level,
    )

    processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        _plain_numbers,
    ]
    if run_id:
        processors.insert(0, _add_run_id(run_id))

    if json_format:
        processors += [
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=True))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def configure_from_settings(settings: Any) -> None:
    """Configure logging from a ``LoggingConfig`` (``level``, ``run_id``, ``json_format``)."""
    level = getattr(settings.level, "value", settings.level)
    configure_logging(level, settings.run_id, settings.json_format)


def _add_run_id(run_id: str) -> Processor:
    def processor(
        logger: WrappedLogger, method_name: str, event_dict: EventDict
    ) -> EventDict:
        event_dict["run_id"] = run_id
        return event_dict

    return processor


def _plain_numbers(
    logger: WrappedLogger, method_name: str, event_dict: EventDict
) -> EventDict:
    """
    Turn numpy scalars and arrays in event values into Python numbers.

    Matrix storage is numpy, so determinants and components read straight
    from ``Matrix.m`` arrive as ``np.float32``/``np.float64``.
    """
    for key, value in event_dict.items():
        if isinstance(value, np.generic):
            event_dict[key] = value.item()
        elif isinstance(value, np.ndarray):
            event_dict[key] = value.tolist()
        elif isinstance(value, tuple):
            event_dict[key] = tuple(
                v.item() if isinstance(v, np.generic) else v for v in value
            )
    return event_dict


def get_logger(name: Optional[str] = None) -> structlog.stdlib.BoundLogger:
    """Return a structlog logger, normally ``get_logger(__name__)``."""
    return structlog.get_logger(name)
