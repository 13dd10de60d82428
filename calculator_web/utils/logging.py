"""Console logging for the calculator service and the uvicorn server."""
from __future__ import annotations

import logging
from logging.config import dictConfig

LOG_FORMAT = "%(asctime)s.%(msecs)03d %(levelname)-8s %(name)s:%(lineno)d [%(threadName)s] %(message)s"
DATE_FORMAT = "%Y-%m-%dT%H:%M:%S"


def setup_logging(level: int | str = logging.INFO) -> None:
    """Route application and uvicorn logs to one console handler.

    Handlers run in the FastAPI threadpool, so the thread name is part of
    each line to tell concurrent calculations apart.
    """
    dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "calculator": {"format": LOG_FORMAT, "datefmt": DATE_FORMAT},
            },
            "handlers": {
                "stderr": {
                    "class": "logging.StreamHandler",
                    "formatter": "calculator",
                    "stream": "ext://sys.stderr",
                },
            },
            "root": {"handlers": ["stderr"], "level": logging.WARNING},
            "loggers": {
                "calculator_web": {"level": level},
                "uvicorn": {"handlers": ["stderr"], "level": level, "propagate": False},
                "uvicorn.access": {"handlers": ["stderr"], "level": level, "propagate": False},
            },
        }
    )
