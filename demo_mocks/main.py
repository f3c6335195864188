"""Composition root for the demo_mocks project.

This module is the ONLY location that reads configuration and wires
objects together.

Module Structure:
- Configuration loading via config module
- Logging setup (text or one JSON object per line)
- Service construction
- Normal program flow execution
"""

import json
import logging
import sys

from demo_mocks.config import Settings, load_settings
from demo_mocks.core.service import Service, normal_program_flow

TEXT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class JsonFormatter(logging.Formatter):
    """Render each record as a single JSON object."""

    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "time": self.formatTime(record),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(payload)


def configure_logging(log_level: str, log_format: str) -> None:
    """Send log records at ``log_level`` and above to stdout.

    Unknown level names fall back to INFO.
    """
    handler = logging.StreamHandler(sys.stdout)
    if log_format == "json":
        handler.setFormatter(JsonFormatter())
    else:
        handler.setFormatter(logging.Formatter(TEXT_FORMAT))

    logging.basicConfig(
        level=getattr(logging, log_level, logging.INFO),
        handlers=[handler],
        force=True,
    )


def build_service(settings: Settings) -> Service:
    """Construct a service with every slot bound to its real implementation."""
    return Service(echo=print if settings.echo_output else None)


def run(settings: Settings) -> Service:
    """Run the normal program flow on a freshly built service.

    Returns:
        The service that was driven, for inspection by callers.
    """
    logger = logging.getLogger(__name__)
    service = build_service(settings)
    logger.info("Running normal program flow")
    normal_program_flow(service)
    logger.info("Normal program flow finished")
    return service


def main() -> None:
    """Application entry point.

    Loads configuration, configures logging, and runs the normal flow.

    Exit codes:
        0: Successful run
        1: Fatal configuration or runtime error
        130: Interrupted by user (SIGINT/KeyboardInterrupt)
    """
    logger = logging.getLogger(__name__)
    try:
        settings = load_settings()
        configure_logging(settings.log_level, settings.log_format)
        run(settings)
    except KeyboardInterrupt:
        logger.warning("Interrupted by user (SIGINT)")
        sys.exit(130)
    except Exception as e:
        logger.error(f"Fatal error: {e}", exc_info=True)
        sys.exit(1)


if __name__ == "__main__":
    main()
