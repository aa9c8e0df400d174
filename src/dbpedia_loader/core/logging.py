import sys
import logging
import structlog
from dbpedia_loader.config import settings


def add_app_name(logger, method_name, event_dict):
    """Tag every event with the application name."""
    event_dict.setdefault("app", settings.app_name)
    return event_dict


def setup_logging():
    """
    Configures structured logging for a load run.
    - JSON lines when LOADER_APP_ENV=production
    - Colorful console output otherwise

    Run-wide values bound with bind_run_context() are merged into every event.
    """
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=settings.LOG_LEVEL.upper(),
    )
    # One DEBUG line per HTTP connection drowns the batch events
    logging.getLogger("urllib3").setLevel(logging.WARNING)

    processors = [
        structlog.contextvars.merge_contextvars,
        add_app_name,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
    ]
    if settings.APP_ENV == "production":
        processors += [
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]
    else:
        processors.append(structlog.dev.ConsoleRenderer())

    structlog.configure(
        processors=processors,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )


def bind_run_context(**values):
    """Attach values (index, language...) to all events of the current run."""
    structlog.contextvars.clear_contextvars()
    structlog.contextvars.bind_contextvars(**values)


def get_logger(name: str):
    """Return a logger bound with the module name"""
    return structlog.get_logger(name)
