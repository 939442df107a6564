# app\shared\logging_config.py
import sys
import logging
import structlog
from app.shared.config import settings

def configure_logging():
    """
    Configures structlog and the standard logging library to emit
    structured JSON logs (Production) or colored text logs (Development).
    """

    # 1. Define the chain of processors (Middleware for logs)
    processors = [
        structlog.contextvars.merge_contextvars, # Merge context bound per request
        structlog.processors.add_log_level,      # Add "level": "info"
        structlog.processors.TimeStamper(fmt="iso"), # Add "timestamp": "2023-..."
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,    # Format exceptions nicely
    ]

    # 2. Determine the Output Format
    if settings.LOG_FORMAT == "json":
        # Production: Machine-readable JSON
        processors.append(structlog.processors.JSONRenderer())
    else:
        # Development: Human-readable colored console output
        processors.append(structlog.dev.ConsoleRenderer())

    level = logging.getLevelName(settings.LOG_LEVEL.upper())
    if not isinstance(level, int):
        level = logging.INFO

    # 3. Configure Structlog
    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )

    # 4. Standard Library Logging (e.g., from Uvicorn/FastAPI)
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=level,
    )
