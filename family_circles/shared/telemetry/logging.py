"""Logging configuration for the service (stdout, one format, request ids)."""

import logging
import sys

from family_circles.core.config import get_settings
from family_circles.shared.context import get_request_id

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - [%(request_id)s] %(message)s"


class RequestIdFilter(logging.Filter):
    """Adds request_id to every record ('-' outside a request)."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.request_id = get_request_id() or "-"
        return True


def setup_logging() -> None:
    """Configure logging once at startup.

    Package level is DEBUG when settings.debug is True, otherwise INFO.
    SQL statement logging follows database_echo rather than debug.
    """
    settings = get_settings()
    level = logging.DEBUG if settings.debug else logging.INFO
    handler = logging.StreamHandler(sys.stdout)
    handler.addFilter(RequestIdFilter())
    logging.basicConfig(level=level, format=LOG_FORMAT, handlers=[handler])
    logging.getLogger("family_circles").setLevel(level)
    logging.getLogger("sqlalchemy.engine").setLevel(
        logging.INFO if settings.database_echo else logging.WARNING
    )
