import logging

from anystore.functools import weakref_cache as cache
from anystore.logging import get_logger
from servicelayer.logs import configure_logging
from structlog.stdlib import BoundLogger
from werkzeug.local import LocalProxy

from formhelper.settings import Settings

log: BoundLogger = get_logger(__name__)


@cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


settings = LocalProxy(get_settings)


def init_formhelper() -> None:
    """Initialize formhelper logging."""
    settings = get_settings()
    if settings.debug:
        configure_logging(level=logging.DEBUG)
    else:
        configure_logging(level=logging.INFO)
    log.debug("Formhelper initialized", debug=settings.debug)
