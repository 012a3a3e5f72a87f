import logging
import sys
from logging import StreamHandler

from event_rsvp.config.settings import settings

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# libraries that log every statement or request at DEBUG
NOISY_LOGGERS = ("aiosqlite", "asyncio", "httpcore", "httpx")


def setup_logging() -> None:
    level = logging.DEBUG if settings.debug else logging.INFO
    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        handlers=[StreamHandler(sys.stdout)],
    )
    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(max(level, logging.INFO))
