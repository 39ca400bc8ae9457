from __future__ import annotations
import logging
from typing import Optional


def configure_logging(log_level: Optional[str] = None) -> logging.Logger:
    """Configure root logging for the application.

    `log_level` is a level name as written in the server config (e.g.
    'DEBUG'); unknown or missing names fall back to WARNING. Returns a
    module logger for the caller.
    """
    default_level = logging.WARNING
    if log_level:
        numeric = getattr(logging, log_level.upper(), None)
        if isinstance(numeric, int):
            default_level = numeric

    # Reconfigure root handlers to use the selected level and format
    for handler in logging.root.handlers[:]:
        logging.root.removeHandler(handler)
    logging.basicConfig(level=default_level, format='%(asctime)s %(levelname)s [%(name)s]: %(message)s')
    logging.log(100, f'[roster]: Log level set to: {logging.getLevelName(default_level)}')
    logger = logging.getLogger(__name__)

    # Keep known noisy libraries quiet by default
    logging.getLogger('uvicorn.access').setLevel(logging.WARNING)
    logging.getLogger('httpx').setLevel(logging.WARNING)
    logger.info("Starting Roster server")

    return logger
