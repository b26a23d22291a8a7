"""
Logging setup for the blood bank service.

Records created, updated and deleted by the services are logged at
INFO, failed donor updates after a unit is recorded at WARNING and
database outages at ERROR.  ``setup_logging`` sends all of it to the
console and, when ``LOG_FILE`` is set, to that file as well.
"""

import logging
from pathlib import Path
from typing import Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> None:
    """Configure the root logger for the API process.

    Parameters
    ----------
    level : str
        Level name from ``LOG_LEVEL``; unknown names mean ``INFO``.
    logfile : Optional[str]
        Optional path from ``LOG_FILE`` to append log records to.

    Calling it again is a no-op, so ``create_app`` may run many times
    in one process (the test suite does).
    """
    root = logging.getLogger()
    if root.handlers:
        return

    numeric_level = getattr(logging, level.upper(), logging.INFO)
    root.setLevel(numeric_level)
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    handlers = [logging.StreamHandler()]
    if logfile:
        handlers.append(logging.FileHandler(Path(logfile).resolve(), encoding="utf-8"))
    for handler in handlers:
        handler.setFormatter(formatter)
        root.addHandler(handler)

    # Server selection and heartbeat chatter from the driver.
    logging.getLogger("pymongo").setLevel(max(numeric_level, logging.WARNING))
