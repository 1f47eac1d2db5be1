# logger.py
import logging
import sys
from typing import Sequence

LOGGER_NAME = "cloudinit_generator"
LOG_PATHS = (
    "/var/log/cloudinit_generator.log",
    "/tmp/cloudinit_generator.log",
)
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%dT%H:%M:%S"


def _open_log_file(paths: Sequence[str]) -> logging.Handler:
    """First writable path wins; stderr only if none of them opens."""
    for path in paths:
        try:
            return logging.FileHandler(path)
        except OSError:
            continue
    return logging.NullHandler()


def setup_logger(
    name: str = LOGGER_NAME, paths: Sequence[str] = LOG_PATHS
) -> logging.Logger:
    logger = logging.getLogger(name)
    if logger.handlers:
        return logger
    logger.setLevel(logging.DEBUG)
    fmt = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)

    file_handler = _open_log_file(paths)
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(fmt)

    # the terminal belongs to the TUI, so only warnings reach stderr
    console = logging.StreamHandler(sys.stderr)
    console.setLevel(logging.WARNING)
    console.setFormatter(fmt)

    logger.addHandler(file_handler)
    logger.addHandler(console)
    return logger

log = setup_logger()
