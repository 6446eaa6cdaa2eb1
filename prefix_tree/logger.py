"""Logging setup shared by the prefix tree library and its benchmarks."""

import logging
import logging.handlers
from pathlib import Path
from typing import Union

LOG_FILE_PATH = Path(__file__).parent.parent / "logs/prefix_tree.log"
_LOG_FORMAT = (
    "level=%(levelname)s | time=%(asctime)s | process=%(process)d | "
    "module=%(module)s | funcName=%(funcName)s | "
    "lineno=%(lineno)d | message=%(message)s"
)


def setup_logging(
    log_file: Path = LOG_FILE_PATH,
    level: Union[int, str] = logging.INFO,
) -> logging.Handler:
    """Send the records of the root logger to a rotating log file.

    Handlers installed by an earlier call are replaced, so calling this
    more than once does not duplicate records.

    Args:
        log_file (Path): The file to write log records to.
        level (Union[int, str]): The level of the root logger,
        as a number or a level name such as ``"DEBUG"``.

    Raises:
        ValueError: If `level` is not a known level name.

    Returns:
        logging.Handler: The file handler that was installed.

    """
    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
        handler.close()

    log_file.parent.mkdir(parents=True, exist_ok=True)
    file_handler = logging.handlers.RotatingFileHandler(
        log_file,
        maxBytes=10 * 1024 * 1024,
        backupCount=5,
        encoding="utf-8",
    )
    file_handler.setFormatter(
        logging.Formatter(_LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"),
    )
    root_logger.addHandler(file_handler)
    return file_handler
