import logging
import sys
from pathlib import Path
from typing import Optional, Union

LOG_FORMAT = "%(asctime)s %(levelname)-7s %(name)s: %(message)s"


def setup_logging(level: Union[int, str] = logging.INFO, log_file: Optional[Path] = None):
    """
    Set up logging for the application.

    Args:
        level: Logging level, as a number or a name such as "DEBUG".
        log_file: Optional file that receives the same records as the console.
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO

    # Clear existing handlers to avoid duplicates
    root_logger = logging.getLogger()
    for handler in list(root_logger.handlers):
        root_logger.removeHandler(handler)

    formatter = logging.Formatter(LOG_FORMAT)

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    if log_file:
        log_file = Path(log_file)
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)

    root_logger.setLevel(level)

    # argostranslate/stanza are chatty at INFO
    for noisy in ("stanza", "argostranslate", "urllib3"):
        logging.getLogger(noisy).setLevel(max(level, logging.WARNING))
