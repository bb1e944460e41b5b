"""
Logging utilities for entity_scanner CLI.

Provides logging setup with tqdm compatibility.
"""

import logging
import sys
import time
from pathlib import Path

from entity_scanner.utils.tqdm_logging import TqdmLoggingHandler

# Third-party loggers that are raised to ERROR
NOISY_LOGGERS = ("openai", "httpx", "httpcore", "urllib3")


class FlushingFileHandler(logging.FileHandler):
    """File handler that flushes after each record."""

    def emit(self, record):
        super().emit(record)
        self.flush()


def setup_logging(
    script_name: str,
    execute: bool = False,
    log_dir: Path = Path("logs"),
    tqdm_compatible: bool = True,
) -> logging.Logger:
    """
    Set up logging for a script.

    Args:
        script_name: Name of the script (for log file naming)
        execute: If True, log to file + console. If False, only console.
        log_dir: Directory for log files
        tqdm_compatible: If True, use TqdmLoggingHandler for clean progress bar output

    Returns:
        Configured logger instance
    """
    for noisy_logger in NOISY_LOGGERS:
        logging.getLogger(noisy_logger).setLevel(logging.ERROR)

    console_formatter = logging.Formatter("%(message)s")
    if tqdm_compatible:
        console_handler: logging.Handler = TqdmLoggingHandler(level=logging.INFO)
    else:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setLevel(logging.INFO)
    console_handler.setFormatter(console_formatter)

    logger = logging.getLogger(script_name)
    logger.setLevel(logging.DEBUG)
    logger.handlers = []  # Clear any existing handlers
    logger.addHandler(console_handler)
    logger.propagate = False

    # Route entity_scanner.* loggers through the same handlers
    pkg_logger = logging.getLogger("entity_scanner")
    pkg_logger.setLevel(logging.DEBUG if execute else logging.INFO)
    pkg_logger.handlers = []
    pkg_logger.addHandler(console_handler)
    pkg_logger.propagate = False

    if execute:
        log_dir.mkdir(parents=True, exist_ok=True)
        timestamp = time.strftime("%Y%m%d_%H%M%S")
        log_file = log_dir / f"{script_name}_{timestamp}.log"

        # File handler: DEBUG and above (detailed logs)
        file_handler = FlushingFileHandler(log_file, mode="a", encoding="utf-8")
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
        )
        logger.addHandler(file_handler)
        pkg_logger.addHandler(file_handler)

        logger.info(f"Log file: {log_file}")

    return logger
