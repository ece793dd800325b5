"""
logging_utils.py
"""

__all__ = ["configure_logging", "ColorFormatter"]

import os
import time
import logging
from typing import Optional, Union
from logging.handlers import RotatingFileHandler
from pathlib import Path

from colorama import Fore, Style, init as colorama_init

PathLike = Union[str, os.PathLike]


class ColorFormatter(logging.Formatter):
    """Colorized console formatter."""
    COLORS = {
        "DEBUG":    Fore.CYAN,
        "INFO":     Fore.GREEN,
        "WARNING":  Fore.YELLOW,
        "ERROR":    Fore.RED,
        "CRITICAL": Fore.RED + Style.BRIGHT,
    }

    def format(self, record: logging.LogRecord) -> str:
        color = self.COLORS.get(record.levelname, "")
        reset = Style.RESET_ALL
        record.process_str = f"{record.process:5d}"
        record.level_str = f"{record.levelname:<5s}"
        return (
            f"[{self.formatTime(record, self.datefmt)}] "
            f"[{record.process_str}] "
            f"[{color}{record.level_str}{reset}] "
            f"[{record.name}] "
            f"{record.getMessage()}"
        )


def configure_logging(level: int = logging.INFO,
                      log_dir: Optional[PathLike] = None,
                      name: Optional[str] = "odds",
                      run_prefix: str = "run") -> Optional[Path]:
    """Configure colorized console logging, plus a rotating file if `log_dir` is given.

    Returns:
        Path of the log file, or None for console-only logging.
    """
    colorama_init(strip=False, convert=True)

    mono_fmt = "[%(asctime)s] [%(process)5d] [%(levelname)-5s] [%(name)s] %(message)s"
    datefmt = "%H:%M:%S"

    logger = logging.getLogger(name)
    logger.setLevel(level)
    for h in list(logger.handlers):
        logger.removeHandler(h)
        h.close()

    ch = logging.StreamHandler()
    ch.setFormatter(ColorFormatter(datefmt=datefmt))
    logger.addHandler(ch)

    log_path = None
    if log_dir is not None:
        log_dir = Path(log_dir)
        log_dir.mkdir(parents=True, exist_ok=True)
        ts = time.strftime("%Y-%m-%d_%H%M%S")
        log_path = log_dir / f"{run_prefix}_PID{os.getpid()}_{ts}.log"
        fh = RotatingFileHandler(log_path, maxBytes=5_000_000, backupCount=5)
        fh.setFormatter(logging.Formatter(mono_fmt, datefmt))
        logger.addHandler(fh)

    logger.debug(f"Logging initialized - PID {os.getpid()}; file {log_path}")
    return log_path
