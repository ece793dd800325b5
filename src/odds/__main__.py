"""
Entry point: python -m odds [trials] [seed] [workers]
"""

import sys
import logging

from .config import get_config
from .demo import main
from .logging_utils import configure_logging


def run(argv=None) -> int:
    args = sys.argv[1:] if argv is None else argv
    configure_logging(level=get_config().logger_level, name="odds")
    logger = logging.getLogger("odds")
    try:
        values = [int(a, 0) for a in args[:3]]
        main(*values)
    except ValueError as e:
        logger.error(f"Invalid arguments {args}: {e}")
        logger.error("Usage: python -m odds [trials] [seed] [workers]")
        return 2
    return 0


if __name__ == "__main__":
    raise SystemExit(run())
