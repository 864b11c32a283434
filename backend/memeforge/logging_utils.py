import logging
import sys
from typing import Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s | %(message)s"


def setup_logging(level: Optional[str] = None) -> None:
    """Configure root logger once per process."""
    log_level = (level or "INFO").upper()
    root_logger = logging.getLogger()
    if root_logger.handlers:
        return

    logging.basicConfig(
        level=getattr(logging, log_level, logging.INFO),
        format=LOG_FORMAT,
        handlers=[logging.StreamHandler(sys.stdout)],
    )
    # The SDK's transport logs every request at INFO
    logging.getLogger("httpx").setLevel(logging.WARNING)
