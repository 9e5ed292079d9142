# needahand/utils/logging.py
import logging
import sys
from typing import Optional

from ..config import settings


def setup_logging(level: Optional[str] = None) -> None:
    """Configure root logging for the API process."""
    log_level = level or settings.log_level

    logging.basicConfig(
        level=getattr(logging, log_level.upper(), logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stdout)]
    )

    # asyncpg is chatty at DEBUG
    logging.getLogger("asyncpg").setLevel(logging.WARNING)

    logging.getLogger(__name__).info(f"Logging configured - Level: {log_level}")
