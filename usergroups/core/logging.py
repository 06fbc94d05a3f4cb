"""
Logging setup.

Installs a single stream handler on the root logger at the configured level.
"""

import logging
import sys
from typing import Optional

from usergroups.config.settings import settings

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: Optional[str] = None) -> None:
    """Configure root logging from settings (or an explicit level name)."""
    level_name = (level or settings.log_level).upper()
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logging.basicConfig(level=getattr(logging, level_name, logging.INFO), handlers=[handler], force=True)
