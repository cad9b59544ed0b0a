"""Application wide settings. Read once from the environment at import time."""

import logging
import os
from typing import Optional

LOG_LEVEL = os.environ.get("CHECKERS_LOG_LEVEL", "WARNING").upper()
LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: Optional[str] = None) -> None:
    """Called by whatever process hosts the engine. The engine modules themselves only ever call logging.getLogger(__name__)."""
    logging.basicConfig(level=(level or LOG_LEVEL).upper(), format=LOG_FORMAT)
