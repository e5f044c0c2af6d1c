"""
Console logging for the API server and its launcher.

The level is APP_LOG_LEVEL (Settings.log_level) unless the caller passes
one explicitly, e.g. from the launcher's --log_level flag.
"""

import logging
from typing import Optional

from sidecar_encoder.settings import get_settings

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def setup_logging(level: Optional[str] = None) -> int:
    """
    Configure a single console handler via logging.basicConfig.

    Returns the numeric level that was applied.
    """
    level_name = (level or get_settings().log_level).upper()
    level_value = logging.getLevelName(level_name)
    # Unknown names come back as "Level <name>"
    if not isinstance(level_value, int):
        level_value = logging.INFO

    logging.basicConfig(
        level=level_value,
        format=LOG_FORMAT,
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    return level_value
