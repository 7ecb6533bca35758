# SPDX-License-Identifier: Apache-2.0

"""Logging setup for the site reconciler."""

import sys
from typing import Optional

from loguru import logger

from .config import SETTINGS

DEFAULT_LOG_LEVEL = "INFO"
LOG_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | "
    "<cyan>{module}</cyan> | <level>{message}</level>"
)


def setup_logging(level: Optional[str] = None, sink=sys.stdout) -> int:
    """Replace loguru's default handler with the reconciler's handler.

    Args:
        level: Log level, defaults to NETBOX_SITE_LOG_LEVEL or INFO
        sink: Destination of the log records

    Returns:
        ID of the added loguru handler
    """
    if level is None:
        level = SETTINGS.get("NETBOX_SITE_LOG_LEVEL", DEFAULT_LOG_LEVEL)

    logger.remove()
    return logger.add(sink, format=LOG_FORMAT, level=str(level).upper())
