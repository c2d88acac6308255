"""Logging setup shared by the PocketGuard host and scripts."""

from __future__ import annotations

import logging

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

_configured = False


def configure_logging(level: str | int = "INFO") -> None:
    """Attach a single stream handler to the root logger.

    Streamlit reruns the script on every interaction, so repeated calls only
    adjust the level.
    """

    global _configured

    root = logging.getLogger()
    if not _configured:
        logging.basicConfig(format=LOG_FORMAT)
        _configured = True
    root.setLevel(level.upper() if isinstance(level, str) else level)
