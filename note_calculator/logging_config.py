"""Shared logging setup for the calculator pages."""
from __future__ import annotations

import logging
from typing import Union

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def configure_logging(level: Union[int, str] = logging.INFO) -> None:
    """Configure root logging if it has not been configured yet.

    Streamlit reruns page scripts on every interaction, so this must be a
    no-op once a handler exists.
    """

    if logging.getLogger().handlers:
        return

    logging.basicConfig(level=level, format=LOG_FORMAT)
