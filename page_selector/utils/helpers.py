"""Helper utilities for logging setup and page-number parsing."""

from __future__ import annotations

import logging
from typing import Optional

LOG_FORMAT = "%(asctime)s : %(levelname)s : %(module)s : %(funcName)s: %(message)s"
LOG_DATE_FORMAT = "%d-%b-%y %H:%M:%S"


def get_logging_level(level_name: str) -> int:
    """Map a level name to a logging constant, defaulting to WARNING."""
    level = getattr(logging, str(level_name).strip().upper(), logging.WARNING)
    return level if isinstance(level, int) else logging.WARNING


def configure_logging(level_name: str) -> None:
    """Configure root logging once for the app process."""
    logging.basicConfig(
        level=get_logging_level(level_name),
        format=LOG_FORMAT,
        datefmt=LOG_DATE_FORMAT,
    )


def normalize_text(value: object) -> str:
    """Normalize a value into a stripped string, or empty string for nulls."""
    if value is None:
        return ""
    if isinstance(value, (list, tuple)):
        value = value[0] if value else ""
    return str(value).strip()


def parse_page_number(value: object) -> Optional[int]:
    """Parse a page number from user input; return None when it is not an integer."""
    raw_value = normalize_text(value)
    if not raw_value:
        return None
    try:
        return int(raw_value)
    except ValueError:
        return None
