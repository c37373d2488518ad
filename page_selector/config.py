"""Application configuration constants."""

import os
from pathlib import Path
from typing import Optional

ROOT_DIR = Path(__file__).resolve().parent
ASSETS_DIR = ROOT_DIR / "assets"


def _env_number(name: str, default: int, minimum: Optional[int] = None) -> int:
    raw_value = os.getenv(name, "").strip()
    if not raw_value:
        return default
    try:
        value = int(raw_value)
    except ValueError:
        return default
    if minimum is not None and value < minimum:
        return default
    return value


def _env_flag(name: str, default: bool) -> bool:
    raw_value = os.getenv(name, "").strip().lower()
    if not raw_value:
        return default
    return raw_value in {"1", "true", "yes", "on"}


LOG_LEVEL = os.getenv("PAGE_SELECTOR_LOG_LEVEL", "INFO")

# Overflow popover geometry: one 40px button per row, about five rows visible.
ITEM_EXTENT = _env_number("PAGE_SELECTOR_ITEM_EXTENT", 40, minimum=1)
VIEWPORT_EXTENT = _env_number("PAGE_SELECTOR_VIEWPORT_EXTENT", 186, minimum=1)
GROUP_TRIGGER_DISABLED = _env_flag("PAGE_SELECTOR_GROUP_DISABLED", False)

DEFAULT_TOTAL_PAGES = _env_number("PAGE_SELECTOR_TOTAL_PAGES", 50, minimum=1)
DEFAULT_PAGE_SIZE = 25
PAGE_SIZE_OPTIONS = [10, 25, 50, 100]
DEMO_ROW_COUNT = DEFAULT_TOTAL_PAGES * DEFAULT_PAGE_SIZE

PAGE_QUERY_PARAM = "page"

TABLE_COLUMNS = ["row_id", "page", "label"]
