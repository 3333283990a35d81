"""Shared utilities: datetime and generators."""

from app.shared.utils.datetime import (
    day_id,
    end_of_day,
    ensure_utc,
    start_of_day,
    start_of_week,
    utc_now,
    week_of_month,
)
from app.shared.utils.generators import generate_cuid

__all__ = [
    "generate_cuid",
    "utc_now",
    "ensure_utc",
    "start_of_day",
    "end_of_day",
    "start_of_week",
    "week_of_month",
    "day_id",
]
