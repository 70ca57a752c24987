import math
from datetime import date, datetime, time
from decimal import Decimal
from typing import Optional, Sequence

from receipt_points.models import Item, PointsBreakdown, Receipt

POINTS_PER_ALPHANUMERIC = 1
POINTS_ROUND_DOLLAR = 50
POINTS_QUARTER_MULTIPLE = 25
POINTS_PER_ITEM_PAIR = 5
DESCRIPTION_LENGTH_FACTOR = 3
DESCRIPTION_PRICE_MULTIPLIER = Decimal("0.2")
POINTS_ODD_DAY = 6
POINTS_AFTERNOON = 10

QUARTER = Decimal("0.25")
AFTERNOON_START = time(14, 0)
AFTERNOON_END = time(16, 0)

DATE_FORMAT = "%Y-%m-%d"
TIME_FORMAT = "%H:%M"


def parse_purchase_date(text: str) -> Optional[date]:
    """Parse ``YYYY-MM-DD`` into a date, or None if it is not a real calendar date."""
    try:
        return datetime.strptime(text.strip(), DATE_FORMAT).date()
    except (ValueError, AttributeError):
        return None


def parse_purchase_time(text: str) -> Optional[time]:
    """Parse 24-hour ``HH:MM`` into a time, or None."""
    try:
        return datetime.strptime(text.strip(), TIME_FORMAT).time()
    except (ValueError, AttributeError):
        return None


def alpha_numeric_points(retailer: str) -> int:
    # str.isalnum() accepts non-ASCII letters too
    return sum(POINTS_PER_ALPHANUMERIC for c in retailer if c.isascii() and c.isalnum())


def round_dollar_points(total: Decimal) -> int:
    if total > 0 and total % 1 == 0:
        return POINTS_ROUND_DOLLAR
    return 0


def quarter_multiple_points(total: Decimal) -> int:
    if total > 0 and total % QUARTER == 0:
        return POINTS_QUARTER_MULTIPLE
    return 0


def item_count_points(items: Sequence[Item]) -> int:
    return (len(items) // 2) * POINTS_PER_ITEM_PAIR


def trimmed_length_points(items: Sequence[Item]) -> int:
    """
    For every item whose trimmed description length is a positive multiple of 3,
    add price * 0.2 rounded up to the next integer.
    """
    points = 0
    for item in items:
        length = len(item.short_description.strip())
        if length and length % DESCRIPTION_LENGTH_FACTOR == 0:
            points += math.ceil(item.price * DESCRIPTION_PRICE_MULTIPLIER)
    return points


def odd_day_points(purchase_date: str) -> int:
    d = parse_purchase_date(purchase_date)
    if d is not None and d.day % 2 == 1:
        return POINTS_ODD_DAY
    return 0


def time_of_purchase_points(purchase_time: str) -> int:
    t = parse_purchase_time(purchase_time)
    if t is not None and AFTERNOON_START <= t < AFTERNOON_END:
        return POINTS_AFTERNOON
    return 0


def compute_points(receipt: Receipt) -> PointsBreakdown:
    """Score a receipt. Every rule is evaluated independently; the result is never an error."""
    return PointsBreakdown(
        alpha_numeric_points=alpha_numeric_points(receipt.retailer),
        round_dollar_points=round_dollar_points(receipt.total),
        multiple_of_twenty_five_cents_points=quarter_multiple_points(receipt.total),
        item_points=item_count_points(receipt.items),
        trimmed_length_points=trimmed_length_points(receipt.items),
        odd_day_points=odd_day_points(receipt.purchase_date),
        time_of_purchase_points=time_of_purchase_points(receipt.purchase_time),
    )
