from dataclasses import dataclass, field, fields
from decimal import Decimal
from typing import Tuple


@dataclass(frozen=True)
class Item:
    short_description: str
    price: Decimal


@dataclass(frozen=True)
class Receipt:
    """A submitted purchase receipt.

    Amounts are already parsed to Decimal. Date and time stay as submitted
    text (``YYYY-MM-DD`` / ``HH:MM``) and are parsed by the scoring rules.
    """
    retailer: str
    purchase_date: str
    purchase_time: str
    total: Decimal
    items: Tuple[Item, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class PointsBreakdown:
    alpha_numeric_points: int = 0
    round_dollar_points: int = 0
    multiple_of_twenty_five_cents_points: int = 0
    item_points: int = 0
    trimmed_length_points: int = 0
    odd_day_points: int = 0
    time_of_purchase_points: int = 0

    @property
    def total_points(self) -> int:
        return sum(getattr(self, f.name) for f in fields(self))


@dataclass(frozen=True)
class ScoreRecord:
    id: str
    total_points: int
