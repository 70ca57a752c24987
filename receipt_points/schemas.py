from __future__ import annotations

from decimal import Decimal
from typing import List

from pydantic import BaseModel, ConfigDict, Field, field_validator

from receipt_points.models import Item, Receipt
from receipt_points.scoring import parse_purchase_date, parse_purchase_time

AMOUNT_PATTERN = r"^\d+\.\d{2}$"


class ItemIn(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    short_description: str = Field(alias="shortDescription")
    price: str = Field(pattern=AMOUNT_PATTERN)


class ReceiptIn(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    retailer: str
    purchase_date: str = Field(alias="purchaseDate", pattern=r"^\d{4}-\d{2}-\d{2}$")
    purchase_time: str = Field(alias="purchaseTime", pattern=r"^\d{2}:\d{2}$")
    total: str = Field(pattern=AMOUNT_PATTERN)
    items: List[ItemIn] = Field(default_factory=list)

    @field_validator("retailer")
    @classmethod
    def retailer_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("retailer must not be blank")
        return v

    @field_validator("purchase_date")
    @classmethod
    def real_calendar_date(cls, v: str) -> str:
        if parse_purchase_date(v) is None:
            raise ValueError(f"not a calendar date: {v}")
        return v

    @field_validator("purchase_time")
    @classmethod
    def real_time_of_day(cls, v: str) -> str:
        if parse_purchase_time(v) is None:
            raise ValueError(f"not a 24-hour time: {v}")
        return v

    def to_domain(self) -> Receipt:
        return Receipt(
            retailer=self.retailer,
            purchase_date=self.purchase_date,
            purchase_time=self.purchase_time,
            total=Decimal(self.total),
            items=tuple(Item(short_description=i.short_description, price=Decimal(i.price)) for i in self.items),
        )


class ReceiptIdOut(BaseModel):
    id: str


class PointsOut(BaseModel):
    points: int
