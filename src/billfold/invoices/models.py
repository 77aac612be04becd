#!/usr/bin/env python3
"""
Invoice Records

An invoice is numbered, references its project by name, and lists line items.
The due date is computed once at creation and stored, never recomputed.
"""

from dataclasses import dataclass, field
from typing import Any

from ..core.dates import DateString
from ..core.exceptions import SchemaError
from ..core.ids import Id
from ..core.money import PriceUSD
from ..core.schema import check_fields, get_date, get_int, get_list, get_number, get_str


@dataclass(frozen=True)
class LineItem:
    """One billed line: quantity times unit price."""

    description: str
    quantity: float
    unit_price: PriceUSD

    def total(self) -> float:
        return self.unit_price * self.quantity

    def to_dict(self) -> dict[str, Any]:
        return {
            "description": self.description,
            "quantity": self.quantity,
            "unit_price": self.unit_price.amount,
        }

    @classmethod
    def from_dict(cls, data: Any) -> "LineItem":
        record = "LineItem"
        check_fields(data, record, required=["description", "quantity", "unit_price"])
        return cls(
            description=get_str(data, "description", record),
            quantity=get_number(data, "quantity", record),
            unit_price=PriceUSD(get_number(data, "unit_price", record)),
        )


@dataclass(frozen=True)
class Invoice:
    """A numbered bill for one project."""

    number: int
    project_ref: Id
    date: DateString
    due_date: DateString
    items: list[LineItem] = field(default_factory=list)

    def total(self) -> float:
        """Sum of the line item totals (not rounded)."""
        return sum((item.total() for item in self.items), 0.0)

    def describe(self) -> str:
        return f"#{self.number} on {self.date} (due {self.due_date}) for {self.project_ref}"

    def to_dict(self) -> dict[str, Any]:
        return {
            "number": self.number,
            "project_ref": str(self.project_ref),
            "date": str(self.date),
            "due_date": str(self.due_date),
            "items": [item.to_dict() for item in self.items],
        }

    @classmethod
    def from_dict(cls, data: Any) -> "Invoice":
        record = "Invoice"
        check_fields(data, record, required=["number", "project_ref", "date", "due_date", "items"])
        try:
            project_ref = Id(get_str(data, "project_ref", record))
        except ValueError as e:
            raise SchemaError(f"{record}.project_ref: {e}") from e
        return cls(
            number=get_int(data, "number", record),
            project_ref=project_ref,
            date=get_date(data, "date", record),
            due_date=get_date(data, "due_date", record),
            items=[LineItem.from_dict(item) for item in get_list(data, "items", record)],
        )
