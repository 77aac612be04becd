#!/usr/bin/env python3
"""
Receipt Record

A receipt records payment of exactly one invoice and shares its number.
"""

from dataclasses import dataclass
from typing import Any

from ..core.dates import DateString
from ..core.schema import check_fields, get_date, get_int, get_str


@dataclass(frozen=True)
class Receipt:
    """Payment record for one invoice."""

    invoice_num: int
    date: DateString
    payment_method: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "invoice_num": self.invoice_num,
            "date": str(self.date),
            "payment_method": self.payment_method,
        }

    @classmethod
    def from_dict(cls, data: Any) -> "Receipt":
        record = "Receipt"
        check_fields(data, record, required=["invoice_num", "date", "payment_method"])
        return cls(
            invoice_num=get_int(data, "invoice_num", record),
            date=get_date(data, "date", record),
            payment_method=get_str(data, "payment_method", record),
        )
