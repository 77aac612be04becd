#!/usr/bin/env python3
"""
DateString Primitive Type

Calendar date stored in YYYY-MM-DD form. Instances only exist for valid
Gregorian dates, and arithmetic goes through the native `datetime.date`.
"""

import re
from dataclasses import dataclass
from datetime import date, timedelta

_ISO_DATE = re.compile(r"^(\d{4})-(\d{2})-(\d{2})$")


@dataclass(frozen=True)
class DateString:
    """
    Immutable YYYY-MM-DD date.

    Examples:
        >>> DateString("2023-02-17").to_long_form()
        'February 17, 2023'
        >>> str(DateString("2023-02-17").add_days(14))
        '2023-03-03'
    """

    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str):
            raise ValueError(f"Date must be a YYYY-MM-DD string, got {self.value!r}")
        match = _ISO_DATE.match(self.value)
        if match is None:
            raise ValueError(f"Date must be in YYYY-MM-DD format: {self.value!r}")
        year, month, day = (int(part) for part in match.groups())
        try:
            date(year, month, day)
        except ValueError as e:
            raise ValueError(f"Invalid calendar date {self.value!r}: {e}") from None

    @classmethod
    def from_date(cls, value: date) -> "DateString":
        """Create from a native date."""
        return cls(value.isoformat())

    @classmethod
    def today(cls) -> "DateString":
        """Get today's date."""
        return cls.from_date(date.today())

    def to_date(self) -> date:
        """Convert to a native date."""
        return date.fromisoformat(self.value)

    def add_days(self, days: int) -> "DateString":
        """Return the date `days` days later."""
        return DateString.from_date(self.to_date() + timedelta(days=days))

    def to_long_form(self) -> str:
        """Format as e.g. "January 7, 2023"."""
        d = self.to_date()
        return f"{d:%B} {d.day}, {d.year}"

    def __lt__(self, other: "DateString") -> bool:
        return self.to_date() < other.to_date()

    def __str__(self) -> str:
        return self.value
