"""
Entry Classifier - short recurrence badges for the entry list.

The labels read the same due-day/due-month fields the recurrence engine
uses, so an entry that the dashboard can schedule always gets a badge.
"""
from dataclasses import dataclass
from datetime import date
from typing import Optional

from app.entries.schemas import Entry
from app.recurrence import OneTimeObligation, QuarterlyObligation, YearlyObligation

MONTH_NAMES = ["Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec"]


@dataclass
class RecurrenceLabel:
    """Badge text and whether to render it as overdue."""
    label: str
    overdue: bool = False


def ordinal(n: int) -> str:
    """1 -> '1st', 12 -> '12th', 22 -> '22nd'."""
    if 10 <= n % 100 <= 20:
        suffix = "th"
    else:
        suffix = {1: "st", 2: "nd", 3: "rd"}.get(n % 10, "th")
    return f"{n}{suffix}"


def short_date(d: date) -> str:
    """'Jun 2'"""
    return f"{MONTH_NAMES[d.month - 1]} {d.day}"


def month_label(d: date) -> str:
    """'Jun 2024'"""
    return f"{MONTH_NAMES[d.month - 1]} {d.year}"


def recurrence_label(entry: Entry, today: date) -> Optional[RecurrenceLabel]:
    """Badge for a bill or expense, or None when there is nothing to show."""
    if not entry.is_scheduled():
        return None

    obligation = entry.to_obligation()

    if isinstance(obligation, OneTimeObligation):
        due = obligation.due_date
        if due is None:
            return None
        when = f"{MONTH_NAMES[due.month - 1]} {ordinal(due.day)} {due.year}"
        if due < today:
            return RecurrenceLabel(label=f"Overdue · {when}", overdue=True)
        return RecurrenceLabel(label=f"Due {when}")

    if obligation.due_day is None:
        return None

    if isinstance(obligation, YearlyObligation):
        month_name = MONTH_NAMES[obligation.due_month - 1] if obligation.due_month else "?"
        return RecurrenceLabel(label=f"Yearly · {month_name} {ordinal(obligation.due_day)}")

    if isinstance(obligation, QuarterlyObligation):
        return RecurrenceLabel(label=f"Quarterly · {ordinal(obligation.due_day)}")

    return RecurrenceLabel(label=f"Due {ordinal(obligation.due_day)}")


def paid_label(entry: Entry) -> Optional[str]:
    """'Paid · Jun 2' once a payment has been recorded."""
    if entry.last_paid_date is None:
        return None
    return f"Paid · {short_date(entry.last_paid_date)}"
