"""
Bills Dashboard - the "Bills this month" table.

For every bill due in the current calendar month the dashboard shows how many
days are left, whether the current cycle is already paid and a status line.
Unpaid bills come first, soonest due first; paid bills sink to the bottom.
"""
from datetime import date
from typing import List, Optional, Tuple

from app.bills.schemas import MonthBill, MonthBillsResponse, BillUrgency
from app.entries.classifier import short_date, month_label
from app.entries.schemas import Entry
from app.recurrence import due_date_in_period, is_satisfied_for_current_cycle

URGENT_WITHIN_DAYS = 3


def _plural_days(n: int) -> str:
    return f"{n} day{'s' if n != 1 else ''}"


def describe_status(is_paid: bool, days_left: int, paid_date_label: Optional[str] = None) -> Tuple[str, BillUrgency]:
    """Status text and urgency bucket for one bill row."""
    if is_paid:
        label = f"Paid · {paid_date_label}" if paid_date_label else "Paid"
        return label, "paid"
    if days_left < 0:
        return f"Overdue by {_plural_days(abs(days_left))}", "overdue"

    urgency: BillUrgency = "urgent" if days_left <= URGENT_WITHIN_DAYS else "upcoming"
    if days_left == 0:
        return "Due today", urgency
    if days_left == 1:
        return "Due tomorrow", urgency
    return f"Due in {days_left} days", urgency


def build_month_bills(entries: List[Entry], today: date) -> MonthBillsResponse:
    """Bill rows due in ``today``'s month, unpaid first by days left."""
    bills: List[MonthBill] = []

    for entry in entries:
        if entry.category != "bill":
            continue

        obligation = entry.to_obligation()
        due = due_date_in_period(obligation, today.year, today.month)
        if due is None:
            continue

        days_left = (due - today).days
        is_paid = is_satisfied_for_current_cycle(obligation, today)
        paid_date_label = short_date(entry.last_paid_date) if entry.last_paid_date else None
        status, urgency = describe_status(is_paid, days_left, paid_date_label)

        bills.append(MonthBill(
            id=entry.id,
            name=entry.name,
            amount=entry.amount,
            due_date=due,
            days_left=days_left,
            next_due_label=short_date(due),
            is_paid=is_paid,
            paid_date_label=paid_date_label,
            variable_amount=entry.variable_amount,
            status=status,
            urgency=urgency,
        ))

    bills.sort(key=lambda b: (b.is_paid, b.days_left))

    return MonthBillsResponse(
        month_label=month_label(today),
        paid_count=sum(1 for b in bills if b.is_paid),
        total_count=len(bills),
        bills=bills,
    )
