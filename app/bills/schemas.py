"""Pydantic schemas for the bills dashboard and reminders."""
from pydantic import BaseModel
from datetime import date
from typing import Optional, Literal, List
from decimal import Decimal

from app.entries.schemas import Entry


BillUrgency = Literal["paid", "overdue", "urgent", "upcoming"]


class MonthBill(BaseModel):
    """A bill falling due in the current month."""
    id: str
    name: str
    amount: Decimal
    due_date: date
    days_left: int  # negative when overdue
    next_due_label: str  # "May 15"
    is_paid: bool
    paid_date_label: Optional[str] = None
    variable_amount: bool = False
    status: str  # "Due in 3 days", "Overdue by 2 days", "Paid · May 14"
    urgency: BillUrgency


class MonthBillsResponse(BaseModel):
    """Current-month bill table, unpaid first."""
    month_label: str
    paid_count: int
    total_count: int
    bills: List[MonthBill]


class ReminderEntry(Entry):
    """A bill entry together with the address its owner is reminded at."""
    email: str


class RemindersRequest(BaseModel):
    entries: List[ReminderEntry] = []
    today: Optional[date] = None


class ReminderRunResponse(BaseModel):
    """Outcome of one reminder run."""
    sent: int
    day: int
    total: int
