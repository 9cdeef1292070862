# Recurrence Module
# Due-date engine shared by the dashboard, reports, entry labels and reminders
#
# Components:
# - models.py: Obligation variants and build_obligation()
# - engine.py: Pure due-date queries (period, next, range, paid status)
# - clock.py: Local "today" from a fixed UTC offset

from .models import (
    RecurrencePolicy,
    Obligation,
    OneTimeObligation,
    MonthlyObligation,
    QuarterlyObligation,
    YearlyObligation,
    build_obligation,
)
from .engine import (
    build_due_date,
    due_date_in_period,
    next_due_date,
    occurrences_in_range,
    is_satisfied_for_current_cycle,
)
from .clock import local_today

__all__ = [
    # Models
    "RecurrencePolicy",
    "Obligation",
    "OneTimeObligation",
    "MonthlyObligation",
    "QuarterlyObligation",
    "YearlyObligation",
    "build_obligation",
    # Engine
    "build_due_date",
    "due_date_in_period",
    "next_due_date",
    "occurrences_in_range",
    "is_satisfied_for_current_cycle",
    # Clock
    "local_today",
]
