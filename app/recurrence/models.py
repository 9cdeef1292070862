"""
Recurrence Models

Obligation variants consumed by the recurrence engine. Each recurrence policy
gets its own frozen dataclass so the fields a policy needs live on that policy
only:

    OneTimeObligation   -> due_date
    MonthlyObligation   -> due_day
    QuarterlyObligation -> due_day + due_months
    YearlyObligation    -> due_day + due_month

Required fields are still Optional: obligations are built from stored entries
that may be incomplete, and the engine degrades to "unscheduled" for those
instead of raising.
"""
from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import ClassVar, Iterable, Optional, Tuple, Union


class RecurrencePolicy(str, Enum):
    """How often an obligation falls due."""
    ONCE = "once"
    MONTHLY = "monthly"
    QUARTERLY = "quarterly"
    YEARLY = "yearly"


@dataclass(frozen=True)
class OneTimeObligation:
    """A single payment on a fixed calendar date."""
    due_date: Optional[date] = None
    last_paid_date: Optional[date] = None

    recurrence_policy: ClassVar[RecurrencePolicy] = RecurrencePolicy.ONCE


@dataclass(frozen=True)
class MonthlyObligation:
    """Due on the same day every month."""
    due_day: Optional[int] = None
    last_paid_date: Optional[date] = None

    recurrence_policy: ClassVar[RecurrencePolicy] = RecurrencePolicy.MONTHLY


@dataclass(frozen=True)
class QuarterlyObligation:
    """Due on ``due_day`` of each calendar month listed in ``due_months``."""
    due_day: Optional[int] = None
    due_months: Optional[Tuple[int, ...]] = None  # sorted, de-duplicated
    last_paid_date: Optional[date] = None

    recurrence_policy: ClassVar[RecurrencePolicy] = RecurrencePolicy.QUARTERLY

    def __post_init__(self):
        if self.due_months is not None:
            normalized = tuple(sorted(set(self.due_months)))
            object.__setattr__(self, "due_months", normalized or None)


@dataclass(frozen=True)
class YearlyObligation:
    """Due once a year on ``due_month``/``due_day``."""
    due_day: Optional[int] = None
    due_month: Optional[int] = None
    last_paid_date: Optional[date] = None

    recurrence_policy: ClassVar[RecurrencePolicy] = RecurrencePolicy.YEARLY


Obligation = Union[
    OneTimeObligation,
    MonthlyObligation,
    QuarterlyObligation,
    YearlyObligation,
]


def _bounded(value: Optional[int], low: int, high: int) -> Optional[int]:
    """Return value if it lies in [low, high], else None."""
    if value is None or not low <= value <= high:
        return None
    return value


def build_obligation(
    recurrence: Optional[Union[str, RecurrencePolicy]] = None,
    due_day: Optional[int] = None,
    due_month: Optional[int] = None,
    due_months: Optional[Iterable[int]] = None,
    due_date: Optional[date] = None,
    last_paid_date: Optional[date] = None,
) -> Obligation:
    """
    Build the obligation variant for a stored entry's loose recurrence fields.

    A missing recurrence means monthly. Out-of-range days and months are
    dropped so the engine treats them as absent.

    Raises:
        ValueError: if ``recurrence`` is not a known policy.
    """
    policy = RecurrencePolicy(recurrence) if recurrence else RecurrencePolicy.MONTHLY
    day = _bounded(due_day, 1, 31)

    if policy == RecurrencePolicy.ONCE:
        return OneTimeObligation(due_date=due_date, last_paid_date=last_paid_date)

    if policy == RecurrencePolicy.QUARTERLY:
        months = None
        if due_months is not None:
            months = tuple(m for m in due_months if _bounded(m, 1, 12) is not None)
        return QuarterlyObligation(
            due_day=day,
            due_months=months,
            last_paid_date=last_paid_date,
        )

    if policy == RecurrencePolicy.YEARLY:
        return YearlyObligation(
            due_day=day,
            due_month=_bounded(due_month, 1, 12),
            last_paid_date=last_paid_date,
        )

    return MonthlyObligation(due_day=day, last_paid_date=last_paid_date)
