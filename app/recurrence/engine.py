"""
Recurrence Engine - due-date calculations for recurring obligations.

Every screen that needs to know when a bill falls due goes through this
module: the monthly dashboard, the upcoming-bills report, entry labels and
the daily reminder job.

All functions are pure. "Today" is always passed in as a reference date, and
an obligation missing a field its policy needs yields None or an empty list,
never an exception.

Day-of-month overflow:
    A due day past the end of the target month rolls over into the next
    month (day 31 in April is 1 May, day 30 in February 2023 is 2 March).
    This matches the rollover semantics the stored data was created with
    and is kept as-is for every policy.
"""
from datetime import date, timedelta
from typing import List, Optional, Sequence

from dateutil.relativedelta import relativedelta

from app.recurrence.models import (
    Obligation,
    OneTimeObligation,
    MonthlyObligation,
    QuarterlyObligation,
    YearlyObligation,
)


def build_due_date(year: int, month: int, day: int) -> date:
    """
    Construct a due date, rolling overflow forward.

    ``month`` may exceed 12 (13 is January of the following year) and ``day``
    may exceed the length of the month.
    """
    first_of_month = date(year, 1, 1) + relativedelta(months=month - 1)
    return first_of_month + timedelta(days=day - 1)


def _due_date_within_calendar(year: int, month: int, day: int) -> Optional[date]:
    """build_due_date, or None when the cycle's year lies outside date.min..date.max."""
    year += (month - 1) // 12
    month = (month - 1) % 12 + 1
    if not date.min.year <= year <= date.max.year:
        return None
    return build_due_date(year, month, day)


def _sorted_months(obligation: QuarterlyObligation) -> Sequence[int]:
    return sorted(obligation.due_months or ())


def _scan_years(first: int, last: int) -> range:
    """Years first..last inclusive, clipped to the supported calendar."""
    return range(max(first, date.min.year), min(last, date.max.year) + 1)


# =============================================================================
# Due date within a calendar month
# =============================================================================

def due_date_in_period(
    obligation: Obligation,
    period_year: int,
    period_month: int,
) -> Optional[date]:
    """Return the obligation's due date inside the given month, if any."""
    if isinstance(obligation, OneTimeObligation):
        due = obligation.due_date
        if due is None:
            return None
        if due.year == period_year and due.month == period_month:
            return due
        return None

    if obligation.due_day is None:
        return None

    if isinstance(obligation, MonthlyObligation):
        return build_due_date(period_year, period_month, obligation.due_day)

    if isinstance(obligation, QuarterlyObligation):
        if period_month not in (obligation.due_months or ()):
            return None
        return build_due_date(period_year, period_month, obligation.due_day)

    if isinstance(obligation, YearlyObligation):
        if obligation.due_month is None or obligation.due_month != period_month:
            return None
        return build_due_date(period_year, period_month, obligation.due_day)

    return None


# =============================================================================
# Next due date
# =============================================================================

def next_due_date(obligation: Obligation, reference_date: date) -> Optional[date]:
    """
    Earliest occurrence on or after ``reference_date``.

    One-time obligations return their stored date even when it is already
    past; the caller decides how to show an overdue one-off.
    """
    if isinstance(obligation, OneTimeObligation):
        return obligation.due_date

    if obligation.due_day is None:
        return None

    year = reference_date.year
    month = reference_date.month
    day = obligation.due_day

    if isinstance(obligation, MonthlyObligation):
        this_month = build_due_date(year, month, day)
        if this_month >= reference_date:
            return this_month
        return _due_date_within_calendar(year, month + 1, day)

    if isinstance(obligation, QuarterlyObligation):
        months = _sorted_months(obligation)
        if not months:
            return None
        # The following year's first listed month is always past the reference,
        # so two years of candidates are enough.
        for candidate_year in (year, year + 1):
            for due_month in months:
                candidate = _due_date_within_calendar(candidate_year, due_month, day)
                if candidate is None:
                    return None
                if candidate >= reference_date:
                    return candidate
        return None

    if isinstance(obligation, YearlyObligation):
        if obligation.due_month is None:
            return None
        this_year = build_due_date(year, obligation.due_month, day)
        if this_year >= reference_date:
            return this_year
        return _due_date_within_calendar(year + 1, obligation.due_month, day)

    return None


# =============================================================================
# Occurrences within a date range
# =============================================================================

def occurrences_in_range(obligation: Obligation, start: date, end: date) -> List[date]:
    """All due dates in ``[start, end]``, ascending."""
    if start > end:
        return []

    if isinstance(obligation, OneTimeObligation):
        due = obligation.due_date
        if due is not None and start <= due <= end:
            return [due]
        return []

    if obligation.due_day is None:
        return []

    day = obligation.due_day
    dates: List[date] = []

    if isinstance(obligation, MonthlyObligation):
        year, month = start.year, start.month
        while True:
            candidate = _due_date_within_calendar(year, month, day)
            if candidate is None or candidate > end:
                break
            if candidate >= start:
                dates.append(candidate)
            month += 1
            if month > 12:
                month = 1
                year += 1
        return dates

    if isinstance(obligation, QuarterlyObligation):
        months = _sorted_months(obligation)
        # One extra year on each side catches rolled-over dates near the edges
        for year in _scan_years(start.year - 1, end.year + 1):
            for due_month in months:
                candidate = build_due_date(year, due_month, day)
                if start <= candidate <= end:
                    dates.append(candidate)
        return sorted(dates)

    if isinstance(obligation, YearlyObligation):
        if obligation.due_month is None:
            return []
        for year in _scan_years(start.year, end.year + 1):
            candidate = build_due_date(year, obligation.due_month, day)
            if candidate > end:
                break
            if candidate >= start:
                dates.append(candidate)
        return dates

    return dates


# =============================================================================
# Payment status
# =============================================================================

def is_satisfied_for_current_cycle(obligation: Obligation, reference_date: date) -> bool:
    """
    Whether the cycle current at ``reference_date`` has already been paid.

    A payment covers every occurrence up to and including the payment date.
    The cycle is satisfied while the first occurrence after the payment is
    still in the future. When that occurrence cannot be determined the
    obligation counts as satisfied.
    """
    paid = obligation.last_paid_date
    if paid is None:
        return False

    if isinstance(obligation, OneTimeObligation):
        return True

    # Nothing can fall due after the last representable day
    if paid == date.max:
        return True

    next_after_payment = next_due_date(obligation, paid + timedelta(days=1))
    if next_after_payment is None:
        return True
    return next_after_payment > reference_date
