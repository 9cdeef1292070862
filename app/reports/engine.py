"""
Reports Engine - computes the three household reports.

1. Bill Cost Analyzer: every bill normalized to a monthly and annual cost
2. Upcoming Bills: every bill occurrence in the next N days, grouped by month
3. Net Worth: balance sheet breakdown plus the monthly cash flow
"""
from datetime import date, timedelta
from decimal import Decimal, ROUND_HALF_UP
from typing import List, Optional, Tuple

from app.entries.classifier import short_date, month_label
from app.entries.schemas import Entry, Asset
from app.entries.totals import summarize_totals
from app.recurrence import (
    MonthlyObligation,
    QuarterlyObligation,
    YearlyObligation,
    next_due_date,
    occurrences_in_range,
    is_satisfied_for_current_cycle,
)
from app.reports.schemas import (
    BillCostRow,
    BillCostReport,
    UpcomingBill,
    UpcomingBillGroup,
    UpcomingBillsReport,
    NetWorthItem,
    CashFlowLine,
    NetWorthReport,
)

CENT = Decimal("0.01")


def _cents(value: Decimal) -> Decimal:
    return value.quantize(CENT, rounding=ROUND_HALF_UP)


def _percent(part: Decimal, whole: Decimal) -> str:
    return f"{(part / whole * 100):.1f}"


# =============================================================================
# Bill Cost Analyzer
# =============================================================================

def _cost_profile(entry: Entry) -> Tuple[str, Optional[int], Optional[int]]:
    """(frequency label, divisor to monthly, multiplier to annual)."""
    obligation = entry.to_obligation()
    if isinstance(obligation, MonthlyObligation):
        return "Monthly", 1, 12
    if isinstance(obligation, QuarterlyObligation):
        return "Quarterly", 3, 4
    if isinstance(obligation, YearlyObligation):
        return "Yearly", 12, 1
    return "One-time", None, None


def bill_cost_analysis(entries: List[Entry]) -> BillCostReport:
    """Monthly-equivalent and annual cost of every bill."""
    rows: List[BillCostRow] = []
    total_monthly = Decimal("0")
    total_annual = Decimal("0")

    for entry in entries:
        if entry.category != "bill":
            continue

        frequency, divisor, multiplier = _cost_profile(entry)
        if divisor is None:
            rows.append(BillCostRow(
                id=entry.id,
                name=entry.name,
                frequency=frequency,
                amount=entry.amount,
                one_time=True,
            ))
            continue

        monthly = entry.amount / divisor
        annual = entry.amount * multiplier
        total_monthly += monthly
        total_annual += annual
        rows.append(BillCostRow(
            id=entry.id,
            name=entry.name,
            frequency=frequency,
            amount=entry.amount,
            monthly_equivalent=_cents(monthly),
            annual_cost=_cents(annual),
        ))

    income = summarize_totals(entries, []).income

    return BillCostReport(
        rows=rows,
        total_monthly=_cents(total_monthly),
        total_annual=_cents(total_annual),
        bills_percent_of_income=_percent(total_monthly, income) if income > 0 else None,
    )


# =============================================================================
# Upcoming Bills
# =============================================================================

def upcoming_bills(entries: List[Entry], today: date, window_days: int = 90) -> UpcomingBillsReport:
    """
    Every bill occurrence between today and today + window_days.

    Only the occurrence matching a bill's next due date can show as paid;
    later occurrences are always unpaid.
    """
    # The window stops at the last representable day
    if (date.max - today).days < window_days:
        end = date.max
    else:
        end = today + timedelta(days=window_days)
    items: List[UpcomingBill] = []

    for entry in entries:
        if entry.category != "bill":
            continue

        obligation = entry.to_obligation()
        next_due = next_due_date(obligation, today)
        current_cycle_paid = is_satisfied_for_current_cycle(obligation, today)

        for due in occurrences_in_range(obligation, today, end):
            items.append(UpcomingBill(
                key=f"{entry.id}-{due.isoformat()}",
                entry_id=entry.id,
                name=entry.name,
                amount=entry.amount,
                due_date=due,
                date_label=short_date(due),
                is_paid=current_cycle_paid if due == next_due else False,
            ))

    items.sort(key=lambda item: item.due_date)

    groups: List[UpcomingBillGroup] = []
    for item in items:
        label = month_label(item.due_date)
        if groups and groups[-1].label == label:
            groups[-1].items.append(item)
        else:
            groups.append(UpcomingBillGroup(label=label, items=[item]))

    return UpcomingBillsReport(start=today, end=end, groups=groups)


# =============================================================================
# Net Worth
# =============================================================================

def net_worth_report(entries: List[Entry], assets: List[Asset]) -> NetWorthReport:
    """Balance sheet sections, each item's share of net worth, and cash flow."""
    totals = summarize_totals(entries, assets)
    net_worth = totals.net_worth

    def section(*types: str) -> List[NetWorthItem]:
        return [
            NetWorthItem(
                id=a.id,
                name=a.name,
                value=a.value,
                percent_of_net_worth=_percent(a.value, net_worth) if net_worth > 0 else None,
                notes=a.notes,
            )
            for a in assets
            if a.type in types
        ]

    cash_flow = [
        CashFlowLine(label="Income", value=totals.income),
        CashFlowLine(label="Bills", value=-totals.bills),
        CashFlowLine(label="Expenses", value=-totals.expenses),
        CashFlowLine(label="Savings", value=-totals.savings),
        CashFlowLine(label="Leftover", value=totals.leftover),
    ]

    return NetWorthReport(
        total_assets=totals.total_assets,
        total_investments=totals.total_investments,
        total_liabilities=totals.total_liabilities,
        net_worth=net_worth,
        assets=section("asset"),
        investments=section("investment"),
        liabilities=section("liability", "mortgage"),
        cash_flow=cash_flow,
    )
