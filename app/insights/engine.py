"""
Insights Engine - prepares data for and reads results from the AI advisor.

1. Snapshot: aggregate entries and assets into the numbers the advisor sees
2. Prompt: render the snapshot into the advisor prompt
3. Parse: turn the model's JSON reply into typed insights
"""
import json
from decimal import Decimal
from typing import List

from pydantic import ValidationError

from app.entries.schemas import Entry, Asset
from app.entries.totals import sum_category, sum_asset_types
from app.insights.schemas import Insight, FinancialSnapshot, NamedAmount


class InsightFormatError(ValueError):
    """The model's reply was not the JSON shape the prompt asked for."""


# =============================================================================
# Snapshot
# =============================================================================

def _rate(part: Decimal, income: Decimal) -> str:
    if income <= 0:
        return "0"
    return f"{(part / income * 100):.1f}"


def build_snapshot(entries: List[Entry], assets: List[Asset]) -> FinancialSnapshot:
    """
    Aggregate the household's numbers for the advisor.

    Leftover here ignores expenses, and net worth ignores investments; the
    advisor works from the recurring budget and the plain balance sheet.
    """
    income = sum_category(entries, "income")
    bill_total = sum_category(entries, "bill")
    savings_total = sum_category(entries, "saving")
    total_assets = sum_asset_types(assets, "asset")
    total_liabilities = sum_asset_types(assets, "liability", "mortgage")

    return FinancialSnapshot(
        income=income,
        bill_total=bill_total,
        savings_total=savings_total,
        leftover=income - bill_total - savings_total,
        total_assets=total_assets,
        total_liabilities=total_liabilities,
        net_worth=total_assets - total_liabilities,
        savings_rate=_rate(savings_total, income),
        bill_rate=_rate(bill_total, income),
        incomes=[NamedAmount(name=e.name, amount=e.amount) for e in entries if e.category == "income"],
        bills=[
            NamedAmount(name=e.name, amount=e.amount, recurrence=e.recurrence or "monthly")
            for e in entries
            if e.category == "bill"
        ],
        savings=[NamedAmount(name=e.name, amount=e.amount) for e in entries if e.category == "saving"],
    )


# =============================================================================
# Prompt
# =============================================================================

SYSTEM_PROMPT = """You are a friendly, concise personal finance advisor for a Filipino household.
Reply with JSON only, no markdown and no extra text."""

INSIGHTS_PROMPT = """Analyze this budget data and generate exactly 4 focused insights.

Financial Snapshot:
- Income sources: {income_list} -> Total: ₱{income:,}/month
- Bills: {bills_list} -> Total: ₱{bill_total:,}/month ({bill_rate}% of income)
- Savings: {savings_list} -> Total: ₱{savings_total:,}/month ({savings_rate}% of income)
- Leftover balance: ₱{leftover:,}/month
- Total assets: ₱{total_assets:,} | Total liabilities: ₱{total_liabilities:,}
- Net worth: ₱{net_worth:,}

Output exactly this JSON:
{{"insights":[{{"type":"positive","title":"...","body":"..."}},{{"type":"warning","title":"...","body":"..."}},{{"type":"tip","title":"...","body":"..."}},{{"type":"info","title":"...","body":"..."}}]}}

Type rules:
- positive -> celebrate a good habit in this data
- warning -> flag an area needing attention (be specific with numbers)
- tip -> one concrete saving or budgeting action they can take now
- info -> a neutral observation or comparison to benchmarks

Constraints:
- title: max 7 words, engaging
- body: 2 sentences max, specific to their actual numbers, use ₱ for amounts
- be warm and encouraging, not preachy
- if income is 0, note data looks sparse and give general setup tips"""


def _format_list(items: List[NamedAmount], separator: str, with_recurrence: bool = False) -> str:
    if not items:
        return "none"
    parts = []
    for item in items:
        text = f"{item.name} ₱{item.amount:,}"
        if with_recurrence:
            text += f" ({item.recurrence})"
        parts.append(text)
    return separator.join(parts)


def build_insights_prompt(snapshot: FinancialSnapshot) -> str:
    """Render the advisor prompt for a snapshot."""
    return INSIGHTS_PROMPT.format(
        income_list=_format_list(snapshot.incomes, ", "),
        bills_list=_format_list(snapshot.bills, "; ", with_recurrence=True),
        savings_list=_format_list(snapshot.savings, ", "),
        income=snapshot.income,
        bill_total=snapshot.bill_total,
        bill_rate=snapshot.bill_rate,
        savings_total=snapshot.savings_total,
        savings_rate=snapshot.savings_rate,
        leftover=snapshot.leftover,
        total_assets=snapshot.total_assets,
        total_liabilities=snapshot.total_liabilities,
        net_worth=snapshot.net_worth,
    )


# =============================================================================
# Parse
# =============================================================================

def parse_insights(text: str) -> List[Insight]:
    """
    Parse ``{"insights": [...]}`` from the model's reply.

    Raises:
        InsightFormatError: on invalid JSON, a missing or empty list, or an
            item with an unknown type or empty title/body.
    """
    try:
        payload = json.loads(text)
    except json.JSONDecodeError as e:
        raise InsightFormatError(f"Reply is not valid JSON: {e}") from e

    items = payload.get("insights") if isinstance(payload, dict) else None
    if not isinstance(items, list) or not items:
        raise InsightFormatError("Reply has no insights list")

    try:
        return [Insight.model_validate(item) for item in items]
    except ValidationError as e:
        raise InsightFormatError(f"Malformed insight: {e}") from e
