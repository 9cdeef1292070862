"""Headline totals across entries and assets."""
from decimal import Decimal
from typing import Iterable, List

from app.entries.schemas import Entry, Asset, FinancialTotals


def sum_category(entries: Iterable[Entry], category: str) -> Decimal:
    return sum((e.amount for e in entries if e.category == category), Decimal("0"))


def sum_asset_types(assets: Iterable[Asset], *types: str) -> Decimal:
    return sum((a.value for a in assets if a.type in types), Decimal("0"))


def summarize_totals(entries: List[Entry], assets: List[Asset]) -> FinancialTotals:
    """
    Monthly cash flow and balance sheet totals.

    Leftover is income minus bills, savings and expenses. Net worth counts
    investments alongside assets; mortgages count as liabilities.
    """
    income = sum_category(entries, "income")
    bills = sum_category(entries, "bill")
    savings = sum_category(entries, "saving")
    expenses = sum_category(entries, "expense")

    total_assets = sum_asset_types(assets, "asset")
    total_investments = sum_asset_types(assets, "investment")
    total_liabilities = sum_asset_types(assets, "liability", "mortgage")

    return FinancialTotals(
        income=income,
        bills=bills,
        savings=savings,
        expenses=expenses,
        leftover=income - bills - savings - expenses,
        total_assets=total_assets,
        total_investments=total_investments,
        total_liabilities=total_liabilities,
        net_worth=total_assets + total_investments - total_liabilities,
    )
