"""Pydantic schemas for AI insights."""
from pydantic import BaseModel, Field
from typing import List, Literal
from decimal import Decimal

from app.entries.schemas import Entry, Asset


InsightType = Literal["positive", "warning", "tip", "info"]


class Insight(BaseModel):
    """One short piece of advice."""
    type: InsightType
    title: str = Field(..., min_length=1)
    body: str = Field(..., min_length=1)


class InsightsResponse(BaseModel):
    insights: List[Insight]


class InsightsRequest(BaseModel):
    user_id: str
    entries: List[Entry] = []
    assets: List[Asset] = []
    force: bool = False  # bypass the cache


class NamedAmount(BaseModel):
    name: str
    amount: Decimal
    recurrence: str = ""  # bills only


class FinancialSnapshot(BaseModel):
    """Aggregated numbers handed to the insight generator."""
    income: Decimal
    bill_total: Decimal
    savings_total: Decimal
    leftover: Decimal  # income - bills - savings
    total_assets: Decimal
    total_liabilities: Decimal
    net_worth: Decimal  # assets - liabilities
    savings_rate: str  # % of income, one decimal
    bill_rate: str
    incomes: List[NamedAmount] = []
    bills: List[NamedAmount] = []
    savings: List[NamedAmount] = []
