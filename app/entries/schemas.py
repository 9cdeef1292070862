"""Pydantic schemas for household entries and assets."""
from pydantic import BaseModel, Field, conint
from datetime import date
from typing import Optional, Literal, List
from decimal import Decimal

from app.recurrence import Obligation, build_obligation


Category = Literal["income", "bill", "saving", "expense"]
Recurrence = Literal["monthly", "quarterly", "yearly", "once"]
AssetType = Literal["asset", "liability", "mortgage", "investment"]


class Entry(BaseModel):
    """An income, bill, saving or expense line as stored by the household."""
    id: str
    user_id: Optional[str] = None
    category: Category
    name: str = Field(..., min_length=1, max_length=255)
    amount: Decimal = Field(..., ge=0, decimal_places=2)
    bank_name: Optional[str] = None  # saving/expense only

    # Scheduling (bill/expense only)
    recurrence: Optional[Recurrence] = None  # null means monthly
    due_day: Optional[int] = Field(None, ge=1, le=31)
    due_month: Optional[int] = Field(None, ge=1, le=12)  # yearly only
    due_months: Optional[List[conint(ge=1, le=12)]] = Field(None, min_length=1)  # quarterly only
    due_date: Optional[date] = None  # once only
    last_paid_date: Optional[date] = None
    variable_amount: bool = False

    def is_scheduled(self) -> bool:
        """Bills and expenses carry a due-date schedule."""
        return self.category in ("bill", "expense")

    def to_obligation(self) -> Obligation:
        """Recurrence engine view of this entry."""
        return build_obligation(
            recurrence=self.recurrence,
            due_day=self.due_day,
            due_month=self.due_month,
            due_months=self.due_months,
            due_date=self.due_date,
            last_paid_date=self.last_paid_date,
        )


class Asset(BaseModel):
    """Something the household owns or owes."""
    id: str
    user_id: Optional[str] = None
    name: str = Field(..., min_length=1, max_length=255)
    type: AssetType
    value: Decimal = Field(..., ge=0, decimal_places=2)
    conjugal: bool = False
    notes: Optional[str] = None


class EntriesRequest(BaseModel):
    """Entries plus an optional reference date (defaults to the local today)."""
    entries: List[Entry] = []
    today: Optional[date] = None


class EntriesAndAssetsRequest(BaseModel):
    """Entries and assets for aggregate views."""
    entries: List[Entry] = []
    assets: List[Asset] = []


class EntryLabelResponse(BaseModel):
    """Badge text shown next to an entry in the list."""
    id: str
    label: Optional[str] = None
    overdue: bool = False
    paid_label: Optional[str] = None


class FinancialTotals(BaseModel):
    """Headline totals for the dashboard summary cards."""
    income: Decimal
    bills: Decimal
    savings: Decimal
    expenses: Decimal
    leftover: Decimal
    total_assets: Decimal
    total_investments: Decimal
    total_liabilities: Decimal
    net_worth: Decimal
