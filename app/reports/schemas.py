"""Pydantic schemas for report responses."""
from pydantic import BaseModel, Field
from datetime import date
from typing import List, Optional
from decimal import Decimal

from app.entries.schemas import Entry


# =============================================================================
# Bill Cost Analyzer
# =============================================================================

class BillCostRow(BaseModel):
    """Normalized cost of one bill."""
    id: str
    name: str
    frequency: str  # "Monthly" | "Quarterly" | "Yearly" | "One-time"
    amount: Decimal
    monthly_equivalent: Optional[Decimal] = None  # None for one-time bills
    annual_cost: Optional[Decimal] = None
    one_time: bool = False


class BillCostReport(BaseModel):
    rows: List[BillCostRow]
    total_monthly: Decimal
    total_annual: Decimal
    bills_percent_of_income: Optional[str] = None  # None when there is no income


# =============================================================================
# Upcoming Bills
# =============================================================================

class UpcomingBillsRequest(BaseModel):
    entries: List[Entry] = []
    today: Optional[date] = None
    window_days: Optional[int] = Field(None, ge=1, le=366)


class UpcomingBill(BaseModel):
    """One occurrence of a bill inside the look-ahead window."""
    key: str
    entry_id: str
    name: str
    amount: Decimal
    due_date: date
    date_label: str  # "May 15"
    is_paid: bool


class UpcomingBillGroup(BaseModel):
    label: str  # "May 2024"
    items: List[UpcomingBill]


class UpcomingBillsReport(BaseModel):
    start: date
    end: date
    groups: List[UpcomingBillGroup]


# =============================================================================
# Net Worth
# =============================================================================

class NetWorthItem(BaseModel):
    id: str
    name: str
    value: Decimal
    percent_of_net_worth: Optional[str] = None  # None unless net worth is positive
    notes: Optional[str] = None


class CashFlowLine(BaseModel):
    label: str
    value: Decimal  # outflows are negative


class NetWorthReport(BaseModel):
    total_assets: Decimal
    total_investments: Decimal
    total_liabilities: Decimal
    net_worth: Decimal
    assets: List[NetWorthItem]
    investments: List[NetWorthItem]
    liabilities: List[NetWorthItem]
    cash_flow: List[CashFlowLine]
