"""Reports API routes."""
from fastapi import APIRouter

from app.config import settings
from app.entries.schemas import EntriesRequest, EntriesAndAssetsRequest
from app.recurrence import local_today
from app.reports.engine import bill_cost_analysis, upcoming_bills, net_worth_report
from app.reports.schemas import (
    BillCostReport,
    UpcomingBillsRequest,
    UpcomingBillsReport,
    NetWorthReport,
)

router = APIRouter()


@router.post("/bill-costs", response_model=BillCostReport)
async def get_bill_costs(request: EntriesRequest):
    """Monthly-equivalent and annual cost of every bill."""
    return bill_cost_analysis(request.entries)


@router.post("/upcoming", response_model=UpcomingBillsReport)
async def get_upcoming_bills(request: UpcomingBillsRequest):
    """
    Bill occurrences in the look-ahead window, grouped by month.

    The window defaults to UPCOMING_WINDOW_DAYS (90) from today.
    """
    today = request.today or local_today()
    window_days = request.window_days or settings.UPCOMING_WINDOW_DAYS
    return upcoming_bills(request.entries, today, window_days)


@router.post("/net-worth", response_model=NetWorthReport)
async def get_net_worth(request: EntriesAndAssetsRequest):
    """Assets, investments and liabilities with the monthly cash flow."""
    return net_worth_report(request.entries, request.assets)
