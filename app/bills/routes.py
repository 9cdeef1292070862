"""Bills API routes."""
from fastapi import APIRouter, Depends

from app.bills.dashboard import build_month_bills
from app.bills.email_provider import EmailProvider, get_email_provider
from app.bills.reminders import send_bill_reminders
from app.bills.schemas import MonthBillsResponse, RemindersRequest, ReminderRunResponse
from app.entries.schemas import EntriesRequest
from app.recurrence import local_today

router = APIRouter()


@router.post("/month", response_model=MonthBillsResponse)
async def get_month_bills(request: EntriesRequest):
    """
    Bills due in the current month.

    Unpaid bills come first, soonest due first; paid bills are listed last.
    """
    today = request.today or local_today()
    return build_month_bills(request.entries, today)


@router.post("/reminders", response_model=ReminderRunResponse)
async def run_bill_reminders(
    request: RemindersRequest,
    provider: EmailProvider = Depends(get_email_provider),
):
    """
    Send "due today" reminder e-mails.

    Intended for a daily scheduler; each recipient gets one e-mail covering
    all of their unpaid bills due today.
    """
    today = request.today or local_today()
    result = await send_bill_reminders(request.entries, today, provider)
    return ReminderRunResponse(sent=result.sent, day=result.day, total=result.total)
