"""Entries API routes."""
from typing import List
from fastapi import APIRouter

from app.entries.classifier import recurrence_label, paid_label
from app.entries.schemas import (
    EntriesRequest,
    EntriesAndAssetsRequest,
    EntryLabelResponse,
    FinancialTotals,
)
from app.entries.totals import summarize_totals
from app.recurrence import local_today

router = APIRouter()


@router.post("/labels", response_model=List[EntryLabelResponse])
async def get_entry_labels(request: EntriesRequest):
    """
    Recurrence badges for the entry list.

    Entries with a recorded payment also get a "Paid · <date>" label.
    """
    today = request.today or local_today()
    labels = []
    for entry in request.entries:
        badge = recurrence_label(entry, today)
        labels.append(EntryLabelResponse(
            id=entry.id,
            label=badge.label if badge else None,
            overdue=badge.overdue if badge else False,
            paid_label=paid_label(entry),
        ))
    return labels


@router.post("/totals", response_model=FinancialTotals)
async def get_totals(request: EntriesAndAssetsRequest):
    """Headline income, outflow, leftover and net worth totals."""
    return summarize_totals(request.entries, request.assets)
