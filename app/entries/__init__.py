# Entries Module
# Household entries (income, bills, savings, expenses) and assets
#
# Components:
# - schemas.py: Entry / Asset request models and their engine conversion
# - classifier.py: Recurrence badges for the entry list
# - totals.py: Headline cash flow and net worth totals
# - routes.py: /entries endpoints

from .schemas import Entry, Asset, FinancialTotals
from .classifier import RecurrenceLabel, recurrence_label, paid_label, ordinal
from .totals import summarize_totals

__all__ = [
    "Entry",
    "Asset",
    "FinancialTotals",
    "RecurrenceLabel",
    "recurrence_label",
    "paid_label",
    "ordinal",
    "summarize_totals",
]
