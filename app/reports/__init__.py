# Reports Module
# Bill cost analyzer, upcoming bills and net worth reports
#
# Components:
# - engine.py: Report calculations
# - schemas.py: Report response models
# - routes.py: /reports endpoints

from .engine import bill_cost_analysis, upcoming_bills, net_worth_report

__all__ = [
    "bill_cost_analysis",
    "upcoming_bills",
    "net_worth_report",
]
