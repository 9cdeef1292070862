# Bills Module
# Current-month bill table and daily "due today" reminders
#
# Components:
# - dashboard.py: Bills due this month, unpaid first
# - reminders.py: Bills due today, grouped per recipient and e-mailed
# - email_provider.py: Resend / console e-mail providers
# - schemas.py: Request and response models
# - routes.py: /bills endpoints

from .dashboard import build_month_bills, describe_status
from .reminders import (
    ReminderRunResult,
    bills_due_today,
    build_reminder_email,
    group_by_recipient,
    send_bill_reminders,
)
from .email_provider import (
    ReminderEmail,
    DeliveryResult,
    EmailProvider,
    ResendProvider,
    ConsoleProvider,
    get_email_provider,
)

__all__ = [
    # Dashboard
    "build_month_bills",
    "describe_status",
    # Reminders
    "ReminderRunResult",
    "bills_due_today",
    "build_reminder_email",
    "group_by_recipient",
    "send_bill_reminders",
    # Email
    "ReminderEmail",
    "DeliveryResult",
    "EmailProvider",
    "ResendProvider",
    "ConsoleProvider",
    "get_email_provider",
]
