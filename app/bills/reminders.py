"""
Bill Reminders - daily "due today" e-mails.

Run once a day (household local time). A bill is reminded when its due date
for the current month is today and the current cycle has not been paid yet.
Each owner gets a single e-mail listing all of their bills due today.
"""
import logging
from dataclasses import dataclass
from datetime import date
from html import escape
from typing import Dict, List

from app.bills.email_provider import EmailProvider, ReminderEmail
from app.bills.schemas import ReminderEntry
from app.entries.schemas import Entry
from app.recurrence import due_date_in_period, is_satisfied_for_current_cycle

logger = logging.getLogger(__name__)


@dataclass
class ReminderRunResult:
    """Outcome of one reminder run."""
    sent: int
    day: int
    total: int


def is_due_today(entry: Entry, today: date) -> bool:
    """True for an unpaid bill whose due date this month is ``today``."""
    if entry.category != "bill":
        return False
    obligation = entry.to_obligation()
    if due_date_in_period(obligation, today.year, today.month) != today:
        return False
    return not is_satisfied_for_current_cycle(obligation, today)


def bills_due_today(entries: List[ReminderEntry], today: date) -> List[ReminderEntry]:
    return [e for e in entries if is_due_today(e, today)]


def group_by_recipient(entries: List[ReminderEntry]) -> Dict[str, List[ReminderEntry]]:
    """Group entries by e-mail address, keeping first-seen order."""
    grouped: Dict[str, List[ReminderEntry]] = {}
    for entry in entries:
        grouped.setdefault(entry.email, []).append(entry)
    return grouped


def build_reminder_email(email: str, bills: List[Entry]) -> ReminderEmail:
    """Reminder listing every bill due today for one recipient."""
    count = len(bills)
    subject = f"Bill reminder: {count} bill{'s' if count != 1 else ''} due today"

    items_html = "".join(
        f"<li><strong>{escape(b.name)}</strong> - ₱{b.amount:.2f}</li>" for b in bills
    )
    html = (
        "<h2>Bill Reminder from Ledgerly</h2>"
        "<p>The following bills are due <strong>today</strong>:</p>"
        f"<ul>{items_html}</ul>"
        '<p style="color:#888;font-size:12px;">'
        "You're receiving this because you set up recurring bills in Ledgerly.</p>"
    )

    lines = ["The following bills are due today:", ""]
    lines.extend(f"- {b.name}: ₱{b.amount:.2f}" for b in bills)
    text = "\n".join(lines)

    return ReminderEmail(
        to=email,
        subject=subject,
        html=html,
        text=text,
    )


async def send_bill_reminders(
    entries: List[ReminderEntry],
    today: date,
    provider: EmailProvider,
) -> ReminderRunResult:
    """Send one reminder per recipient for bills due today."""
    due = bills_due_today(entries, today)
    logger.info(f"Bill reminders for {today.isoformat()}: {len(due)} bill(s) due")

    if not due:
        return ReminderRunResult(sent=0, day=today.day, total=0)

    sent = 0
    for email, bills in group_by_recipient(due).items():
        result = await provider.deliver(build_reminder_email(email, bills))
        if result.delivered:
            sent += 1
            logger.info(f"Reminder sent to {email}")
        else:
            logger.error(f"Reminder to {email} failed: {result.error}")

    return ReminderRunResult(sent=sent, day=today.day, total=len(due))
