"""
Membership status evaluation.

A member's status is derived from the validity date and "today" every time it
is read; nothing here is persisted. No Django imports: the dashboard client
imports this module too.
"""
from dataclasses import dataclass
from datetime import date, datetime
from enum import Enum

# Inclusive number of days before expiry during which a membership is "expiring"
EXPIRING_WINDOW_DAYS = 7


class StatusClass(str, Enum):
    ACTIVE = 'active'
    EXPIRING = 'expiring'
    EXPIRED = 'expired'

    @property
    def text(self):
        return STATUS_TEXT[self]


STATUS_TEXT = {
    StatusClass.ACTIVE: 'Active',
    StatusClass.EXPIRING: 'Expiring Soon',
    StatusClass.EXPIRED: 'Expired',
}


@dataclass(frozen=True)
class MembershipStatus:
    days_remaining: int
    status_class: StatusClass

    @property
    def text(self):
        return self.status_class.text

    @property
    def is_active(self):
        return self.status_class is StatusClass.ACTIVE

    @property
    def is_expiring(self):
        return self.status_class is StatusClass.EXPIRING

    @property
    def is_expired(self):
        return self.status_class is StatusClass.EXPIRED

    def to_dict(self):
        return {
            'daysRemaining': self.days_remaining,
            'text': self.text,
            'class': self.status_class.value,
        }


def _as_date(value):
    # datetime is a subclass of date, so check it first
    if isinstance(value, datetime):
        return value.date()
    return value


def days_until(validity_date, today):
    """Whole calendar days from today to validity_date (negative once past)"""
    return (_as_date(validity_date) - _as_date(today)).days


def compute_status(validity_date, today=None):
    """
    Classify a membership by its validity date.

    Both arguments are reduced to calendar dates, so any time of day gives the
    same answer. A validity date of today is still "Expiring Soon"; the
    membership only counts as expired once the date is strictly in the past,
    and days_remaining never goes below zero.

    Args:
        validity_date: date (or datetime) the membership is paid through
        today: reference date; defaults to date.today()

    Returns:
        MembershipStatus
    """
    if today is None:
        today = date.today()

    diff_days = days_until(validity_date, today)

    if diff_days < 0:
        return MembershipStatus(days_remaining=0, status_class=StatusClass.EXPIRED)
    if diff_days <= EXPIRING_WINDOW_DAYS:
        return MembershipStatus(days_remaining=diff_days, status_class=StatusClass.EXPIRING)
    return MembershipStatus(days_remaining=diff_days, status_class=StatusClass.ACTIVE)
