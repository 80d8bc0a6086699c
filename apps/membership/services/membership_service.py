"""
Membership status service: evaluates customers against the local calendar day.
"""
from datetime import timedelta

from django.utils import timezone

from ..status import EXPIRING_WINDOW_DAYS, compute_status


class MembershipService:
    """Service class for membership status operations"""

    @staticmethod
    def today():
        """Current calendar day in the configured TIME_ZONE"""
        return timezone.localdate()

    @staticmethod
    def status_for(customer, today=None):
        """Derived MembershipStatus for a customer"""
        return compute_status(customer.validity, today or MembershipService.today())

    @staticmethod
    def expiring_window(today=None):
        """(first, last) validity dates, inclusive, that count as expiring"""
        today = today or MembershipService.today()
        return today, today + timedelta(days=EXPIRING_WINDOW_DAYS)

    @staticmethod
    def active_filter(today=None):
        _, window_end = MembershipService.expiring_window(today)
        return {'validity__gt': window_end}

    @staticmethod
    def expiring_filter(today=None):
        window_start, window_end = MembershipService.expiring_window(today)
        return {'validity__gte': window_start, 'validity__lte': window_end}

    @staticmethod
    def expired_filter(today=None):
        today = today or MembershipService.today()
        return {'validity__lt': today}
