"""
Admin dashboard analytics over customers and attendance.
"""
from datetime import datetime

from django.db.models import Case, CharField, Count, Q, Value, When
from django.db.models.functions import TruncMonth
from django.utils import timezone

from apps.attendance.models import Attendance
from apps.members.models import Customer
from apps.membership.services import MembershipService

MONTH_NAMES = ['Jan', 'Feb', 'Mar', 'Apr', 'May', 'Jun', 'Jul', 'Aug', 'Sep', 'Oct', 'Nov', 'Dec']
GROWTH_MONTHS = 6

# (label, lower bound inclusive, upper bound exclusive)
AGE_BUCKETS = [
    ('Under 18', 0, 18),
    ('18-25', 18, 26),
    ('26-35', 26, 36),
    ('36-50', 36, 51),
    ('50+', 51, 120),
]
OTHER_AGE_LABEL = 'Other'


def _shift_month(year, month, delta):
    index = year * 12 + (month - 1) + delta
    return index // 12, index % 12 + 1


class AnalyticsService:
    """Service class for dashboard statistics"""

    @staticmethod
    def dashboard_stats(today=None):
        """Customer counts per membership status and today's attendance"""
        today = today or MembershipService.today()

        counts = Customer.objects.aggregate(
            total=Count('id'),
            active=Count('id', filter=Q(**MembershipService.active_filter(today))),
            expiring=Count('id', filter=Q(**MembershipService.expiring_filter(today))),
            expired=Count('id', filter=Q(**MembershipService.expired_filter(today))),
        )

        return {
            'customers': counts,
            'attendance': {
                'today': Attendance.objects.filter(date=today).count(),
            },
        }

    @staticmethod
    def plan_popularity():
        """Customer count per plan, most popular first"""
        stats = list(
            Customer.objects.values('plan')
            .annotate(count=Count('id'))
            .order_by('-count', 'plan')
        )
        return {
            'labels': [item['plan'] for item in stats],
            'data': [item['count'] for item in stats],
            'raw': stats,
        }

    @staticmethod
    def age_demographics():
        """Customer count per age bucket; unknown ages go to 'Other'"""
        bucket = Case(
            *[
                When(age__gte=low, age__lt=high, then=Value(label))
                for label, low, high in AGE_BUCKETS
            ],
            default=Value(OTHER_AGE_LABEL),
            output_field=CharField(),
        )
        rows = Customer.objects.annotate(bucket=bucket).values('bucket').annotate(count=Count('id'))
        counts = {row['bucket']: row['count'] for row in rows}

        stats = [{'label': label, 'count': counts.get(label, 0)} for label, _, _ in AGE_BUCKETS]
        if counts.get(OTHER_AGE_LABEL):
            stats.append({'label': OTHER_AGE_LABEL, 'count': counts[OTHER_AGE_LABEL]})

        return {
            'labels': [item['label'] for item in stats],
            'data': [item['count'] for item in stats],
            'raw': stats,
        }

    @staticmethod
    def business_growth(today=None):
        """New customers per month for the last GROWTH_MONTHS months, zero-filled"""
        today = today or MembershipService.today()
        months = [_shift_month(today.year, today.month, -offset) for offset in range(GROWTH_MONTHS - 1, -1, -1)]

        first_year, first_month = months[0]
        since = timezone.make_aware(datetime(first_year, first_month, 1))

        rows = (
            Customer.objects.filter(created_at__gte=since)
            .annotate(month=TruncMonth('created_at'))
            .values('month')
            .annotate(count=Count('id'))
        )
        counts = {}
        for row in rows:
            key = (row['month'].year, row['month'].month)
            counts[key] = counts.get(key, 0) + row['count']

        raw = [
            {'year': year, 'month': month, 'count': counts.get((year, month), 0)}
            for year, month in months
        ]
        return {
            'labels': [f"{MONTH_NAMES[item['month'] - 1]} {item['year']}" for item in raw],
            'data': [item['count'] for item in raw],
            'raw': raw,
        }
