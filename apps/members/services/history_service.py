"""
Member attendance and payment history.
"""
from apps.attendance.models import Attendance
from apps.common.utils import paginate_queryset, parse_positive_int
from apps.payments.models import Payment

DEFAULT_ATTENDANCE_LIMIT = 30
DEFAULT_PAYMENTS_LIMIT = 10


class MemberHistoryService:
    """Paginated, newest-first history for one member"""

    @staticmethod
    def attendance_page(member_pk, limit=None, page=None):
        limit = parse_positive_int(limit, 'limit', DEFAULT_ATTENDANCE_LIMIT)
        page = parse_positive_int(page, 'page', 1)
        queryset = Attendance.objects.filter(customer_id=member_pk).order_by('-timestamp')
        return paginate_queryset(queryset, limit, page, 'attendance')

    @staticmethod
    def payments_page(member_pk, limit=None, page=None):
        limit = parse_positive_int(limit, 'limit', DEFAULT_PAYMENTS_LIMIT)
        page = parse_positive_int(page, 'page', 1)
        queryset = Payment.objects.filter(customer_id=member_pk).order_by('-payment_date')
        return paginate_queryset(queryset, limit, page, 'payments')
