"""
Member attendance and payment history views.
"""
from apps.attendance.serializers import AttendanceRecordSerializer
from apps.common.utils import success_response
from apps.payments.serializers import PaymentRecordSerializer
from ..services import MemberHistoryService
from .base import MemberAPIView


class MemberAttendanceView(MemberAPIView):
    """GET /api/member/attendance/?limit=30&page=1"""

    def get(self, request):
        page = MemberHistoryService.attendance_page(
            request.user.pk,
            request.query_params.get('limit'),
            request.query_params.get('page'),
        )
        page['attendance'] = AttendanceRecordSerializer(page['attendance'], many=True).data
        return success_response(page)


class MemberPaymentsView(MemberAPIView):
    """GET /api/member/payments/?limit=10&page=1"""

    def get(self, request):
        page = MemberHistoryService.payments_page(
            request.user.pk,
            request.query_params.get('limit'),
            request.query_params.get('page'),
        )
        page['payments'] = PaymentRecordSerializer(page['payments'], many=True).data
        return success_response(page)
