"""
Announcement views: members read the active ones, staff manage them.
"""
from rest_framework.permissions import IsAdminUser
from rest_framework.views import APIView
from rest_framework_simplejwt.authentication import JWTAuthentication

from apps.common.authentication import MemberJWTAuthentication
from apps.common.exceptions import NotFoundError, ValidationError
from apps.common.permissions import IsMemberOrStaff
from apps.common.utils import success_response
from .models import Announcement
from .serializers import AnnouncementSerializer


class ActiveAnnouncementsView(APIView):
    """GET /api/announcements/active/ - members and staff"""
    authentication_classes = [MemberJWTAuthentication, JWTAuthentication]
    permission_classes = [IsMemberOrStaff]

    def get(self, request):
        announcements = Announcement.objects.active()
        return success_response(AnnouncementSerializer(announcements, many=True).data)


class AnnouncementListCreateView(APIView):
    """POST /api/announcements/ - staff only"""
    permission_classes = [IsAdminUser]

    def post(self, request):
        serializer = AnnouncementSerializer(data=request.data)
        if not serializer.is_valid():
            raise ValidationError('Invalid announcement', serializer.errors)
        announcement = serializer.save(created_by=request.user)
        return success_response(
            AnnouncementSerializer(announcement).data, 'Announcement created', status_code=201
        )


class AdminAnnouncementsView(APIView):
    """GET /api/announcements/admin/ - every announcement, staff only"""
    permission_classes = [IsAdminUser]

    def get(self, request):
        announcements = Announcement.objects.select_related('created_by')
        return success_response(AnnouncementSerializer(announcements, many=True).data)


class AnnouncementDetailView(APIView):
    """DELETE /api/announcements/<id>/ - staff only"""
    permission_classes = [IsAdminUser]

    def delete(self, request, pk):
        deleted, _ = Announcement.objects.filter(pk=pk).delete()
        if not deleted:
            raise NotFoundError('Announcement not found')
        return success_response(None, 'Announcement deleted')
