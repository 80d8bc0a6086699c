from rest_framework.views import APIView

from apps.common.authentication import MemberJWTAuthentication
from apps.common.permissions import IsMember


class MemberAPIView(APIView):
    """Endpoints that require a member session token"""
    authentication_classes = [MemberJWTAuthentication]
    permission_classes = [IsMember]
