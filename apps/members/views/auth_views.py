"""
Member authentication views.
"""
from rest_framework.views import APIView
from rest_framework.permissions import AllowAny

from apps.common.utils import request_fields, success_response
from ..serializers import CustomerSerializer
from ..services import MemberAuthService
from .base import MemberAPIView


class MemberLoginView(APIView):
    """Member login with memberId and password"""
    authentication_classes = []
    permission_classes = [AllowAny]

    def post(self, request):
        data = request_fields(request)
        result = MemberAuthService.login(data.get('memberId'), data.get('password'))
        return success_response({
            'customer': CustomerSerializer(result.customer).data,
            'token': result.token,
            'isFirstLogin': result.is_first_login,
        }, 'Login successful')


class ChangePasswordView(MemberAPIView):
    """Change password; completes first-login activation"""

    def put(self, request):
        data = request_fields(request)
        token = MemberAuthService.change_password(
            request.user.pk,
            data.get('currentPassword'),
            data.get('newPassword'),
        )
        return success_response({'token': token}, 'Password changed successfully')
