"""
Member profile management views.
"""
from apps.common.exceptions import ValidationError
from apps.common.utils import request_fields, success_response
from ..serializers import CustomerSerializer, ProfileUpdateSerializer
from ..services import MemberProfileService
from .base import MemberAPIView


class MemberProfileView(MemberAPIView):
    """GET /api/member/me/"""

    def get(self, request):
        customer = MemberProfileService.get_profile(request.user.pk)
        return success_response({'customer': CustomerSerializer(customer).data})


class UpdateProfileView(MemberAPIView):
    """PUT /api/member/profile/ - partial update of name, phone, email, photo"""

    def put(self, request):
        serializer = ProfileUpdateSerializer(data=request.data)
        if not serializer.is_valid():
            raise ValidationError('Profile update failed', serializer.errors)

        customer = MemberProfileService.update_profile(request.user.pk, serializer.validated_data)
        return success_response({'customer': CustomerSerializer(customer).data}, 'Profile updated successfully')


class SubscribePushView(MemberAPIView):
    """POST /api/member/subscribe-push/"""

    def post(self, request):
        subscription = MemberProfileService.subscribe_push(request.user.pk, request_fields(request).get('subscription'))
        return success_response({'subscription': subscription}, 'Push notification subscription successful')
