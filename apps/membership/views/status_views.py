"""
Membership status views.
"""
from apps.common.utils import success_response
from apps.members.services import get_member
from apps.members.views.base import MemberAPIView
from ..services import MembershipService


class MembershipStatusView(MemberAPIView):
    """Get the current member's derived membership status"""

    def get(self, request):
        customer = get_member(request.user.pk)
        status = MembershipService.status_for(customer)
        return success_response({
            'status': status.to_dict(),
            'validity': customer.validity.isoformat(),
        })
