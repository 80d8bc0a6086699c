"""
Member profile reads and updates.
"""
import logging

from apps.common.exceptions import NotFoundError, ValidationError
from ..models import Customer

logger = logging.getLogger(__name__)

# Fields a member may change on their own profile
PROFILE_FIELDS = ('name', 'phone', 'email', 'photo')


def get_member(member_pk):
    """Load the customer behind a member token, 404 when it no longer exists"""
    try:
        return Customer.objects.get(pk=member_pk)
    except Customer.DoesNotExist:
        raise NotFoundError('Member not found')


class MemberProfileService:
    """Service class for member profile operations"""

    @staticmethod
    def get_profile(member_pk):
        return get_member(member_pk)

    @staticmethod
    def update_profile(member_pk, fields):
        """
        Apply a partial profile update.

        Only PROFILE_FIELDS are considered and only truthy values are written;
        an empty or missing value leaves the stored field as it is, so a
        field cannot be cleared through this path.
        """
        customer = get_member(member_pk)

        changed = []
        for field in PROFILE_FIELDS:
            value = fields.get(field)
            if value:
                setattr(customer, field, value)
                changed.append(field)

        if changed:
            customer.save(update_fields=changed + ['updated_at'])
            logger.info(f"Member {customer.member_id} updated {', '.join(changed)}")

        return customer

    @staticmethod
    def subscribe_push(member_pk, subscription):
        """Store a browser push subscription for the member"""
        if not subscription:
            raise ValidationError('Push subscription data required')

        customer = get_member(member_pk)
        customer.push_subscription = subscription
        customer.save(update_fields=['push_subscription', 'updated_at'])
        return subscription
