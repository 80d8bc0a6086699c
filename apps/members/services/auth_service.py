"""
Member login and password change.

First-login state machine: a provisioned customer starts with
is_first_login=True; the only transition to False is a successful
change_password(). Login reports the flag but never changes it.
"""
import logging

from django.conf import settings
from django.utils import timezone

from apps.common.exceptions import AuthenticationError, ValidationError
from ..models import Customer
from ..tokens import issue_member_token
from .profile_service import get_member

logger = logging.getLogger(__name__)
security_logger = logging.getLogger('security')

INVALID_CREDENTIALS_MESSAGE = 'Invalid member ID or password'


class LoginResult:
    """Outcome of a successful member login"""

    def __init__(self, customer, token):
        self.customer = customer
        self.token = token

    @property
    def is_first_login(self):
        return self.customer.is_first_login


class MemberAuthService:
    """Service class for member authentication operations"""

    @staticmethod
    def login(member_id, password):
        """
        Verify a member's credentials and issue a session token.

        Unknown member IDs, unactivated accounts and wrong passwords all raise
        the same AuthenticationError; the cause only goes to the security log.
        """
        if not member_id or not password:
            raise ValidationError('Please provide member ID and password')
        if not isinstance(member_id, str) or not isinstance(password, str):
            raise ValidationError('Member ID and password must be text')

        member_id = member_id.strip()
        customer = Customer.objects.filter(member_id=member_id).first()

        if customer is None:
            security_logger.info(f"LOGIN_FAILED member_id={member_id} reason=unknown_member")
            raise AuthenticationError(INVALID_CREDENTIALS_MESSAGE)

        if not customer.has_password:
            security_logger.info(f"LOGIN_FAILED member_id={member_id} reason=not_activated")
            raise AuthenticationError(INVALID_CREDENTIALS_MESSAGE)

        if not customer.check_password(password):
            security_logger.info(f"LOGIN_FAILED member_id={member_id} reason=bad_password")
            raise AuthenticationError(INVALID_CREDENTIALS_MESSAGE)

        customer.last_login = timezone.now()
        customer.save(update_fields=['last_login'])

        logger.info(f"Member {customer.member_id} logged in")
        return LoginResult(customer, issue_member_token(customer))

    @staticmethod
    def change_password(member_pk, current_password, new_password):
        """
        Replace the member's password and complete first-login activation.

        Input is validated before the customer is loaded. Returns a fresh
        token; tokens issued earlier stay valid until they expire.
        """
        if not current_password or not new_password:
            raise ValidationError('Please provide current and new password')
        if not isinstance(current_password, str) or not isinstance(new_password, str):
            raise ValidationError('Current and new password must be text')

        min_length = settings.MEMBER_MIN_PASSWORD_LENGTH
        if len(new_password) < min_length:
            raise ValidationError(f'Password must be at least {min_length} characters')

        customer = get_member(member_pk)

        if not customer.check_password(current_password):
            security_logger.info(f"PASSWORD_CHANGE_FAILED member_id={customer.member_id} reason=bad_current_password")
            raise AuthenticationError('Current password is incorrect')

        customer.set_password(new_password)
        customer.is_first_login = False
        customer.save(update_fields=['password', 'is_first_login', 'updated_at'])

        security_logger.info(f"PASSWORD_CHANGED member_id={customer.member_id}")
        return issue_member_token(customer)
