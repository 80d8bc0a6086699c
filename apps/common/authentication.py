"""
Member token authentication.

Member session tokens are simplejwt access tokens carrying a member claim
instead of the staff ``user_id`` claim, so the two kinds of token never
authenticate against each other's endpoints.
"""
import logging

from django.conf import settings
from rest_framework_simplejwt.authentication import JWTAuthentication

logger = logging.getLogger(__name__)


def member_id_claim():
    return settings.MEMBER_TOKEN['MEMBER_ID_CLAIM']


class MemberPrincipal:
    """
    The authenticated member on a request.

    Only the primary key from the token is known here; views load the
    customer record themselves so that a deleted member yields 404.
    """
    is_authenticated = True
    is_anonymous = False
    is_staff = False

    def __init__(self, member_pk):
        self.pk = member_pk
        self.id = member_pk

    def __str__(self):
        return f"Member {self.pk}"


class MemberJWTAuthentication(JWTAuthentication):
    """
    Authenticates bearer tokens issued to members.

    Returns None for a valid token without the member claim (a staff token)
    so that any following authenticator can try it. Invalid or expired tokens
    raise InvalidToken, answered with 401.
    """

    def authenticate(self, request):
        header = self.get_header(request)
        if header is None:
            return None

        raw_token = self.get_raw_token(header)
        if raw_token is None:
            return None

        validated_token = self.get_validated_token(raw_token)
        member_pk = validated_token.get(member_id_claim())
        if member_pk is None:
            logger.debug('Bearer token carries no member claim')
            return None

        return MemberPrincipal(member_pk), validated_token
