"""
Member session tokens.
"""
from django.conf import settings
from rest_framework_simplejwt.tokens import AccessToken

from apps.common.authentication import member_id_claim


def issue_member_token(customer):
    """Signed access token bound to the customer's primary key"""
    token = AccessToken()
    token.set_exp(lifetime=settings.MEMBER_TOKEN['LIFETIME'])
    token[member_id_claim()] = customer.pk
    return str(token)
