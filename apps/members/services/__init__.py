"""
Member services module.
"""
from .auth_service import MemberAuthService, LoginResult, INVALID_CREDENTIALS_MESSAGE
from .profile_service import MemberProfileService, get_member, PROFILE_FIELDS
from .history_service import MemberHistoryService

__all__ = [
    'MemberAuthService',
    'LoginResult',
    'INVALID_CREDENTIALS_MESSAGE',
    'MemberProfileService',
    'get_member',
    'PROFILE_FIELDS',
    'MemberHistoryService',
]
