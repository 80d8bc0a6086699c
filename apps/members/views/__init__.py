"""
Member views module.
"""
from .auth_views import MemberLoginView, ChangePasswordView
from .profile_views import MemberProfileView, UpdateProfileView, SubscribePushView
from .history_views import MemberAttendanceView, MemberPaymentsView

__all__ = [
    'MemberLoginView',
    'ChangePasswordView',
    'MemberProfileView',
    'UpdateProfileView',
    'SubscribePushView',
    'MemberAttendanceView',
    'MemberPaymentsView',
]
