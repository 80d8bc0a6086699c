"""
Membership views module.
"""
from .status_views import MembershipStatusView

__all__ = [
    'MembershipStatusView',
]
