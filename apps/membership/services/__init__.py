"""
Membership services module.
"""
from .membership_service import MembershipService

__all__ = [
    'MembershipService',
]
