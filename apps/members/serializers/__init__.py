"""
Member serializers module.
"""
from .member_serializers import CustomerSerializer, ProfileUpdateSerializer

__all__ = [
    'CustomerSerializer',
    'ProfileUpdateSerializer',
]
