"""
Customer serializers for the member portal.
"""
from rest_framework import serializers

from apps.membership.services import MembershipService
from ..models import Customer


class CustomerSerializer(serializers.ModelSerializer):
    """
    Member profile as returned to the member portal.
    Used for: login, GET /api/member/me/, PUT /api/member/profile/
    Note: the password digest is never part of this payload.
    """
    memberId = serializers.CharField(source='member_id', read_only=True)
    joinDate = serializers.DateField(source='join_date', read_only=True)
    isFirstLogin = serializers.BooleanField(source='is_first_login', read_only=True)
    lastLogin = serializers.DateTimeField(source='last_login', read_only=True)
    createdAt = serializers.DateTimeField(source='created_at', read_only=True)
    membershipStatus = serializers.SerializerMethodField()

    class Meta:
        model = Customer
        fields = [
            'id', 'memberId', 'name', 'phone', 'email', 'photo', 'age', 'gender',
            'address', 'plan', 'joinDate', 'validity', 'isFirstLogin', 'lastLogin',
            'createdAt', 'membershipStatus'
        ]
        read_only_fields = fields

    def get_membershipStatus(self, obj):
        return MembershipService.status_for(obj).to_dict()


class ProfileUpdateSerializer(serializers.Serializer):
    """
    Input for PUT /api/member/profile/.
    Only these fields are accepted; blank values are allowed here and ignored
    by the profile service.
    """
    name = serializers.CharField(required=False, allow_blank=True, allow_null=True, max_length=100)
    phone = serializers.CharField(required=False, allow_blank=True, allow_null=True, max_length=20)
    email = serializers.EmailField(required=False, allow_blank=True, allow_null=True)
    photo = serializers.CharField(required=False, allow_blank=True, allow_null=True, max_length=500)
