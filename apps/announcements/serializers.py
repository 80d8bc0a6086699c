from rest_framework import serializers

from .models import Announcement


class AnnouncementSerializer(serializers.ModelSerializer):
    isActive = serializers.BooleanField(source='is_active', required=False)
    expiresAt = serializers.DateTimeField(source='expires_at', required=False, allow_null=True)
    createdAt = serializers.DateTimeField(source='created_at', read_only=True)
    createdBy = serializers.SerializerMethodField()

    class Meta:
        model = Announcement
        fields = ['id', 'title', 'message', 'type', 'isActive', 'expiresAt', 'createdAt', 'createdBy']
        read_only_fields = ['id', 'createdAt', 'createdBy']

    def get_createdBy(self, obj):
        return obj.created_by.username if obj.created_by else None
