from rest_framework import serializers

from .models import Attendance


class AttendanceRecordSerializer(serializers.ModelSerializer):
    """Check-in as listed in the member's attendance history"""

    class Meta:
        model = Attendance
        fields = ['id', 'date', 'timestamp', 'method']
        read_only_fields = fields
