from django.contrib import admin

from .models import Attendance


@admin.register(Attendance)
class AttendanceAdmin(admin.ModelAdmin):
    list_display = ['customer', 'date', 'timestamp', 'method']
    list_filter = ['method', 'date']
    search_fields = ['customer__member_id', 'customer__name']
    date_hierarchy = 'date'
    raw_id_fields = ['customer']
