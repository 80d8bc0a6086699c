from django.conf import settings
from django.contrib import admin
from django.utils.html import format_html

from apps.membership.services import MembershipService
from .models import Customer


@admin.register(Customer)
class CustomerAdmin(admin.ModelAdmin):
    """Customer admin; provisioning happens here or via create_member"""
    list_display = [
        'member_id', 'name', 'phone', 'plan', 'validity',
        'membership_status', 'is_first_login', 'last_login'
    ]
    list_filter = ['plan', 'is_first_login', 'gender']
    search_fields = ['member_id', 'name', 'phone', 'email']
    ordering = ['member_id']
    readonly_fields = ['is_first_login', 'last_login', 'created_at', 'updated_at']
    exclude = ['password', 'push_subscription']
    actions = ['reset_portal_password']

    STATUS_COLORS = {
        'active': 'green',
        'expiring': 'orange',
        'expired': 'red',
    }

    def membership_status(self, obj):
        status = MembershipService.status_for(obj)
        return format_html(
            '<span style="color: {};">{} ({} days)</span>',
            self.STATUS_COLORS[status.status_class.value],
            status.text,
            status.days_remaining,
        )
    membership_status.short_description = 'Status'

    @admin.action(description='Reset portal password to the default')
    def reset_portal_password(self, request, queryset):
        count = 0
        for customer in queryset:
            customer.set_password(settings.MEMBER_DEFAULT_PASSWORD)
            customer.is_first_login = True
            customer.save(update_fields=['password', 'is_first_login', 'updated_at'])
            count += 1
        self.message_user(request, f'Reset portal password for {count} member(s).')
