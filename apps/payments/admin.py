from django.contrib import admin

from .models import Payment


@admin.register(Payment)
class PaymentAdmin(admin.ModelAdmin):
    list_display = ['customer', 'amount', 'plan', 'method', 'payment_date', 'valid_until']
    list_filter = ['method', 'plan']
    search_fields = ['customer__member_id', 'customer__name']
    date_hierarchy = 'payment_date'
    raw_id_fields = ['customer']
