from rest_framework import serializers

from .models import Payment


class PaymentRecordSerializer(serializers.ModelSerializer):
    """Payment as listed in the member's payment history"""
    paymentDate = serializers.DateTimeField(source='payment_date', read_only=True)
    validUntil = serializers.DateField(source='valid_until', read_only=True)

    class Meta:
        model = Payment
        fields = ['id', 'amount', 'plan', 'method', 'paymentDate', 'validUntil', 'notes']
        read_only_fields = fields
