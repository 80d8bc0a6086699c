from django.db import models
from django.utils import timezone


class Payment(models.Model):
    """Membership fee paid by a customer"""

    METHOD_CHOICES = [
        ('cash', 'Cash'),
        ('card', 'Card'),
        ('upi', 'UPI'),
        ('bank_transfer', 'Bank Transfer'),
    ]

    customer = models.ForeignKey('members.Customer', on_delete=models.CASCADE, related_name='payments')
    amount = models.DecimalField(max_digits=10, decimal_places=2)
    plan = models.CharField(max_length=20, blank=True, default='')
    method = models.CharField(max_length=20, choices=METHOD_CHOICES, default='cash')
    payment_date = models.DateTimeField(default=timezone.now)
    valid_until = models.DateField(null=True, blank=True, help_text="Validity date this payment extends to")
    notes = models.TextField(blank=True, default='')
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'payments'
        ordering = ['-payment_date']
        indexes = [
            models.Index(fields=['customer', '-payment_date']),
        ]

    def __str__(self):
        return f"{self.customer.member_id} - {self.amount} ({self.method})"
