from django.db import models
from django.utils import timezone


class Attendance(models.Model):
    """One gym check-in by a customer"""

    METHOD_CHOICES = [
        ('manual', 'Manual'),
        ('qr', 'QR Code'),
    ]

    customer = models.ForeignKey('members.Customer', on_delete=models.CASCADE, related_name='attendance')
    date = models.DateField(default=timezone.localdate, help_text="Calendar day of the check-in")
    timestamp = models.DateTimeField(default=timezone.now)
    method = models.CharField(max_length=10, choices=METHOD_CHOICES, default='manual')

    class Meta:
        db_table = 'attendance'
        ordering = ['-timestamp']
        indexes = [
            models.Index(fields=['customer', '-timestamp']),
            models.Index(fields=['date']),
        ]

    def __str__(self):
        return f"{self.customer.member_id} @ {self.timestamp:%Y-%m-%d %H:%M}"
