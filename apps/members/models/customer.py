from django.db import models
from django.utils import timezone

from apps.common.password_utils import get_password_hasher


class Customer(models.Model):
    """Gym member record with plan, validity and member portal credentials"""

    PLAN_CHOICES = [
        ('1 month', '1 Month'),
        ('3 months', '3 Months'),
        ('6 months', '6 Months'),
        ('12 months', '12 Months'),
    ]

    GENDER_CHOICES = [
        ('male', 'Male'),
        ('female', 'Female'),
        ('other', 'Other'),
    ]

    member_id = models.CharField(max_length=20, unique=True, help_text="Public member ID, e.g. U001")
    name = models.CharField(max_length=100)
    phone = models.CharField(max_length=20, blank=True, default='')
    email = models.EmailField(blank=True, default='')
    photo = models.CharField(max_length=500, blank=True, default='', help_text="Photo URL or upload path")
    age = models.PositiveSmallIntegerField(null=True, blank=True)
    gender = models.CharField(max_length=10, choices=GENDER_CHOICES, blank=True, default='')
    address = models.TextField(blank=True, default='')

    plan = models.CharField(max_length=20, choices=PLAN_CHOICES, default='1 month')
    join_date = models.DateField(default=timezone.localdate)
    validity = models.DateField(help_text="Last day the membership is paid for")

    # Portal credentials; an empty password means the account is not activated
    password = models.CharField(max_length=128, blank=True, default='')
    is_first_login = models.BooleanField(default=True)
    last_login = models.DateTimeField(null=True, blank=True)
    push_subscription = models.JSONField(null=True, blank=True)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'customers'
        ordering = ['member_id']
        indexes = [
            models.Index(fields=['validity']),
            models.Index(fields=['plan']),
            models.Index(fields=['created_at']),
        ]

    def __str__(self):
        return f"{self.member_id} - {self.name}"

    @property
    def has_password(self):
        return bool(self.password)

    def set_password(self, raw_password):
        """Store a digest of raw_password; does not save"""
        self.password = get_password_hasher().hash(raw_password)

    def check_password(self, raw_password):
        """False for unactivated accounts and mismatches alike"""
        if not self.password:
            return False
        return get_password_hasher().verify(raw_password, self.password)
