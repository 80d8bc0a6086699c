import logging

from django.core.mail import send_mail
from django.core.management.base import BaseCommand

from apps.members.models import Customer
from apps.membership.services import MembershipService
from apps.membership.status import EXPIRING_WINDOW_DAYS

logger = logging.getLogger(__name__)


class Command(BaseCommand):
    help = 'Email members whose membership is expiring soon'

    def add_arguments(self, parser):
        parser.add_argument(
            '--days', type=int, default=EXPIRING_WINDOW_DAYS,
            help=f'Only remind members with at most this many days left (max {EXPIRING_WINDOW_DAYS})'
        )
        parser.add_argument('--dry-run', action='store_true', help='List recipients without sending')

    def handle(self, *args, **options):
        max_days = min(options['days'], EXPIRING_WINDOW_DAYS)
        today = MembershipService.today()

        candidates = (
            Customer.objects
            .filter(**MembershipService.expiring_filter(today))
            .exclude(email='')
            .order_by('validity')
        )

        sent = 0
        for customer in candidates:
            status = MembershipService.status_for(customer, today)
            if status.days_remaining > max_days:
                continue

            if options['dry_run']:
                self.stdout.write(f'{customer.member_id} <{customer.email}> {status.days_remaining} day(s) left')
                continue

            send_mail(
                subject='Your gym membership is expiring soon',
                message=self._message(customer, status),
                from_email=None,
                recipient_list=[customer.email],
            )
            logger.info(f"Expiry reminder sent to {customer.member_id}")
            sent += 1

        self.stdout.write(self.style.SUCCESS(f'Sent {sent} reminder(s)'))

    def _message(self, customer, status):
        if status.days_remaining == 0:
            when = 'today'
        else:
            when = f'in {status.days_remaining} day(s), on {customer.validity:%d %b %Y}'
        return (
            f'Hi {customer.name},\n\n'
            f'Your {customer.plan} membership ({customer.member_id}) expires {when}.\n'
            f'Renew at the front desk to keep training without a break.\n'
        )
