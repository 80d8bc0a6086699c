from datetime import date

from django.conf import settings
from django.core.management.base import BaseCommand, CommandError

from apps.members.models import Customer


class Command(BaseCommand):
    help = 'Provision a member portal account (first login forces a password change)'

    def add_arguments(self, parser):
        parser.add_argument('member_id', help='Public member ID, e.g. U001')
        parser.add_argument('name')
        parser.add_argument('--validity', required=True, help='Last paid day, YYYY-MM-DD')
        parser.add_argument('--plan', default='1 month', choices=[choice for choice, _ in Customer.PLAN_CHOICES])
        parser.add_argument('--phone', default='')
        parser.add_argument('--email', default='')
        parser.add_argument('--password', default=None, help='Initial password (defaults to MEMBER_DEFAULT_PASSWORD)')

    def handle(self, *args, **options):
        try:
            validity = date.fromisoformat(options['validity'])
        except ValueError:
            raise CommandError(f"Invalid validity date: {options['validity']}")

        if Customer.objects.filter(member_id=options['member_id']).exists():
            raise CommandError(f"Member {options['member_id']} already exists")

        customer = Customer(
            member_id=options['member_id'],
            name=options['name'],
            plan=options['plan'],
            phone=options['phone'],
            email=options['email'],
            validity=validity,
        )
        customer.set_password(options['password'] or settings.MEMBER_DEFAULT_PASSWORD)
        customer.save()

        self.stdout.write(self.style.SUCCESS(f'Created member {customer.member_id} ({customer.name})'))
