import random
from datetime import date
from decimal import Decimal

from django.contrib.auth import get_user_model
from django.core.management.base import BaseCommand, CommandError
from django.db import transaction as db_transaction
from django.utils import timezone

from apps.leases.models import Lease
from apps.maintenance.models import MaintenanceRequest
from apps.properties.models import Property
from apps.tenants.models import Tenant
from apps.transactions.models import Mortgage, Transaction
from apps.transactions.summary import shift_month

User = get_user_model()

DEMO_PROPERTIES = [
    # name, street, city, state, zip, type, rent
    ('Maple Duplex', '12 Maple St', 'Springfield', 'IL', '62701', 'Multi-Family', Decimal('1850.00')),
    ('Harbor Condo', '400 Harbor Blvd #5C', 'Portland', 'ME', '04101', 'Condo', Decimal('1400.00')),
]

DEMO_TENANTS = [
    ('Alice', 'Nguyen', 'alice.nguyen@example.com', '555-0101'),
    ('Brian', 'Ortiz', 'brian.ortiz@example.com', '555-0102'),
]

# category, low, high (whole dollars)
EXPENSES = [
    ('Utilities', 80, 220),
    ('Maintenance', 50, 600),
    ('Insurance', 90, 140),
]


class Command(BaseCommand):
    help = 'Create demo properties, tenants, leases and monthly transactions for one user'

    def add_arguments(self, parser):
        parser.add_argument('--username', type=str, default='demo', help='Owner username')
        parser.add_argument('--months', type=int, default=12, help='Months of history to create')
        parser.add_argument('--seed', type=int, default=None, help='Random seed for repeatable data')

    @db_transaction.atomic
    def handle(self, *args, **options):
        username = options['username']
        months = options['months']
        if months < 1:
            raise CommandError('--months must be at least 1')
        rng = random.Random(options['seed'])

        self.stdout.write(f"=== Seeding demo data for '{username}' ===")

        user, created = User.objects.get_or_create(
            username=username,
            defaults={'email': f'{username}@example.com', 'first_name': 'Demo', 'last_name': 'Owner'}
        )
        if created:
            user.set_password('demo-pass-1234')
            user.save()

        today = timezone.localdate()
        first_year, first_month = shift_month(today.year, today.month, -(months - 1))
        lease_start = date(first_year, first_month, 1)

        transactions = []
        for (name, street, city, state, zip_code, ptype, rent), tenant_info in zip(DEMO_PROPERTIES, DEMO_TENANTS):
            prop, _ = Property.active.get_or_create(
                user=user, name=name,
                defaults={
                    'street': street, 'city': city, 'state': state, 'zip_code': zip_code,
                    'property_type': ptype, 'status': 'Rented', 'rental_rate': rent,
                    'security_deposit': rent,
                }
            )
            first_name, last_name, email, phone = tenant_info
            tenant, _ = Tenant.active.get_or_create(
                user=user, email=email,
                defaults={
                    'first_name': first_name, 'last_name': last_name, 'phone': phone,
                    'status': 'Active', 'property': prop,
                }
            )
            Lease.active.get_or_create(
                user=user, property=prop, tenant=tenant,
                defaults={
                    'start_date': lease_start,
                    'end_date': date(lease_start.year + 1, lease_start.month, 1),
                    'rent_amount': rent,
                    'security_deposit': rent,
                    'status': 'Active',
                    'terms': 'Standard 12 month residential lease',
                }
            )

            for offset in range(months):
                year, month = shift_month(first_year, first_month, offset)
                transactions.append(Transaction(
                    user=user, property=prop, tenant=tenant, date=date(year, month, 1),
                    amount=rent, tx_type='income', category='Rent',
                    description=f'{month:02d}/{year} rent', payment_method='Bank Transfer',
                ))
                category, low, high = rng.choice(EXPENSES)
                transactions.append(Transaction(
                    user=user, property=prop, date=date(year, month, rng.randint(2, 28)),
                    amount=Decimal(rng.randint(low, high)), tx_type='expense', category=category,
                    description=f'{category} - {name}',
                ))

        # No future-dated rows
        transactions = [tx for tx in transactions if tx.date <= today]
        Transaction.objects.bulk_create(transactions)

        first_property = Property.active.filter(user=user).order_by('pk').first()
        Mortgage.active.get_or_create(
            user=user, property=first_property, lender='First Federal',
            defaults={
                'original_amount': Decimal('240000.00'),
                'current_balance': Decimal('212500.00'),
                'interest_rate': Decimal('4.250'),
                'term': 360,
                'start_date': date(2019, 6, 1),
                'maturity_date': date(2049, 6, 1),
                'monthly_payment': Decimal('1180.66'),
                'payment_day': 1,
            }
        )
        MaintenanceRequest.active.get_or_create(
            user=user, property=first_property, title='Leaking kitchen faucet',
            defaults={'description': 'Faucet drips constantly', 'priority': 'Low', 'category': 'Plumbing'}
        )

        self.stdout.write(self.style.SUCCESS(
            f"Done: {len(transactions)} transactions over {months} month(s) for '{username}'"
        ))
