"""
Fixtures for the transactions app tests
"""
from datetime import date
from decimal import Decimal

import pytest

from apps.transactions.models import Mortgage, Transaction


@pytest.fixture
def rent(test_user, prop, tenant):
    return Transaction.objects.create(
        user=test_user, property=prop, tenant=tenant, date=date(2025, 4, 1),
        amount=Decimal('1500.00'), tx_type='income', category='Rent', description='April rent',
    )


@pytest.fixture
def repair(test_user, prop):
    return Transaction.objects.create(
        user=test_user, property=prop, date=date(2025, 4, 10),
        amount=Decimal('500.00'), tx_type='expense', category='Maintenance', description='Roof patch',
    )


@pytest.fixture
def foreign_tx(other_user, other_prop):
    """Transaction owned by other_user"""
    return Transaction.objects.create(
        user=other_user, property=other_prop, date=date(2025, 4, 1),
        amount=Decimal('999.00'), tx_type='income', category='Rent',
    )


@pytest.fixture
def mortgage(test_user, prop):
    return Mortgage.objects.create(
        user=test_user, property=prop, lender='First Federal',
        original_amount=Decimal('240000.00'), current_balance=Decimal('200000.00'),
        interest_rate=Decimal('4.250'), term=360,
        start_date=date(2020, 1, 1), maturity_date=date(2050, 1, 1),
        monthly_payment=Decimal('1180.66'), payment_day=1,
    )
