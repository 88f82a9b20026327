"""
Fixtures shared by every app's tests
"""
from decimal import Decimal

import pytest
from django.contrib.auth.models import User

from apps.properties.models import Property
from apps.tenants.models import Tenant


@pytest.fixture
def test_user(db):
    """Owner used by most tests"""
    return User.objects.create_user(username='tester', password='pass', email='tester@example.com')


@pytest.fixture
def other_user(db):
    """Second user (ownership checks)"""
    return User.objects.create_user(username='other', password='pass', email='other@example.com')


@pytest.fixture
def auth_client(client, test_user):
    """Signed-in client"""
    client.login(username='tester', password='pass')
    return client


@pytest.fixture
def prop(test_user):
    return Property.objects.create(
        user=test_user,
        name='Maple Duplex',
        street='12 Maple St',
        city='Springfield',
        state='IL',
        zip_code='62701',
        rental_rate=Decimal('1500.00'),
    )


@pytest.fixture
def other_prop(other_user):
    """Property owned by other_user"""
    return Property.objects.create(
        user=other_user,
        name='Other Place',
        street='1 Elm St',
        city='Salem',
        state='OR',
        zip_code='97301',
    )


@pytest.fixture
def tenant(test_user, prop):
    return Tenant.objects.create(
        user=test_user,
        first_name='Alice',
        last_name='Nguyen',
        email='alice@example.com',
        phone='555-0101',
        status='Active',
        property=prop,
    )
