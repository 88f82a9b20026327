from datetime import date
from decimal import Decimal

import pytest
from django.core.exceptions import ValidationError
from django.urls import reverse

from apps.leases.models import Lease
from apps.tenants.models import Tenant


@pytest.fixture
def lease(test_user, prop, tenant):
    return Lease.objects.create(
        user=test_user, property=prop, tenant=tenant,
        start_date=date(2025, 1, 1), end_date=date(2025, 12, 31),
        rent_amount=Decimal('1500.00'), security_deposit=Decimal('1500.00'),
        status='Active', terms='12 month lease',
    )


def lease_payload(prop, tenant, **overrides):
    payload = {
        'property': prop.pk,
        'tenant': tenant.pk,
        'start_date': '2025-06-01',
        'end_date': '2026-05-31',
        'rent_amount': '1600.00',
        'security_deposit': '1600.00',
        'terms': 'Standard lease',
    }
    payload.update(overrides)
    return payload


@pytest.mark.django_db
class TestLeaseModel:
    def test_is_current(self, lease):
        assert lease.is_current(date(2025, 6, 1))
        assert not lease.is_current(date(2026, 1, 1))

        lease.status = 'Terminated'
        assert not lease.is_current(date(2025, 6, 1))

    def test_end_before_start(self, lease):
        lease.end_date = date(2024, 12, 1)
        with pytest.raises(ValidationError) as exc:
            lease.full_clean()
        assert 'end_date' in exc.value.message_dict

    def test_tenant_of_other_owner(self, lease, other_user):
        stranger = Tenant.objects.create(user=other_user, first_name='Eve', last_name='X',
                                         email='eve@example.com', phone='1')
        lease.tenant = stranger
        with pytest.raises(ValidationError) as exc:
            lease.full_clean()
        assert 'tenant' in exc.value.message_dict

    def test_to_dict(self, lease):
        data = lease.to_dict()
        assert data['payment_due'] == {'day': 1, 'frequency': 'Monthly'}
        assert data['late_fee'] == {'amount': Decimal('0.00'), 'grace_period': 0}
        assert data['tenant']['last_name'] == 'Nguyen'


@pytest.mark.django_db
class TestLeaseViews:
    def test_create_with_defaults(self, auth_client, prop, tenant):
        response = auth_client.post(reverse('leases:lease_list'), lease_payload(prop, tenant),
                                    content_type='application/json')
        assert response.status_code == 201
        data = response.json()
        assert data['status'] == 'Pending'
        assert data['payment_due']['frequency'] == 'Monthly'
        assert data['late_fee']['amount'] == '0.00'

    def test_create_bad_dates(self, auth_client, prop, tenant):
        payload = lease_payload(prop, tenant, end_date='2025-05-01')
        response = auth_client.post(reverse('leases:lease_list'), payload, content_type='application/json')
        assert response.status_code == 400
        assert 'end_date' in response.json()['errors']

    def test_create_requires_terms(self, auth_client, prop, tenant):
        payload = lease_payload(prop, tenant, terms='')
        response = auth_client.post(reverse('leases:lease_list'), payload, content_type='application/json')
        assert response.status_code == 400
        assert 'terms' in response.json()['errors']

    def test_list_filters(self, auth_client, lease, prop):
        rows = auth_client.get(reverse('leases:lease_list'), {'property': prop.pk, 'status': 'Active'}).json()
        assert [row['id'] for row in rows] == [lease.pk]
        assert auth_client.get(reverse('leases:lease_list'), {'status': 'Expired'}).json() == []

    def test_update_and_delete(self, auth_client, lease):
        url = reverse('leases:lease_detail', args=[lease.pk])

        response = auth_client.patch(url, {'status': 'Expired'}, content_type='application/json')
        assert response.status_code == 200
        assert response.json()['status'] == 'Expired'

        assert auth_client.delete(url).json() == {'message': 'Lease removed'}
        assert not Lease.active.filter(pk=lease.pk).exists()

    def test_other_users_lease(self, client, other_user, lease):
        client.login(username='other', password='pass')
        assert client.get(reverse('leases:lease_detail', args=[lease.pk])).status_code == 404


@pytest.mark.django_db
def test_lease_update_after_tenant_deleted(auth_client, lease, tenant):
    tenant.soft_delete()
    response = auth_client.patch(reverse('leases:lease_detail', args=[lease.pk]),
                                 {'notes': 'Tenant moved out early'}, content_type='application/json')
    assert response.status_code == 200
    assert response.json()['tenant']['id'] == tenant.pk
