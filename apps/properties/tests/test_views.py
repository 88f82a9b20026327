from datetime import timedelta
from decimal import Decimal

import pytest
from django.urls import reverse
from django.utils import timezone

from apps.properties.models import Property
from apps.transactions.models import Transaction


NEW_PROPERTY = {
    'name': 'Harbor Condo',
    'street': '400 Harbor Blvd',
    'city': 'Portland',
    'state': 'ME',
    'zip_code': '04101',
    'bedrooms': 2,
    'rental_rate': '1400.00',
}


@pytest.mark.django_db
class TestPropertyViews:
    def test_requires_login(self, client):
        response = client.get(reverse('properties:property_list'))
        assert response.status_code == 401

    def test_list_only_own(self, auth_client, prop, other_prop):
        response = auth_client.get(reverse('properties:property_list'))
        assert [row['name'] for row in response.json()] == ['Maple Duplex']

    def test_list_status_filter(self, auth_client, prop, test_user):
        Property.objects.create(user=test_user, name='Rented One', street='x', city='x',
                                state='x', zip_code='x', status='Rented')
        response = auth_client.get(reverse('properties:property_list'), {'status': 'Rented'})
        assert [row['name'] for row in response.json()] == ['Rented One']

    def test_create(self, auth_client, test_user):
        response = auth_client.post(reverse('properties:property_list'), NEW_PROPERTY,
                                    content_type='application/json')
        assert response.status_code == 201
        data = response.json()
        assert data['status'] == 'Vacant'
        assert data['property_type'] == 'Single Family'
        assert data['address']['country'] == 'USA'
        assert data['features']['bedrooms'] == 2
        assert Property.active.get(pk=data['id']).user == test_user

    def test_create_missing_fields(self, auth_client):
        response = auth_client.post(reverse('properties:property_list'), {'name': 'Only a name'},
                                    content_type='application/json')
        assert response.status_code == 400
        errors = response.json()['errors']
        assert {'street', 'city', 'state', 'zip_code'} <= set(errors)

    def test_create_duplicate_name(self, auth_client, prop):
        payload = dict(NEW_PROPERTY, name='Maple Duplex')
        response = auth_client.post(reverse('properties:property_list'), payload,
                                    content_type='application/json')
        assert response.status_code == 400
        assert 'name' in response.json()['errors']

    def test_detail(self, auth_client, prop):
        response = auth_client.get(reverse('properties:property_detail', args=[prop.pk]))
        assert response.status_code == 200
        assert response.json()['name'] == 'Maple Duplex'

    def test_detail_other_user(self, auth_client, other_prop):
        response = auth_client.get(reverse('properties:property_detail', args=[other_prop.pk]))
        assert response.status_code == 404
        assert response.json()['message'] == 'Property not found'

    def test_partial_update(self, auth_client, prop):
        response = auth_client.patch(reverse('properties:property_detail', args=[prop.pk]),
                                     {'status': 'Rented'}, content_type='application/json')
        assert response.status_code == 200
        prop.refresh_from_db()
        assert prop.status == 'Rented'
        assert prop.rental_rate == Decimal('1500.00')

    def test_rename_to_own_name(self, auth_client, prop):
        response = auth_client.put(reverse('properties:property_detail', args=[prop.pk]),
                                   {'name': 'Maple Duplex', 'city': 'Chicago'},
                                   content_type='application/json')
        assert response.status_code == 200
        assert response.json()['address']['city'] == 'Chicago'

    def test_delete(self, auth_client, prop, tenant):
        response = auth_client.delete(reverse('properties:property_detail', args=[prop.pk]))
        assert response.json() == {'message': 'Property removed'}
        assert not Property.active.filter(pk=prop.pk).exists()
        tenant.refresh_from_db()
        assert tenant.property_id is None


@pytest.mark.django_db
class TestPropertySummary:
    def test_summary(self, auth_client, prop, test_user):
        today = timezone.localdate()
        Transaction.objects.create(user=test_user, property=prop, date=today,
                                   amount=Decimal('1500'), tx_type='income', category='Rent')
        Transaction.objects.create(user=test_user, property=prop, date=today - timedelta(days=40),
                                   amount=Decimal('300'), tx_type='expense', category='Utilities')
        Transaction.objects.create(user=test_user, date=today, amount=Decimal('50'), tx_type='expense')

        response = auth_client.get(reverse('properties:property_summary', args=[prop.pk]))
        assert response.status_code == 200
        data = response.json()

        assert data['property']['name'] == 'Maple Duplex'
        summary = data['summary']
        assert Decimal(summary['total_income']) == Decimal('1500')
        assert Decimal(summary['total_expenses']) == Decimal('300')
        assert Decimal(summary['net_cash_flow']) == Decimal('1200')
        assert list(summary['by_property']) == ['Maple Duplex']
        assert len(summary['by_month']) == 12
        assert Decimal(summary['by_month'][-1]['income']) == Decimal('1500')

    def test_summary_months(self, auth_client, prop):
        response = auth_client.get(reverse('properties:property_summary', args=[prop.pk]), {'months': 6})
        assert len(response.json()['summary']['by_month']) == 6

    def test_summary_bad_months(self, auth_client, prop):
        response = auth_client.get(reverse('properties:property_summary', args=[prop.pk]), {'months': 'x'})
        assert response.status_code == 400

    def test_summary_other_user(self, auth_client, other_prop):
        response = auth_client.get(reverse('properties:property_summary', args=[other_prop.pk]))
        assert response.status_code == 404
