from datetime import date

import pytest
from django.core.exceptions import ValidationError
from django.urls import reverse
from django.utils import timezone

from apps.maintenance.models import MaintenanceRequest


@pytest.fixture
def leak(test_user, prop, tenant):
    return MaintenanceRequest.objects.create(
        user=test_user, property=prop, tenant=tenant,
        title='Leaking faucet', description='Kitchen faucet drips', priority='Low', category='Plumbing',
    )


@pytest.mark.django_db
class TestMaintenanceModel:
    def test_defaults(self, leak):
        assert leak.status == 'Open'
        assert leak.date_submitted == timezone.localdate()
        assert str(leak) == '[Open] Leaking faucet'

    def test_completion_date_set_on_complete(self, leak):
        leak.status = 'Completed'
        leak.save()
        assert leak.completion_date == timezone.localdate()

    def test_completion_before_start(self, leak):
        leak.start_date = date(2025, 5, 10)
        leak.completion_date = date(2025, 5, 1)
        with pytest.raises(ValidationError):
            leak.full_clean()


@pytest.mark.django_db
class TestMaintenanceViews:
    def test_requires_login(self, client):
        assert client.get(reverse('maintenance:request_list')).status_code == 401

    def test_create(self, auth_client, prop):
        response = auth_client.post(reverse('maintenance:request_list'), {
            'property': prop.pk, 'title': 'No heat', 'description': 'Furnace will not start',
            'priority': 'Emergency', 'category': 'HVAC',
        }, content_type='application/json')
        assert response.status_code == 201
        data = response.json()
        assert data['status'] == 'Open'
        assert data['estimated_cost'] == '0.00'
        assert data['date_submitted'] == timezone.localdate().isoformat()

    def test_create_needs_description(self, auth_client, prop):
        response = auth_client.post(reverse('maintenance:request_list'), {
            'property': prop.pk, 'title': 'No heat',
        }, content_type='application/json')
        assert response.status_code == 400
        assert 'description' in response.json()['errors']

    def test_by_property(self, auth_client, leak, prop):
        rows = auth_client.get(reverse('maintenance:requests_by_property', args=[prop.pk])).json()
        assert [row['id'] for row in rows] == [leak.pk]

    def test_by_property_foreign(self, auth_client, other_prop):
        response = auth_client.get(reverse('maintenance:requests_by_property', args=[other_prop.pk]))
        assert response.status_code == 404

    def test_by_status(self, auth_client, leak):
        rows = auth_client.get(reverse('maintenance:requests_by_status', args=['Open'])).json()
        assert [row['id'] for row in rows] == [leak.pk]
        assert auth_client.get(reverse('maintenance:requests_by_status', args=['Completed'])).json() == []

    def test_by_unknown_status(self, auth_client):
        response = auth_client.get(reverse('maintenance:requests_by_status', args=['Lost']))
        assert response.status_code == 400

    def test_complete_and_delete(self, auth_client, leak):
        url = reverse('maintenance:request_detail', args=[leak.pk])

        response = auth_client.patch(url, {'status': 'Completed', 'actual_cost': '85.00'},
                                     content_type='application/json')
        assert response.status_code == 200
        assert response.json()['completion_date'] == timezone.localdate().isoformat()

        assert auth_client.delete(url).json() == {'message': 'Maintenance request removed'}
        assert auth_client.get(url).status_code == 404
