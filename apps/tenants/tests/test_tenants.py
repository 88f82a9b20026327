import pytest
from django.urls import reverse

from apps.tenants.models import Tenant


@pytest.mark.django_db
class TestTenantModel:
    def test_full_name(self, tenant):
        assert tenant.get_full_name() == 'Alice Nguyen'
        assert str(tenant) == 'Alice Nguyen'

    def test_email_lowercased(self, test_user):
        tenant = Tenant.objects.create(user=test_user, first_name='Bo', last_name='Li',
                                       email=' Bo.Li@Example.COM ', phone='555-0199')
        assert tenant.email == 'bo.li@example.com'

    def test_to_dict(self, tenant):
        data = tenant.to_dict()
        assert data['property']['name'] == 'Maple Duplex'
        assert data['emergency_contact'] == {'name': '', 'relationship': '', 'phone': ''}


@pytest.mark.django_db
class TestTenantViews:
    def test_requires_login(self, client):
        assert client.get(reverse('tenants:tenant_list')).status_code == 401

    def test_create(self, auth_client, prop):
        response = auth_client.post(reverse('tenants:tenant_list'), {
            'first_name': 'Brian', 'last_name': 'Ortiz', 'email': 'Brian@Example.com',
            'phone': '555-0102', 'property': prop.pk,
        }, content_type='application/json')
        assert response.status_code == 201
        data = response.json()
        assert data['status'] == 'Prospective'
        assert data['email'] == 'brian@example.com'
        assert data['property']['id'] == prop.pk

    def test_create_invalid_email(self, auth_client):
        response = auth_client.post(reverse('tenants:tenant_list'), {
            'first_name': 'Brian', 'last_name': 'Ortiz', 'email': 'not-an-email', 'phone': '1',
        }, content_type='application/json')
        assert response.status_code == 400
        assert 'email' in response.json()['errors']

    def test_cannot_use_foreign_property(self, auth_client, other_prop):
        response = auth_client.post(reverse('tenants:tenant_list'), {
            'first_name': 'Brian', 'last_name': 'Ortiz', 'email': 'b@example.com',
            'phone': '1', 'property': other_prop.pk,
        }, content_type='application/json')
        assert response.status_code == 400
        assert 'property' in response.json()['errors']

    def test_list_filters(self, auth_client, tenant, test_user):
        Tenant.objects.create(user=test_user, first_name='Cara', last_name='Diaz',
                              email='cara@example.com', phone='1', status='Previous')

        all_rows = auth_client.get(reverse('tenants:tenant_list')).json()
        assert len(all_rows) == 2

        by_property = auth_client.get(reverse('tenants:tenant_list'), {'property': tenant.property_id}).json()
        assert [row['first_name'] for row in by_property] == ['Alice']

        previous = auth_client.get(reverse('tenants:tenant_list'), {'status': 'Previous'}).json()
        assert [row['first_name'] for row in previous] == ['Cara']

    def test_update_and_delete(self, auth_client, tenant):
        url = reverse('tenants:tenant_detail', args=[tenant.pk])

        response = auth_client.patch(url, {'phone': '555-9999'}, content_type='application/json')
        assert response.status_code == 200
        assert response.json()['phone'] == '555-9999'
        assert response.json()['status'] == 'Active'

        response = auth_client.delete(url)
        assert response.json() == {'message': 'Tenant removed'}
        assert auth_client.get(url).status_code == 404

    def test_other_users_tenant(self, client, other_user, tenant):
        client.login(username='other', password='pass')
        assert client.get(reverse('tenants:tenant_detail', args=[tenant.pk])).status_code == 404
