from datetime import date
from decimal import Decimal

import pytest
from django.db import IntegrityError

from apps.properties.models import Property
from apps.tenants.models import Tenant
from apps.transactions.models import Transaction


@pytest.mark.django_db
class TestPropertyModel:
    def test_address_display(self, prop):
        assert prop.address_display == '12 Maple St, Springfield, IL 62701'

    def test_defaults(self, prop):
        assert prop.status == 'Vacant'
        assert prop.property_type == 'Single Family'
        assert prop.country == 'USA'

    def test_duplicate_active_name(self, prop, test_user):
        with pytest.raises(IntegrityError):
            Property.objects.create(user=test_user, name='Maple Duplex', street='x', city='x',
                                    state='x', zip_code='x')

    def test_name_reusable_after_delete(self, prop, test_user):
        prop.soft_delete()
        again = Property.objects.create(user=test_user, name='Maple Duplex', street='x', city='x',
                                        state='x', zip_code='x')
        assert again.pk != prop.pk

    def test_same_name_other_user(self, prop, other_user):
        Property.objects.create(user=other_user, name='Maple Duplex', street='x', city='x',
                                state='x', zip_code='x')
        assert Property.objects.filter(name='Maple Duplex').count() == 2

    def test_soft_delete_unlinks_tenants(self, prop, tenant):
        prop.soft_delete()

        tenant.refresh_from_db()
        assert tenant.property is None
        assert not Property.active.filter(pk=prop.pk).exists()

    def test_restore(self, prop):
        prop.soft_delete()
        prop.restore()
        assert Property.active.filter(pk=prop.pk).exists()

    def test_income_and_expense_totals(self, prop, test_user):
        Transaction.objects.create(user=test_user, property=prop, date=date(2025, 1, 1),
                                   amount=Decimal('1000'), tx_type='income')
        Transaction.objects.create(user=test_user, property=prop, date=date(2025, 2, 1),
                                   amount=Decimal('1000'), tx_type='income')
        Transaction.objects.create(user=test_user, property=prop, date=date(2025, 2, 5),
                                   amount=Decimal('250'), tx_type='expense')
        deleted = Transaction.objects.create(user=test_user, property=prop, date=date(2025, 2, 6),
                                             amount=Decimal('99'), tx_type='expense')
        deleted.soft_delete()

        assert prop.get_total_income() == Decimal('2000')
        assert prop.get_total_income(start_date=date(2025, 2, 1)) == Decimal('1000')
        assert prop.get_total_expense() == Decimal('250')
        assert prop.get_total_expense(end_date=date(2025, 1, 31)) == Decimal('0.00')

    def test_to_dict(self, prop):
        data = prop.to_dict()
        assert data['address']['city'] == 'Springfield'
        assert data['features']['bedrooms'] == 0
        assert data['financials']['rental_rate'] == Decimal('1500.00')

    def test_is_owner(self, prop, test_user, other_user):
        assert prop.is_owner(test_user)
        assert not prop.is_owner(other_user)


@pytest.mark.django_db
def test_deleted_property_tenant_kept(prop, tenant):
    prop.soft_delete()
    assert Tenant.active.filter(pk=tenant.pk).exists()


@pytest.mark.django_db
def test_soft_delete_rolls_back_when_unlink_fails(prop, tenant, monkeypatch):
    def broken_update(self, **kwargs):
        raise RuntimeError('update failed')

    monkeypatch.setattr('django.db.models.query.QuerySet.update', broken_update)
    with pytest.raises(RuntimeError):
        prop.soft_delete()

    prop.refresh_from_db()
    tenant.refresh_from_db()
    assert prop.is_active is True
    assert tenant.property_id == prop.pk
