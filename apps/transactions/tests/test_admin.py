from decimal import Decimal

import pytest
from django.contrib.admin.sites import site
from django.urls import reverse

from apps.transactions.admin import TransactionAdmin
from apps.transactions.models import Transaction


@pytest.mark.django_db
class TestTransactionAdmin:
    def test_changelist_renders(self, admin_client, rent, repair):
        response = admin_client.get(reverse('admin:transactions_transaction_changelist'))
        assert response.status_code == 200

    def test_deleted_rows_listed(self, rf, admin_user, rent):
        rent.soft_delete()
        model_admin = TransactionAdmin(Transaction, site)
        request = rf.get('/')
        request.user = admin_user
        assert rent in model_admin.get_queryset(request)

    def test_colored_columns(self, rent):
        model_admin = TransactionAdmin(Transaction, site)
        assert 'green' in model_admin.get_tx_type_display_colored(rent)
        assert '$1,500.00' in model_admin.get_amount_display(rent)

    def test_expense_is_red(self, repair):
        model_admin = TransactionAdmin(Transaction, site)
        assert 'red' in model_admin.get_amount_display(repair)
        assert repair.amount == Decimal('500.00')


@pytest.mark.django_db
def test_mortgage_changelist(admin_client, mortgage):
    response = admin_client.get(reverse('admin:transactions_mortgage_changelist'))
    assert response.status_code == 200
