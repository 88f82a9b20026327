from django.contrib import admin
from django.utils.html import format_html

from apps.core.admin import SoftDeleteAdminMixin
from .models import Mortgage, Transaction


@admin.register(Transaction)
class TransactionAdmin(SoftDeleteAdminMixin, admin.ModelAdmin):
    """
    Transactions
    """
    list_display = [
        'date',
        'get_tx_type_display_colored',
        'get_amount_display',
        'category',
        'property',
        'tenant',
        'is_active'
    ]

    date_hierarchy = 'date'

    list_filter = [
        'is_active',
        'tx_type',
        'category',
        'payment_method',
        'property__name'
    ]

    search_fields = ['description', 'notes', 'property__name']

    @admin.display(description='Type', ordering='tx_type')
    def get_tx_type_display_colored(self, obj):
        if obj.tx_type == 'income':
            return format_html('<span style="color:green; font-weight:bold;">{}</span>', 'Income')
        return format_html('<span style="color:red; font-weight:bold;">{}</span>', 'Expense')

    @admin.display(description='Amount', ordering='amount')
    def get_amount_display(self, obj):
        formatted = f"${obj.amount:,.2f}"
        if obj.tx_type == 'income':
            return format_html('<span style="color:green;">{}</span>', formatted)
        return format_html('<span style="color:red;">{}</span>', formatted)


@admin.register(Mortgage)
class MortgageAdmin(SoftDeleteAdminMixin, admin.ModelAdmin):
    list_display = ['lender', 'property', 'current_balance', 'interest_rate', 'monthly_payment', 'maturity_date', 'is_active']
    list_filter = ['is_active', 'escrow']
    search_fields = ['lender', 'loan_number', 'property__name']
