from decimal import Decimal

from django import forms
from django.conf import settings
from django.utils import timezone

from apps.core.forms import owned_choices
from apps.properties.models import Property
from apps.tenants.models import Tenant
from .models import Mortgage, Transaction
from .summary import DATE_RANGE_CHOICES, DATE_RANGE_ALIASES


class TransactionForm(forms.ModelForm):
    """Transaction create/update form"""

    class Meta:
        model = Transaction
        fields = [
            'property', 'tenant', 'date', 'amount', 'tx_type', 'category',
            'description', 'payment_method', 'notes',
        ]

    def __init__(self, *args, **kwargs):
        self.user = kwargs.pop('user', None)
        super().__init__(*args, **kwargs)

        # Per-user scoping: a foreign property/tenant is rejected as an invalid choice
        if self.user:
            self.fields['property'].queryset = owned_choices(Property, self.user, self.instance.property_id)
            self.fields['tenant'].queryset = owned_choices(Tenant, self.user, self.instance.tenant_id)

        self.fields['date'].required = False
        self.fields['payment_method'].required = False

    def clean(self):
        cleaned_data = super().clean()
        if not cleaned_data.get('date'):
            cleaned_data['date'] = timezone.localdate()
        if not cleaned_data.get('payment_method'):
            cleaned_data['payment_method'] = 'Other'
        return cleaned_data


class MortgageForm(forms.ModelForm):
    """Mortgage create/update form"""

    class Meta:
        model = Mortgage
        fields = [
            'property', 'lender', 'loan_number', 'original_amount', 'current_balance', 'interest_rate',
            'term', 'start_date', 'maturity_date', 'monthly_payment', 'payment_day',
            'escrow', 'escrow_amount', 'notes',
        ]

    def __init__(self, *args, **kwargs):
        self.user = kwargs.pop('user', None)
        super().__init__(*args, **kwargs)

        if self.user:
            self.fields['property'].queryset = owned_choices(Property, self.user, self.instance.property_id)
        self.fields['escrow_amount'].required = False

    def clean_escrow_amount(self):
        return self.cleaned_data.get('escrow_amount') or Decimal('0.00')


class SummaryFilterForm(forms.Form):
    """Query string of the summary/export endpoints"""
    TYPE_CHOICES = [('', 'All'), ('all', 'All')] + Transaction.TX_TYPE_CHOICES

    search = forms.CharField(max_length=100, required=False)
    type = forms.ChoiceField(choices=TYPE_CHOICES, required=False)
    property = forms.CharField(max_length=20, required=False)
    date_range = forms.ChoiceField(
        choices=[('', 'All time')] + DATE_RANGE_CHOICES + [(key, key) for key in DATE_RANGE_ALIASES],
        required=False,
    )
    months = forms.IntegerField(min_value=1, required=False)

    def clean_months(self):
        months = self.cleaned_data.get('months')
        if months and months > settings.RENTBOOK_MAX_SUMMARY_MONTHS:
            raise forms.ValidationError(
                f'At most {settings.RENTBOOK_MAX_SUMMARY_MONTHS} months can be summarized.'
            )
        return months

    def clean_property(self):
        value = (self.cleaned_data.get('property') or '').strip()
        if value in ('', 'all'):
            return ''
        if not value.isdigit():
            raise forms.ValidationError('Property must be an id or "all".')
        return value


class TransactionListFilterForm(forms.Form):
    """Query string of the transaction list"""
    type = forms.ChoiceField(choices=[('', 'All')] + Transaction.TX_TYPE_CHOICES, required=False)
    start_date = forms.DateField(required=False)
    end_date = forms.DateField(required=False)
    year = forms.IntegerField(min_value=1900, max_value=9999, required=False)
    month = forms.IntegerField(min_value=1, max_value=12, required=False)

    def clean(self):
        cleaned_data = super().clean()
        start, end = cleaned_data.get('start_date'), cleaned_data.get('end_date')
        if bool(start) != bool(end):
            raise forms.ValidationError('start_date and end_date must be given together.')
        if start and end and end < start:
            raise forms.ValidationError('end_date cannot be before start_date.')
        if (cleaned_data.get('year') is None) != (cleaned_data.get('month') is None):
            raise forms.ValidationError('year and month must be given together.')
        return cleaned_data

    def apply(self, transactions):
        data = self.cleaned_data
        if data.get('type') == 'income':
            transactions = transactions.income()
        elif data.get('type') == 'expense':
            transactions = transactions.expense()
        if data.get('start_date'):
            transactions = transactions.by_date_range(data['start_date'], data['end_date'])
        if data.get('year') is not None:
            transactions = transactions.by_month(data['year'], data['month'])
        return transactions
