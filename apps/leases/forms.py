from django import forms

from apps.core.forms import owned_choices
from apps.properties.models import Property
from apps.tenants.models import Tenant
from .models import Lease


class LeaseForm(forms.ModelForm):
    """Lease create/update form"""

    class Meta:
        model = Lease
        fields = [
            'property', 'tenant', 'start_date', 'end_date', 'rent_amount', 'security_deposit', 'status',
            'payment_due_day', 'payment_frequency', 'late_fee_amount', 'grace_period_days',
            'terms', 'renewal_option', 'renewal_terms', 'notes',
        ]

    def __init__(self, *args, **kwargs):
        self.user = kwargs.pop('user', None)
        super().__init__(*args, **kwargs)

        if self.user:
            self.fields['property'].queryset = owned_choices(Property, self.user, self.instance.property_id)
            self.fields['tenant'].queryset = owned_choices(Tenant, self.user, self.instance.tenant_id)

        for name in ('status', 'payment_due_day', 'payment_frequency', 'late_fee_amount', 'grace_period_days'):
            self.fields[name].required = False

    def clean(self):
        cleaned_data = super().clean()
        for name in ('status', 'payment_due_day', 'payment_frequency', 'late_fee_amount', 'grace_period_days'):
            if cleaned_data.get(name) in (None, ''):
                cleaned_data[name] = Lease._meta.get_field(name).get_default()
        return cleaned_data
