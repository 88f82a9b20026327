from django import forms

from apps.core.forms import owned_choices
from apps.properties.models import Property
from apps.tenants.models import Tenant
from .models import MaintenanceRequest


class MaintenanceRequestForm(forms.ModelForm):
    """Maintenance request create/update form"""

    class Meta:
        model = MaintenanceRequest
        fields = [
            'property', 'tenant', 'title', 'description', 'date_submitted',
            'priority', 'status', 'category',
            'estimated_cost', 'actual_cost', 'start_date', 'completion_date', 'notes',
        ]

    def __init__(self, *args, **kwargs):
        self.user = kwargs.pop('user', None)
        super().__init__(*args, **kwargs)

        if self.user:
            self.fields['property'].queryset = owned_choices(Property, self.user, self.instance.property_id)
            self.fields['tenant'].queryset = owned_choices(Tenant, self.user, self.instance.tenant_id)

        for name in ('date_submitted', 'priority', 'status', 'category', 'estimated_cost', 'actual_cost'):
            self.fields[name].required = False

    def clean(self):
        cleaned_data = super().clean()
        for name in ('date_submitted', 'priority', 'status', 'category', 'estimated_cost', 'actual_cost'):
            if cleaned_data.get(name) in (None, ''):
                cleaned_data[name] = MaintenanceRequest._meta.get_field(name).get_default()
        return cleaned_data
