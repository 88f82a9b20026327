from django import forms

from apps.core.forms import owned_choices
from apps.properties.models import Property
from .models import Tenant


class TenantForm(forms.ModelForm):
    """Tenant create/update form"""

    class Meta:
        model = Tenant
        fields = [
            'first_name', 'last_name', 'email', 'phone', 'date_of_birth', 'status', 'property',
            'emergency_contact_name', 'emergency_contact_relationship', 'emergency_contact_phone',
            'notes',
        ]

    def __init__(self, *args, **kwargs):
        self.user = kwargs.pop('user', None)
        super().__init__(*args, **kwargs)

        # Only the user's own properties can be picked
        if self.user:
            self.fields['property'].queryset = owned_choices(Property, self.user, self.instance.property_id)
        self.fields['status'].required = False

    def clean_status(self):
        return self.cleaned_data.get('status') or 'Prospective'
