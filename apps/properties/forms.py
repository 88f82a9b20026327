from django import forms

from .models import Property


class PropertyForm(forms.ModelForm):
    """Property create/update form"""

    class Meta:
        model = Property
        fields = [
            'name', 'street', 'city', 'state', 'zip_code', 'country',
            'property_type', 'status',
            'bedrooms', 'bathrooms', 'square_feet', 'year_built',
            'purchase_price', 'purchase_date', 'current_value', 'rental_rate', 'security_deposit',
            'notes',
        ]

    def __init__(self, *args, **kwargs):
        self.user = kwargs.pop('user', None)
        super().__init__(*args, **kwargs)
        self.fields['country'].required = False
        for name in ('property_type', 'status', 'bedrooms', 'bathrooms', 'square_feet',
                     'purchase_price', 'current_value', 'rental_rate', 'security_deposit'):
            self.fields[name].required = False

    def clean_name(self):
        name = self.cleaned_data['name'].strip()
        if self.user:
            duplicates = Property.active.filter(user=self.user, name=name)
            if self.instance.pk:
                duplicates = duplicates.exclude(pk=self.instance.pk)
            if duplicates.exists():
                raise forms.ValidationError('A property with this name already exists.')
        return name

    def clean(self):
        cleaned_data = super().clean()
        # Optional fields left blank fall back to the model defaults
        for name in ('property_type', 'status', 'country', 'bedrooms', 'bathrooms', 'square_feet',
                     'purchase_price', 'current_value', 'rental_rate', 'security_deposit'):
            if cleaned_data.get(name) in (None, ''):
                cleaned_data[name] = Property._meta.get_field(name).get_default()
        return cleaned_data
