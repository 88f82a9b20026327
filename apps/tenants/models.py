from django.db import models

from apps.core.models import OwnedModel


class Tenant(OwnedModel):
    """Tenant, optionally living in one of the owner's properties"""

    STATUS_CHOICES = [
        ('Active', 'Active'),
        ('Previous', 'Previous'),
        ('Prospective', 'Prospective'),
    ]

    first_name = models.CharField(max_length=50)
    last_name = models.CharField(max_length=50)
    email = models.EmailField()
    phone = models.CharField(max_length=30)
    date_of_birth = models.DateField(null=True, blank=True)
    status = models.CharField(max_length=20, choices=STATUS_CHOICES, default='Prospective', db_index=True)

    property = models.ForeignKey('properties.Property', on_delete=models.SET_NULL, null=True, blank=True,
                                 related_name='tenants')

    emergency_contact_name = models.CharField(max_length=100, blank=True)
    emergency_contact_relationship = models.CharField(max_length=50, blank=True)
    emergency_contact_phone = models.CharField(max_length=30, blank=True)

    notes = models.TextField(blank=True)

    class Meta:
        db_table = 'tenants'
        ordering = ['last_name', 'first_name']
        indexes = [
            models.Index(fields=['user', 'is_active', 'last_name'], name='tenants_user_act_name_idx'),
            models.Index(fields=['user', 'status'], name='tenants_user_status_idx'),
        ]

    def __str__(self):
        return self.get_full_name()

    def get_full_name(self):
        return f"{self.first_name} {self.last_name}".strip()

    def save(self, *args, **kwargs):
        self.email = (self.email or '').strip().lower()
        super().save(*args, **kwargs)

    def to_summary_dict(self):
        return {
            'id': self.pk,
            'first_name': self.first_name,
            'last_name': self.last_name,
            'email': self.email,
        }

    def to_dict(self):
        return {
            'id': self.pk,
            'first_name': self.first_name,
            'last_name': self.last_name,
            'email': self.email,
            'phone': self.phone,
            'date_of_birth': self.date_of_birth,
            'status': self.status,
            'property': self.property.to_summary_dict() if self.property_id else None,
            'emergency_contact': {
                'name': self.emergency_contact_name,
                'relationship': self.emergency_contact_relationship,
                'phone': self.emergency_contact_phone,
            },
            'notes': self.notes,
            'created_at': self.created_at,
            'updated_at': self.updated_at,
        }
