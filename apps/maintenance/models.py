from decimal import Decimal

from django.core.exceptions import ValidationError
from django.core.validators import MinValueValidator
from django.db import models
from django.utils import timezone

from apps.core.models import OwnedModel


class MaintenanceRequest(OwnedModel):
    """Repair/maintenance work raised against a property"""

    PRIORITY_CHOICES = [
        ('Low', 'Low'),
        ('Medium', 'Medium'),
        ('High', 'High'),
        ('Emergency', 'Emergency'),
    ]

    STATUS_CHOICES = [
        ('Open', 'Open'),
        ('In Progress', 'In Progress'),
        ('Completed', 'Completed'),
        ('Cancelled', 'Cancelled'),
    ]

    CATEGORY_CHOICES = [
        ('Plumbing', 'Plumbing'),
        ('Electrical', 'Electrical'),
        ('HVAC', 'HVAC'),
        ('Appliance', 'Appliance'),
        ('Structural', 'Structural'),
        ('Pest Control', 'Pest Control'),
        ('Landscaping', 'Landscaping'),
        ('Other', 'Other'),
    ]

    property = models.ForeignKey('properties.Property', on_delete=models.CASCADE,
                                 related_name='maintenance_requests')
    tenant = models.ForeignKey('tenants.Tenant', on_delete=models.SET_NULL, null=True, blank=True,
                               related_name='maintenance_requests')

    title = models.CharField(max_length=200)
    description = models.TextField()
    date_submitted = models.DateField(default=timezone.localdate)
    priority = models.CharField(max_length=20, choices=PRIORITY_CHOICES, default='Medium', db_index=True)
    status = models.CharField(max_length=20, choices=STATUS_CHOICES, default='Open', db_index=True)
    category = models.CharField(max_length=20, choices=CATEGORY_CHOICES, default='Other')

    estimated_cost = models.DecimalField(max_digits=12, decimal_places=2, default=Decimal('0.00'),
                                         validators=[MinValueValidator(Decimal('0.00'))])
    actual_cost = models.DecimalField(max_digits=12, decimal_places=2, default=Decimal('0.00'),
                                      validators=[MinValueValidator(Decimal('0.00'))])
    start_date = models.DateField(null=True, blank=True)
    completion_date = models.DateField(null=True, blank=True)

    notes = models.TextField(blank=True)

    class Meta:
        db_table = 'maintenance_requests'
        ordering = ['-date_submitted', '-created_at']
        indexes = [
            models.Index(fields=['user', 'is_active', 'status'], name='maint_user_act_status_idx'),
            models.Index(fields=['property', '-date_submitted'], name='maint_property_submitted_idx'),
        ]

    def __str__(self):
        return f"[{self.status}] {self.title}"

    def clean(self):
        if self.start_date and self.completion_date and self.completion_date < self.start_date:
            raise ValidationError({'completion_date': 'Completion date cannot be before the start date'})

    def save(self, *args, **kwargs):
        if self.status == 'Completed' and not self.completion_date:
            self.completion_date = timezone.localdate()
        super().save(*args, **kwargs)

    def to_dict(self):
        return {
            'id': self.pk,
            'property': self.property.to_summary_dict(),
            'tenant': self.tenant.to_summary_dict() if self.tenant_id else None,
            'title': self.title,
            'description': self.description,
            'date_submitted': self.date_submitted,
            'priority': self.priority,
            'status': self.status,
            'category': self.category,
            'estimated_cost': self.estimated_cost,
            'actual_cost': self.actual_cost,
            'start_date': self.start_date,
            'completion_date': self.completion_date,
            'notes': self.notes,
            'created_at': self.created_at,
            'updated_at': self.updated_at,
        }
