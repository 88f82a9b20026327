from decimal import Decimal

from django.core.exceptions import ValidationError
from django.core.validators import MaxValueValidator, MinValueValidator
from django.db import models

from apps.core.models import OwnedModel


class Lease(OwnedModel):
    """Rental agreement between a property and a tenant"""

    STATUS_CHOICES = [
        ('Active', 'Active'),
        ('Expired', 'Expired'),
        ('Terminated', 'Terminated'),
        ('Pending', 'Pending'),
    ]

    FREQUENCY_CHOICES = [
        ('Monthly', 'Monthly'),
        ('Bi-weekly', 'Bi-weekly'),
        ('Weekly', 'Weekly'),
    ]

    property = models.ForeignKey('properties.Property', on_delete=models.CASCADE, related_name='leases')
    tenant = models.ForeignKey('tenants.Tenant', on_delete=models.CASCADE, related_name='leases')

    start_date = models.DateField()
    end_date = models.DateField()
    rent_amount = models.DecimalField(max_digits=12, decimal_places=2,
                                      validators=[MinValueValidator(Decimal('0.00'))])
    security_deposit = models.DecimalField(max_digits=12, decimal_places=2,
                                           validators=[MinValueValidator(Decimal('0.00'))])
    status = models.CharField(max_length=20, choices=STATUS_CHOICES, default='Pending', db_index=True)

    payment_due_day = models.PositiveSmallIntegerField(default=1,
                                                       validators=[MinValueValidator(1), MaxValueValidator(31)])
    payment_frequency = models.CharField(max_length=20, choices=FREQUENCY_CHOICES, default='Monthly')
    late_fee_amount = models.DecimalField(max_digits=10, decimal_places=2, default=Decimal('0.00'),
                                          validators=[MinValueValidator(Decimal('0.00'))])
    grace_period_days = models.PositiveSmallIntegerField(default=0)

    terms = models.TextField()
    renewal_option = models.BooleanField(default=False)
    renewal_terms = models.TextField(blank=True)
    notes = models.TextField(blank=True)

    class Meta:
        db_table = 'leases'
        ordering = ['-start_date']
        indexes = [
            models.Index(fields=['user', 'is_active', 'status'], name='leases_user_act_status_idx'),
            models.Index(fields=['property', '-start_date'], name='leases_property_start_idx'),
        ]
        constraints = [
            models.CheckConstraint(condition=models.Q(end_date__gt=models.F('start_date')),
                                   name='lease_end_after_start'),
        ]

    def __str__(self):
        return f"{self.property} / {self.tenant} ({self.start_date} ~ {self.end_date})"

    def clean(self):
        errors = {}
        if self.start_date and self.end_date and self.end_date <= self.start_date:
            errors['end_date'] = 'End date must be after the start date'
        if self.tenant_id and self.property_id and self.tenant.user_id != self.property.user_id:
            errors['tenant'] = 'Tenant and property belong to different owners'
        if errors:
            raise ValidationError(errors)

    def is_current(self, today):
        return self.status == 'Active' and self.start_date <= today <= self.end_date

    def to_dict(self):
        return {
            'id': self.pk,
            'property': self.property.to_summary_dict(),
            'tenant': self.tenant.to_summary_dict(),
            'start_date': self.start_date,
            'end_date': self.end_date,
            'rent_amount': self.rent_amount,
            'security_deposit': self.security_deposit,
            'status': self.status,
            'payment_due': {
                'day': self.payment_due_day,
                'frequency': self.payment_frequency,
            },
            'late_fee': {
                'amount': self.late_fee_amount,
                'grace_period': self.grace_period_days,
            },
            'terms': self.terms,
            'renewal_option': self.renewal_option,
            'renewal_terms': self.renewal_terms,
            'notes': self.notes,
            'created_at': self.created_at,
            'updated_at': self.updated_at,
        }
