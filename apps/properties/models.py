# =============================================================================
# properties/models.py - rental properties
# =============================================================================

"""
Rental properties

Every other record (tenants, leases, transactions, maintenance requests)
hangs off a property owned by the same user.
"""
import logging
from decimal import Decimal

from django.core.validators import MinValueValidator
from django.db import models, transaction as db_transaction
from django.db.models import Q, Sum

from apps.core.models import OwnedModel

logger = logging.getLogger(__name__)


class Property(OwnedModel):
    """A rental property"""

    TYPE_CHOICES = [
        ('Apartment', 'Apartment'),
        ('Condo', 'Condo'),
        ('Single Family', 'Single Family'),
        ('Multi-Family', 'Multi-Family'),
        ('Commercial', 'Commercial'),
        ('Other', 'Other'),
    ]

    STATUS_CHOICES = [
        ('Vacant', 'Vacant'),
        ('Rented', 'Rented'),
        ('Maintenance', 'Maintenance'),
        ('Listed', 'Listed'),
    ]

    name = models.CharField(max_length=100, db_index=True)

    street = models.CharField(max_length=200)
    city = models.CharField(max_length=100)
    state = models.CharField(max_length=50)
    zip_code = models.CharField(max_length=20)
    country = models.CharField(max_length=50, default='USA')

    property_type = models.CharField(max_length=20, choices=TYPE_CHOICES, default='Single Family')
    status = models.CharField(max_length=20, choices=STATUS_CHOICES, default='Vacant', db_index=True)

    bedrooms = models.PositiveSmallIntegerField(default=0)
    bathrooms = models.DecimalField(max_digits=4, decimal_places=1, default=Decimal('0'),
                                    validators=[MinValueValidator(Decimal('0'))])
    square_feet = models.PositiveIntegerField(default=0)
    year_built = models.PositiveSmallIntegerField(null=True, blank=True)

    purchase_price = models.DecimalField(max_digits=15, decimal_places=2, default=Decimal('0.00'),
                                         validators=[MinValueValidator(Decimal('0.00'))])
    purchase_date = models.DateField(null=True, blank=True)
    current_value = models.DecimalField(max_digits=15, decimal_places=2, default=Decimal('0.00'),
                                        validators=[MinValueValidator(Decimal('0.00'))])
    rental_rate = models.DecimalField(max_digits=12, decimal_places=2, default=Decimal('0.00'),
                                      validators=[MinValueValidator(Decimal('0.00'))])
    security_deposit = models.DecimalField(max_digits=12, decimal_places=2, default=Decimal('0.00'),
                                           validators=[MinValueValidator(Decimal('0.00'))])

    notes = models.TextField(blank=True)

    class Meta:
        db_table = 'properties'
        ordering = ['name']
        verbose_name_plural = 'properties'
        indexes = [
            models.Index(fields=['user', 'is_active', 'name'], name='properties_user_act_name_idx'),
            models.Index(fields=['user', 'status'], name='properties_user_status_idx'),
        ]
        constraints = [
            models.UniqueConstraint(
                fields=['user', 'name'],
                condition=Q(is_active=True),
                name='unique_active_property_name_per_user'
            )
        ]

    def __str__(self):
        return self.name

    @property
    def address_display(self):
        return f"{self.street}, {self.city}, {self.state} {self.zip_code}"

    def get_total_income(self, start_date=None, end_date=None):
        return self._sum_transactions('income', start_date, end_date)

    def get_total_expense(self, start_date=None, end_date=None):
        return self._sum_transactions('expense', start_date, end_date)

    def _sum_transactions(self, tx_type, start_date, end_date):
        qs = self.transactions.filter(tx_type=tx_type, is_active=True)
        if start_date:
            qs = qs.filter(date__gte=start_date)
        if end_date:
            qs = qs.filter(date__lte=end_date)
        total = qs.aggregate(total=Sum('amount'))['total']
        return total or Decimal('0.00')

    @db_transaction.atomic
    def soft_delete(self):
        """Delete the property together with its active tenants' link"""
        super().soft_delete()
        unlinked = self.tenants.filter(is_active=True).update(property=None)
        logger.info(f"Property '{self.name}' (ID: {self.pk}) deleted, {unlinked} tenant(s) unlinked")

    def to_summary_dict(self):
        """Reduced shape embedded in related records"""
        return {
            'id': self.pk,
            'name': self.name,
            'address': self.address_display,
        }

    def to_dict(self):
        return {
            'id': self.pk,
            'name': self.name,
            'address': {
                'street': self.street,
                'city': self.city,
                'state': self.state,
                'zip_code': self.zip_code,
                'country': self.country,
            },
            'property_type': self.property_type,
            'status': self.status,
            'features': {
                'bedrooms': self.bedrooms,
                'bathrooms': self.bathrooms,
                'square_feet': self.square_feet,
                'year_built': self.year_built,
            },
            'financials': {
                'purchase_price': self.purchase_price,
                'purchase_date': self.purchase_date,
                'current_value': self.current_value,
                'rental_rate': self.rental_rate,
                'security_deposit': self.security_deposit,
            },
            'notes': self.notes,
            'created_at': self.created_at,
            'updated_at': self.updated_at,
        }
