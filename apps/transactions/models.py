from decimal import Decimal
import logging

from django.core.exceptions import ValidationError
from django.core.validators import MaxValueValidator, MinValueValidator
from django.db import models
from django.utils import timezone

from apps.core.models import OwnedModel
from .summary import TransactionRecord

logger = logging.getLogger(__name__)


class TransactionQuerySet(models.QuerySet):
    """Transaction QuerySet helpers"""
    def income(self): return self.filter(tx_type='income')
    def expense(self): return self.filter(tx_type='expense')
    def by_month(self, year, month): return self.filter(date__year=year, date__month=month)
    def by_date_range(self, start_date, end_date): return self.filter(date__gte=start_date, date__lte=end_date)
    def with_relations(self): return self.select_related('property', 'tenant')


class TransactionManager(models.Manager.from_queryset(TransactionQuerySet)):
    """Transaction manager (active rows + QuerySet helpers)"""
    def get_queryset(self): return super().get_queryset().filter(is_active=True)


class Transaction(OwnedModel):
    """Income or expense entry (core model)"""
    TX_TYPE_CHOICES = [('income', 'Income'), ('expense', 'Expense')]

    INCOME_CATEGORIES = ['Rent', 'Security Deposit', 'Late Fee', 'Other Income']
    EXPENSE_CATEGORIES = [
        'Mortgage', 'Insurance', 'Property Tax', 'Utilities',
        'Maintenance', 'HOA Fees', 'Management Fees', 'Other Expense',
    ]
    CATEGORY_CHOICES = [(name, name) for name in INCOME_CATEGORIES + EXPENSE_CATEGORIES]

    PAYMENT_METHOD_CHOICES = [
        ('Cash', 'Cash'),
        ('Check', 'Check'),
        ('Credit Card', 'Credit Card'),
        ('Bank Transfer', 'Bank Transfer'),
        ('Other', 'Other'),
    ]

    property = models.ForeignKey('properties.Property', on_delete=models.SET_NULL, null=True, blank=True,
                                 related_name='transactions', db_index=True)
    tenant = models.ForeignKey('tenants.Tenant', on_delete=models.SET_NULL, null=True, blank=True,
                               related_name='transactions')

    date = models.DateField(default=timezone.localdate, db_index=True)
    amount = models.DecimalField(max_digits=15, decimal_places=2, validators=[MinValueValidator(Decimal('0.00'))])
    tx_type = models.CharField(max_length=10, choices=TX_TYPE_CHOICES, db_index=True)
    category = models.CharField(max_length=30, choices=CATEGORY_CHOICES, blank=True, db_index=True)
    description = models.CharField(max_length=255, blank=True)
    payment_method = models.CharField(max_length=20, choices=PAYMENT_METHOD_CHOICES, default='Other')
    notes = models.TextField(blank=True)

    objects = models.Manager()
    active = TransactionManager()

    class Meta:
        db_table = 'transactions'
        ordering = ['-date', '-created_at']
        indexes = [
            models.Index(fields=['user', '-date'], name='tx_user_date_idx'),
            models.Index(fields=['user', 'tx_type', '-date'], name='tx_user_type_date_idx'),
            models.Index(fields=['property', '-date'], name='tx_property_date_idx'),
        ]
        constraints = [
            models.CheckConstraint(condition=models.Q(amount__gte=0), name='transaction_amount_non_negative'),
        ]

    def __str__(self):
        return f"{self.get_tx_type_display()} {self.amount:,.2f} ({self.date})"

    def get_property_display(self):
        return self.property.name if self.property else 'Unassigned'

    def clean(self):
        errors = {}
        if self.category:
            if self.tx_type == 'income' and self.category in self.EXPENSE_CATEGORIES:
                errors['category'] = 'Income transactions need an income category'
            elif self.tx_type == 'expense' and self.category in self.INCOME_CATEGORIES:
                errors['category'] = 'Expense transactions need an expense category'
        if self.tenant_id and self.property_id and self.tenant.property_id not in (None, self.property_id):
            errors['tenant'] = 'Tenant is not linked to this property'
        if errors:
            raise ValidationError(errors)

    def to_record(self):
        """Aggregator view of this row"""
        return TransactionRecord(
            amount=self.amount,
            tx_type=self.tx_type,
            date=self.date,
            category=self.category or None,
            property_id=str(self.property_id) if self.property_id else None,
            property_name=self.property.name if self.property_id else None,
            tenant_id=str(self.tenant_id) if self.tenant_id else None,
            description=self.description,
        )

    def to_dict(self):
        return {
            'id': self.pk,
            'property': self.property.to_summary_dict() if self.property_id else None,
            'tenant': self.tenant.to_summary_dict() if self.tenant_id else None,
            'date': self.date,
            'amount': self.amount,
            'type': self.tx_type,
            'category': self.category,
            'description': self.description,
            'payment_method': self.payment_method,
            'notes': self.notes,
            'created_at': self.created_at,
            'updated_at': self.updated_at,
        }


class Mortgage(OwnedModel):
    """Loan secured by a property"""

    property = models.ForeignKey('properties.Property', on_delete=models.CASCADE, related_name='mortgages')
    lender = models.CharField(max_length=100)
    loan_number = models.CharField(max_length=50, blank=True)
    original_amount = models.DecimalField(max_digits=15, decimal_places=2,
                                          validators=[MinValueValidator(Decimal('0.00'))])
    current_balance = models.DecimalField(max_digits=15, decimal_places=2,
                                          validators=[MinValueValidator(Decimal('0.00'))])
    interest_rate = models.DecimalField(max_digits=6, decimal_places=3,
                                        validators=[MinValueValidator(Decimal('0'))])
    term = models.PositiveIntegerField(validators=[MinValueValidator(1)], help_text='Months')
    start_date = models.DateField()
    maturity_date = models.DateField()
    monthly_payment = models.DecimalField(max_digits=12, decimal_places=2,
                                          validators=[MinValueValidator(Decimal('0.00'))])
    payment_day = models.PositiveSmallIntegerField(validators=[MinValueValidator(1), MaxValueValidator(31)])
    escrow = models.BooleanField(default=False)
    escrow_amount = models.DecimalField(max_digits=12, decimal_places=2, default=Decimal('0.00'),
                                        validators=[MinValueValidator(Decimal('0.00'))])
    notes = models.TextField(blank=True)

    class Meta:
        db_table = 'mortgages'
        ordering = ['-start_date']
        indexes = [models.Index(fields=['user', 'is_active'], name='mortgages_user_active_idx')]

    def __str__(self):
        return f"{self.lender} - {self.property}"

    def clean(self):
        if self.start_date and self.maturity_date and self.maturity_date <= self.start_date:
            raise ValidationError({'maturity_date': 'Maturity date must be after the start date'})

    def to_dict(self):
        return {
            'id': self.pk,
            'property': self.property.to_summary_dict(),
            'lender': self.lender,
            'loan_number': self.loan_number,
            'original_amount': self.original_amount,
            'current_balance': self.current_balance,
            'interest_rate': self.interest_rate,
            'term': self.term,
            'start_date': self.start_date,
            'maturity_date': self.maturity_date,
            'monthly_payment': self.monthly_payment,
            'payment_day': self.payment_day,
            'escrow': self.escrow,
            'escrow_amount': self.escrow_amount,
            'notes': self.notes,
            'created_at': self.created_at,
            'updated_at': self.updated_at,
        }
