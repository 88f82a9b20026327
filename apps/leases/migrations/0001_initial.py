from decimal import Decimal

import django.core.validators
import django.db.models.deletion
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ('properties', '0001_initial'),
        ('tenants', '0001_initial'),
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name='Lease',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('is_active', models.BooleanField(db_index=True, default=True)),
                ('start_date', models.DateField()),
                ('end_date', models.DateField()),
                ('rent_amount', models.DecimalField(decimal_places=2, max_digits=12, validators=[django.core.validators.MinValueValidator(Decimal('0.00'))])),
                ('security_deposit', models.DecimalField(decimal_places=2, max_digits=12, validators=[django.core.validators.MinValueValidator(Decimal('0.00'))])),
                ('status', models.CharField(choices=[('Active', 'Active'), ('Expired', 'Expired'), ('Terminated', 'Terminated'), ('Pending', 'Pending')], db_index=True, default='Pending', max_length=20)),
                ('payment_due_day', models.PositiveSmallIntegerField(default=1, validators=[django.core.validators.MinValueValidator(1), django.core.validators.MaxValueValidator(31)])),
                ('payment_frequency', models.CharField(choices=[('Monthly', 'Monthly'), ('Bi-weekly', 'Bi-weekly'), ('Weekly', 'Weekly')], default='Monthly', max_length=20)),
                ('late_fee_amount', models.DecimalField(decimal_places=2, default=Decimal('0.00'), max_digits=10, validators=[django.core.validators.MinValueValidator(Decimal('0.00'))])),
                ('grace_period_days', models.PositiveSmallIntegerField(default=0)),
                ('terms', models.TextField()),
                ('renewal_option', models.BooleanField(default=False)),
                ('renewal_terms', models.TextField(blank=True)),
                ('notes', models.TextField(blank=True)),
                ('property', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='leases', to='properties.property')),
                ('tenant', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='leases', to='tenants.tenant')),
                ('user', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='%(class)s_set', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'db_table': 'leases',
                'ordering': ['-start_date'],
                'indexes': [
                    models.Index(fields=['user', 'is_active', 'status'], name='leases_user_act_status_idx'),
                    models.Index(fields=['property', '-start_date'], name='leases_property_start_idx'),
                ],
                'constraints': [
                    models.CheckConstraint(condition=models.Q(('end_date__gt', models.F('start_date'))), name='lease_end_after_start'),
                ],
            },
        ),
    ]
