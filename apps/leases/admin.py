from django.contrib import admin

from apps.core.admin import SoftDeleteAdminMixin
from .models import Lease


@admin.register(Lease)
class LeaseAdmin(SoftDeleteAdminMixin, admin.ModelAdmin):
    list_display = ['property', 'tenant', 'start_date', 'end_date', 'rent_amount', 'status', 'is_active']
    list_filter = ['is_active', 'status', 'payment_frequency']
    search_fields = ['property__name', 'tenant__last_name', 'tenant__email']
    date_hierarchy = 'start_date'
