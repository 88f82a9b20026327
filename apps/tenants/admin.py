from django.contrib import admin

from apps.core.admin import SoftDeleteAdminMixin
from .models import Tenant


@admin.register(Tenant)
class TenantAdmin(SoftDeleteAdminMixin, admin.ModelAdmin):
    list_display = ['last_name', 'first_name', 'email', 'phone', 'status', 'property', 'is_active']
    list_filter = ['is_active', 'status']
    search_fields = ['first_name', 'last_name', 'email', 'phone']
