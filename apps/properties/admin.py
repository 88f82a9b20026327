from django.contrib import admin

from apps.core.admin import SoftDeleteAdminMixin
from .models import Property


@admin.register(Property)
class PropertyAdmin(SoftDeleteAdminMixin, admin.ModelAdmin):
    list_display = ['name', 'city', 'property_type', 'status', 'rental_rate', 'user', 'is_active']
    list_filter = ['is_active', 'status', 'property_type']
    search_fields = ['name', 'street', 'city', 'user__username']
