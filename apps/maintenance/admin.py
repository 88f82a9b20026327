from django.contrib import admin

from apps.core.admin import SoftDeleteAdminMixin
from .models import MaintenanceRequest


@admin.register(MaintenanceRequest)
class MaintenanceRequestAdmin(SoftDeleteAdminMixin, admin.ModelAdmin):
    list_display = ['title', 'property', 'priority', 'status', 'category', 'date_submitted', 'is_active']
    list_filter = ['is_active', 'status', 'priority', 'category']
    search_fields = ['title', 'description', 'property__name']
