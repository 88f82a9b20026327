from django.contrib import admin
from django.urls import path, include

urlpatterns = [
    path('admin/', admin.site.urls),
    path('api/auth/', include('apps.accounts.urls')),
    path('api/properties/', include('apps.properties.urls')),
    path('api/tenants/', include('apps.tenants.urls')),
    path('api/leases/', include('apps.leases.urls')),
    path('api/financial/', include('apps.transactions.urls')),
    path('api/maintenance/', include('apps.maintenance.urls')),
    path('api/dashboard/', include('apps.dashboard.urls')),
]
