from django.urls import path
from . import views

app_name = 'maintenance'

urlpatterns = [
    path('requests/', views.request_list, name='request_list'),
    path('requests/<int:pk>/', views.request_detail, name='request_detail'),
    path('requests/property/<int:property_id>/', views.requests_by_property, name='requests_by_property'),
    path('requests/status/<str:status>/', views.requests_by_status, name='requests_by_status'),
]
