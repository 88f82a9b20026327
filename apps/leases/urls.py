from django.urls import path
from . import views

app_name = 'leases'

urlpatterns = [
    path('', views.lease_list, name='lease_list'),
    path('<int:pk>/', views.lease_detail, name='lease_detail'),
]
