from django.urls import path
from . import views

app_name = 'transactions'

urlpatterns = [
    # Transaction
    path('transactions/', views.transaction_list, name='transaction_list'),
    path('transactions/<int:pk>/', views.transaction_detail, name='transaction_detail'),
    path('transactions/property/<int:property_id>/', views.transactions_by_property, name='transactions_by_property'),
    path('transactions/category/<str:category>/', views.transactions_by_category, name='transactions_by_category'),

    # Summary / export
    path('summary/', views.financial_summary, name='financial_summary'),
    path('export/', views.transaction_export, name='transaction_export'),

    # Mortgage
    path('mortgages/', views.mortgage_list, name='mortgage_list'),
    path('mortgages/<int:pk>/', views.mortgage_detail, name='mortgage_detail'),
]
