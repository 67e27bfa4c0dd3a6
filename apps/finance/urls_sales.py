"""
URL configuration for sales endpoints.
"""
from django.urls import path
from apps.finance.views import SalesListView, SalesDetailView, SalesSummaryView

app_name = 'sales'

urlpatterns = [
    path('', SalesListView.as_view(), name='sales-list'),
    path('stats/summary', SalesSummaryView.as_view(), name='sales-summary'),
    path('<uuid:pk>', SalesDetailView.as_view(), name='sales-detail'),
]
