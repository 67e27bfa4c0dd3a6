"""
URL configuration for reports app.
"""
from django.urls import path
from apps.reports.views import (
    ProductionReportView, FinancialReportView, PerformanceReportView, InventoryReportView,
)

app_name = 'reports'

urlpatterns = [
    path('production', ProductionReportView.as_view(), name='report-production'),
    path('financial', FinancialReportView.as_view(), name='report-financial'),
    path('performance', PerformanceReportView.as_view(), name='report-performance'),
    path('inventory', InventoryReportView.as_view(), name='report-inventory'),
]
