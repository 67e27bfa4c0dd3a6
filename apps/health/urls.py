"""
URL configuration for health app.
"""
from django.urls import path
from apps.health.views import (
    HealthRecordListView, HealthRecordDetailView, BatchHealthRecordsView, HealthAlertsView,
)

app_name = 'health'

urlpatterns = [
    path('', HealthRecordListView.as_view(), name='health-list'),
    path('alerts/active', HealthAlertsView.as_view(), name='health-alerts'),
    path('batch/<uuid:batch_id>', BatchHealthRecordsView.as_view(), name='health-by-batch'),
    path('<uuid:pk>', HealthRecordDetailView.as_view(), name='health-detail'),
]
