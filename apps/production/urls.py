"""
URL configuration for production app.
"""
from django.urls import path
from apps.production.views import (
    ProductionListView, ProductionDetailView, BatchProductionView, ProductionSummaryView,
)

app_name = 'production'

urlpatterns = [
    path('', ProductionListView.as_view(), name='production-list'),
    path('stats/summary', ProductionSummaryView.as_view(), name='production-summary'),
    path('batch/<uuid:batch_id>', BatchProductionView.as_view(), name='production-by-batch'),
    path('<uuid:pk>', ProductionDetailView.as_view(), name='production-detail'),
]
