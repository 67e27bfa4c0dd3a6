"""
URL configuration for flocks app.
"""
from django.urls import path
from apps.flocks.views import FlockListView, FlockDetailView, FlockSummaryView

app_name = 'flocks'

urlpatterns = [
    path('', FlockListView.as_view(), name='flock-list'),
    path('stats/summary', FlockSummaryView.as_view(), name='flock-summary'),
    path('<uuid:pk>', FlockDetailView.as_view(), name='flock-detail'),
]
