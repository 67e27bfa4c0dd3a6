"""
URL configuration for feeding app.
"""
from django.urls import path
from apps.feeding.views import FeedRecordListView, FeedRecordDetailView, BatchFeedRecordsView

app_name = 'feeding'

urlpatterns = [
    path('', FeedRecordListView.as_view(), name='feed-list'),
    path('batch/<uuid:batch_id>', BatchFeedRecordsView.as_view(), name='feed-by-batch'),
    path('<uuid:pk>', FeedRecordDetailView.as_view(), name='feed-detail'),
]
