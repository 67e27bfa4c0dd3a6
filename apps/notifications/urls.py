"""
URL configuration for notifications app.
"""
from django.urls import path
from apps.notifications.views import (
    NotificationCreateView, UserNotificationsView, MarkAllReadView,
    MarkReadView, NotificationDetailView,
)

app_name = 'notifications'

urlpatterns = [
    path('', NotificationCreateView.as_view(), name='notification-create'),
    path('user/<uuid:user_id>', UserNotificationsView.as_view(), name='notification-user-list'),
    path('user/<uuid:user_id>/read-all', MarkAllReadView.as_view(), name='notification-read-all'),
    path('<uuid:pk>/read', MarkReadView.as_view(), name='notification-read'),
    path('<uuid:pk>', NotificationDetailView.as_view(), name='notification-detail'),
]
