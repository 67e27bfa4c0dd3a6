"""
User management URLs.
"""
from django.urls import path
from apps.rbac.views import UserListView, UserDetailView

app_name = 'rbac'

urlpatterns = [
    path('', UserListView.as_view(), name='user-list'),
    path('<uuid:user_id>', UserDetailView.as_view(), name='user-detail'),
]
