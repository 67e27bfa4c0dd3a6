"""
URL configuration for the Poultry Farm Management API.
"""
from django.contrib import admin
from django.urls import path, include
from drf_spectacular.views import SpectacularAPIView, SpectacularSwaggerView

urlpatterns = [
    path('admin/', admin.site.urls),

    # API Documentation
    path('schema/', SpectacularAPIView.as_view(), name='schema'),
    path('schema/swagger/', SpectacularSwaggerView.as_view(url_name='schema'), name='swagger-ui'),

    # API v1
    path('v1/', include('apps.core.urls')),  # Status check

    # Authentication endpoints
    path('v1/auth/', include('apps.rbac.urls_auth')),  # Register, login, me, permissions

    # User management
    path('v1/users/', include('apps.rbac.urls')),

    # Farm records
    path('v1/flocks/', include('apps.flocks.urls')),
    path('v1/feeding/', include('apps.feeding.urls')),
    path('v1/production/', include('apps.production.urls')),
    path('v1/health/', include('apps.health.urls')),
    path('v1/inventory/', include('apps.inventory.urls')),
    path('v1/sales/', include('apps.finance.urls_sales')),
    path('v1/expenses/', include('apps.finance.urls_expenses')),
    path('v1/notifications/', include('apps.notifications.urls')),
    path('v1/reports/', include('apps.reports.urls')),
]
