"""
URL configuration for inventory app.
"""
from django.urls import path
from apps.inventory.views import InventoryListView, InventoryDetailView, LowStockView

app_name = 'inventory'

urlpatterns = [
    path('', InventoryListView.as_view(), name='inventory-list'),
    path('alerts/low-stock', LowStockView.as_view(), name='inventory-low-stock'),
    path('<uuid:pk>', InventoryDetailView.as_view(), name='inventory-detail'),
]
