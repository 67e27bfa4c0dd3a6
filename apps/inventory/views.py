"""
Inventory API views.

GET    /v1/inventory/                    - list items (item_type, search)
POST   /v1/inventory/                    - Admin, Manager
GET    /v1/inventory/alerts/low-stock    - items at or below minimum stock
GET    /v1/inventory/{id}
PUT    /v1/inventory/{id}                - Admin, Manager
DELETE /v1/inventory/{id}                - Admin
"""
from rest_framework.views import APIView
from drf_spectacular.utils import extend_schema, extend_schema_view

from apps.core.responses import envelope
from apps.core.views import RecordListView, RecordDetailView
from apps.inventory.services import InventoryService
from apps.inventory.serializers import (
    InventoryItemSerializer, InventoryItemInputSerializer, InventoryFilterSerializer,
)


@extend_schema_view(
    get=extend_schema(
        tags=['Inventory'],
        summary='List inventory items',
        parameters=[InventoryFilterSerializer],
        responses={200: InventoryItemSerializer(many=True)},
    ),
    post=extend_schema(
        tags=['Inventory'],
        summary='Create inventory item',
        description='Roles: Admin, Manager. `unit` defaults to kg and `minimum_stock` to 10.',
        request=InventoryItemInputSerializer,
        responses={201: InventoryItemSerializer},
    ),
)
class InventoryListView(RecordListView):
    rbac_resource = 'inventory'
    service = InventoryService
    serializer_class = InventoryItemSerializer
    input_serializer_class = InventoryItemInputSerializer
    filter_serializer_class = InventoryFilterSerializer


@extend_schema_view(
    get=extend_schema(tags=['Inventory'], summary='Get inventory item', responses={200: InventoryItemSerializer}),
    put=extend_schema(
        tags=['Inventory'],
        summary='Update inventory item',
        description='Roles: Admin, Manager',
        request=InventoryItemInputSerializer,
        responses={200: InventoryItemSerializer},
    ),
    patch=extend_schema(exclude=True),
    delete=extend_schema(tags=['Inventory'], summary='Delete inventory item', description='Roles: Admin'),
)
class InventoryDetailView(RecordDetailView):
    rbac_resource = 'inventory'
    service = InventoryService
    serializer_class = InventoryItemSerializer
    input_serializer_class = InventoryItemInputSerializer


class LowStockView(APIView):

    @extend_schema(tags=['Inventory'], summary='Low stock alerts', responses={200: InventoryItemSerializer(many=True)})
    def get(self, request):
        data = InventoryItemSerializer(InventoryService.low_stock(), many=True).data
        return envelope(data=data, count=len(data))
