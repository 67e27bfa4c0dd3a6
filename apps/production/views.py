"""
Production API views.

GET    /v1/production/                 - list records (batch_id, date range)
POST   /v1/production/                 - record eggs and mortality
GET    /v1/production/stats/summary    - totals and per-batch breakdown
GET    /v1/production/batch/{id}       - records of one batch with totals
GET    /v1/production/{id}
PUT    /v1/production/{id}             - Admin, Manager
DELETE /v1/production/{id}             - Admin, Manager
"""
from rest_framework.views import APIView
from drf_spectacular.utils import extend_schema, extend_schema_view, OpenApiExample
from drf_spectacular.types import OpenApiTypes

from apps.core.responses import envelope
from apps.core.views import RecordListView, RecordDetailView
from apps.production.services import ProductionService
from apps.production.serializers import (
    ProductionRecordSerializer, ProductionRecordInputSerializer, ProductionFilterSerializer,
)


@extend_schema_view(
    get=extend_schema(
        tags=['Production'],
        summary='List production records',
        parameters=[ProductionFilterSerializer],
        responses={200: ProductionRecordSerializer(many=True)},
    ),
    post=extend_schema(
        tags=['Production'],
        summary='Record production',
        description='''
Roles: Admin, Manager, Worker

When `mortality_count` is above zero the batch quantity is reduced by the
same number in the same transaction, never below zero.
        ''',
        request=ProductionRecordInputSerializer,
        responses={201: ProductionRecordSerializer, 400: OpenApiTypes.OBJECT, 403: OpenApiTypes.OBJECT},
        examples=[
            OpenApiExample(
                'Daily collection',
                value={
                    'batch': '3fa85f64-5717-4562-b3fc-2c963f66afa6',
                    'eggs_collected': 412,
                    'mortality_count': 2,
                    'date': '2024-03-14',
                    'notes': 'Two birds lost to heat',
                },
                request_only=True
            ),
        ],
    ),
)
class ProductionListView(RecordListView):
    rbac_resource = 'production'
    service = ProductionService
    serializer_class = ProductionRecordSerializer
    input_serializer_class = ProductionRecordInputSerializer
    filter_serializer_class = ProductionFilterSerializer


@extend_schema_view(
    get=extend_schema(tags=['Production'], summary='Get production record', responses={200: ProductionRecordSerializer}),
    put=extend_schema(
        tags=['Production'],
        summary='Update production record',
        description='Roles: Admin, Manager',
        request=ProductionRecordInputSerializer,
        responses={200: ProductionRecordSerializer},
    ),
    patch=extend_schema(exclude=True),
    delete=extend_schema(tags=['Production'], summary='Delete production record', description='Roles: Admin, Manager'),
)
class ProductionDetailView(RecordDetailView):
    rbac_resource = 'production'
    service = ProductionService
    serializer_class = ProductionRecordSerializer
    input_serializer_class = ProductionRecordInputSerializer


class BatchProductionView(APIView):

    @extend_schema(tags=['Production'], summary='Production of a batch', responses={200: OpenApiTypes.OBJECT})
    def get(self, request, batch_id):
        records, totals = ProductionService.for_batch(batch_id)
        data = ProductionRecordSerializer(records, many=True).data
        return envelope(data=data, count=len(data), **totals)


class ProductionSummaryView(APIView):

    @extend_schema(tags=['Production'], summary='Production statistics', responses={200: OpenApiTypes.OBJECT})
    def get(self, request):
        return envelope(data=ProductionService.summary())
