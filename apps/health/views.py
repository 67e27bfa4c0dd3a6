"""
Health API views.

GET    /v1/health/                - list records (batch_id, status, disease)
POST   /v1/health/                - Admin, Manager, Veterinarian
GET    /v1/health/alerts/active   - batches under treatment or quarantined
GET    /v1/health/batch/{id}      - records of one batch
GET    /v1/health/{id}
PUT    /v1/health/{id}            - Admin, Manager, Veterinarian
DELETE /v1/health/{id}            - Admin
"""
from rest_framework.views import APIView
from drf_spectacular.utils import extend_schema, extend_schema_view

from apps.core.responses import envelope
from apps.core.views import RecordListView, RecordDetailView
from apps.health.services import HealthService
from apps.health.serializers import (
    HealthRecordSerializer, HealthRecordInputSerializer, HealthFilterSerializer,
)


@extend_schema_view(
    get=extend_schema(
        tags=['Health'],
        summary='List health records',
        parameters=[HealthFilterSerializer],
        responses={200: HealthRecordSerializer(many=True)},
    ),
    post=extend_schema(
        tags=['Health'],
        summary='Create health record',
        description='Roles: Admin, Manager, Veterinarian. The caller is stored as `vet`.',
        request=HealthRecordInputSerializer,
        responses={201: HealthRecordSerializer},
    ),
)
class HealthRecordListView(RecordListView):
    rbac_resource = 'health'
    service = HealthService
    serializer_class = HealthRecordSerializer
    input_serializer_class = HealthRecordInputSerializer
    filter_serializer_class = HealthFilterSerializer


@extend_schema_view(
    get=extend_schema(tags=['Health'], summary='Get health record', responses={200: HealthRecordSerializer}),
    put=extend_schema(
        tags=['Health'],
        summary='Update health record',
        description='Roles: Admin, Manager, Veterinarian',
        request=HealthRecordInputSerializer,
        responses={200: HealthRecordSerializer},
    ),
    patch=extend_schema(exclude=True),
    delete=extend_schema(tags=['Health'], summary='Delete health record', description='Roles: Admin'),
)
class HealthRecordDetailView(RecordDetailView):
    rbac_resource = 'health'
    service = HealthService
    serializer_class = HealthRecordSerializer
    input_serializer_class = HealthRecordInputSerializer


class BatchHealthRecordsView(APIView):

    @extend_schema(tags=['Health'], summary='Health records of a batch', responses={200: HealthRecordSerializer(many=True)})
    def get(self, request, batch_id):
        data = HealthRecordSerializer(HealthService.for_batch(batch_id), many=True).data
        return envelope(data=data, count=len(data))


class HealthAlertsView(APIView):

    @extend_schema(tags=['Health'], summary='Active health alerts', responses={200: HealthRecordSerializer(many=True)})
    def get(self, request):
        data = HealthRecordSerializer(HealthService.active_alerts(), many=True).data
        return envelope(data=data, count=len(data))
