"""
Feeding API views.

GET    /v1/feeding/               - list feed records (batch_id, feed_type, date range)
POST   /v1/feeding/               - record feed (Admin, Manager, Worker)
GET    /v1/feeding/batch/{id}     - records of one batch with total feed
GET    /v1/feeding/{id}
PUT    /v1/feeding/{id}           - Admin, Manager
DELETE /v1/feeding/{id}           - Admin, Manager
"""
from rest_framework.views import APIView
from drf_spectacular.utils import extend_schema, extend_schema_view
from drf_spectacular.types import OpenApiTypes

from apps.core.responses import envelope
from apps.core.views import RecordListView, RecordDetailView
from apps.feeding.services import FeedingService
from apps.feeding.serializers import (
    FeedRecordSerializer, FeedRecordInputSerializer, FeedRecordFilterSerializer,
)


@extend_schema_view(
    get=extend_schema(
        tags=['Feeding'],
        summary='List feed records',
        parameters=[FeedRecordFilterSerializer],
        responses={200: FeedRecordSerializer(many=True)},
    ),
    post=extend_schema(
        tags=['Feeding'],
        summary='Record feed',
        description='Roles: Admin, Manager, Worker',
        request=FeedRecordInputSerializer,
        responses={201: FeedRecordSerializer, 400: OpenApiTypes.OBJECT, 403: OpenApiTypes.OBJECT},
    ),
)
class FeedRecordListView(RecordListView):
    rbac_resource = 'feeding'
    service = FeedingService
    serializer_class = FeedRecordSerializer
    input_serializer_class = FeedRecordInputSerializer
    filter_serializer_class = FeedRecordFilterSerializer


@extend_schema_view(
    get=extend_schema(tags=['Feeding'], summary='Get feed record', responses={200: FeedRecordSerializer}),
    put=extend_schema(
        tags=['Feeding'],
        summary='Update feed record',
        description='Roles: Admin, Manager',
        request=FeedRecordInputSerializer,
        responses={200: FeedRecordSerializer},
    ),
    patch=extend_schema(exclude=True),
    delete=extend_schema(tags=['Feeding'], summary='Delete feed record', description='Roles: Admin, Manager'),
)
class FeedRecordDetailView(RecordDetailView):
    rbac_resource = 'feeding'
    service = FeedingService
    serializer_class = FeedRecordSerializer
    input_serializer_class = FeedRecordInputSerializer


class BatchFeedRecordsView(APIView):

    @extend_schema(tags=['Feeding'], summary='Feed records of a batch', responses={200: OpenApiTypes.OBJECT})
    def get(self, request, batch_id):
        records, total = FeedingService.for_batch(batch_id)
        data = FeedRecordSerializer(records, many=True).data
        return envelope(data=data, count=len(data), total_feed=total)
