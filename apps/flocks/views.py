"""
Flock API views.

GET    /v1/flocks/                - list flocks (status, breed, housing_unit)
POST   /v1/flocks/                - create a flock
GET    /v1/flocks/stats/summary   - counts and bird totals
GET    /v1/flocks/{id}            - flock with feeding, production and health records
PUT    /v1/flocks/{id}            - partial update
DELETE /v1/flocks/{id}            - delete the flock and its records
"""
from rest_framework.views import APIView
from drf_spectacular.utils import extend_schema, extend_schema_view, OpenApiParameter
from drf_spectacular.types import OpenApiTypes

from apps.core.responses import envelope
from apps.core.views import RecordListView, RecordDetailView
from apps.flocks.models import FlockStatus
from apps.flocks.services import FlockService
from apps.flocks.serializers import (
    FlockSerializer, FlockDetailSerializer, FlockInputSerializer, FlockFilterSerializer,
)


@extend_schema_view(
    get=extend_schema(
        tags=['Flocks'],
        summary='List flocks',
        parameters=[
            OpenApiParameter(
                name='status',
                type=OpenApiTypes.STR,
                location=OpenApiParameter.QUERY,
                enum=FlockStatus.values,
            ),
            OpenApiParameter(
                name='breed',
                type=OpenApiTypes.STR,
                location=OpenApiParameter.QUERY,
                description='Case-insensitive substring match'
            ),
            OpenApiParameter(name='housing_unit', type=OpenApiTypes.STR, location=OpenApiParameter.QUERY),
        ],
        responses={200: FlockSerializer(many=True)},
    ),
    post=extend_schema(
        tags=['Flocks'],
        summary='Create flock',
        description='Roles: Admin, Manager',
        request=FlockInputSerializer,
        responses={201: FlockSerializer, 400: OpenApiTypes.OBJECT, 403: OpenApiTypes.OBJECT},
    ),
)
class FlockListView(RecordListView):
    rbac_resource = 'flocks'
    service = FlockService
    serializer_class = FlockSerializer
    input_serializer_class = FlockInputSerializer
    filter_serializer_class = FlockFilterSerializer


@extend_schema_view(
    get=extend_schema(tags=['Flocks'], summary='Get flock', responses={200: FlockDetailSerializer}),
    put=extend_schema(
        tags=['Flocks'],
        summary='Update flock',
        description='Roles: Admin, Manager',
        request=FlockInputSerializer,
        responses={200: FlockSerializer, 403: OpenApiTypes.OBJECT, 404: OpenApiTypes.OBJECT},
    ),
    patch=extend_schema(exclude=True),
    delete=extend_schema(tags=['Flocks'], summary='Delete flock', description='Roles: Admin'),
)
class FlockDetailView(RecordDetailView):
    rbac_resource = 'flocks'
    service = FlockService
    serializer_class = FlockSerializer
    input_serializer_class = FlockInputSerializer

    def get(self, request, pk):
        flock = FlockService.get_detail(pk)
        return envelope(data=FlockDetailSerializer(flock).data)


class FlockSummaryView(APIView):

    @extend_schema(tags=['Flocks'], summary='Flock statistics', responses={200: OpenApiTypes.OBJECT})
    def get(self, request):
        return envelope(data=FlockService.summary())
