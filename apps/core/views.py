"""
Core API views.

Besides the status check this module holds the list and detail views
every farm resource is built from. A resource view names its service,
serializers and RBAC resource; the permission classes run before any
handler, so denied mutations never reach storage.
"""
from rest_framework.views import APIView
from rest_framework.response import Response
from rest_framework.permissions import IsAuthenticated
from rest_framework import status
from django.db import connection
from django.core.cache import cache
from drf_spectacular.utils import extend_schema
import logging

from apps.core.permissions import HasResourcePermission
from apps.core.responses import envelope
from apps.core.serializers import RecordFilterSerializer, validate_input

logger = logging.getLogger(__name__)


class StatusView(APIView):
    """
    Status endpoint to verify system dependencies.

    GET /v1/status/

    Returns 200 if all dependencies are healthy, 503 otherwise.
    """
    authentication_classes = []
    permission_classes = []

    @extend_schema(
        tags=['Status'],
        summary="Status check",
        description="Check the database and cache used by the API",
        responses={
            200: {
                'type': 'object',
                'properties': {
                    'status': {'type': 'string'},
                    'database': {'type': 'string'},
                    'cache': {'type': 'string'},
                }
            },
            503: {
                'type': 'object',
                'properties': {
                    'status': {'type': 'string'},
                    'database': {'type': 'string'},
                    'cache': {'type': 'string'},
                    'errors': {'type': 'array', 'items': {'type': 'string'}},
                }
            }
        }
    )
    def get(self, request):
        health_status = {
            'status': 'healthy',
            'database': 'unknown',
            'cache': 'unknown',
        }
        errors = []

        try:
            with connection.cursor() as cursor:
                cursor.execute("SELECT 1")
            health_status['database'] = 'healthy'
        except Exception as e:
            health_status['database'] = 'unhealthy'
            errors.append(f"Database: {str(e)}")
            logger.error("Database health check failed", exc_info=True)

        try:
            cache.set('status_check', 'ok', timeout=10)
            if cache.get('status_check') == 'ok':
                health_status['cache'] = 'healthy'
            else:
                health_status['cache'] = 'unhealthy'
                errors.append("Cache: Unable to read test key")
        except Exception as e:
            health_status['cache'] = 'unhealthy'
            errors.append(f"Cache: {str(e)}")
            logger.error("Cache health check failed", exc_info=True)

        if errors:
            health_status['status'] = 'unhealthy'
            health_status['errors'] = errors
            return Response(
                {'success': False, 'message': 'Service unavailable', 'data': health_status},
                status=status.HTTP_503_SERVICE_UNAVAILABLE,
            )

        return envelope(data=health_status)


class RecordViewMixin:
    """Attributes shared by the list and detail views of a resource."""

    permission_classes = [IsAuthenticated, HasResourcePermission]
    rbac_resource = None
    service = None
    serializer_class = None
    input_serializer_class = None

    def serialize(self, instance, many=False):
        return self.serializer_class(instance, many=many, context={'request': self.request}).data


class RecordListView(RecordViewMixin, APIView):
    """
    GET  - list records matching the query-string filters
    POST - create a record (role must hold the create grant)
    """

    filter_serializer_class = RecordFilterSerializer

    def get(self, request):
        filters = validate_input(self.filter_serializer_class, request.query_params)
        records = self.service.list(filters)
        data = self.serialize(records, many=True)
        return envelope(data=data, count=len(data))

    def post(self, request):
        data = validate_input(self.input_serializer_class, request.data)
        record = self.service.create(data, principal=request.auth)
        return envelope(
            data=self.serialize(record),
            message=f"{self.service.label} created successfully",
            status=status.HTTP_201_CREATED,
        )


class RecordDetailView(RecordViewMixin, APIView):
    """
    GET    - retrieve one record
    PUT    - partial update (role must hold the update grant)
    DELETE - hard delete (role must hold the delete grant)
    """

    def get(self, request, pk):
        return envelope(data=self.serialize(self.service.get_by_id(pk)))

    def put(self, request, pk):
        data = validate_input(self.input_serializer_class, request.data, partial=True)
        record = self.service.update(pk, data)
        return envelope(
            data=self.serialize(record),
            message=f"{self.service.label} updated successfully",
        )

    def patch(self, request, pk):
        return self.put(request, pk)

    def delete(self, request, pk):
        self.service.delete(pk)
        return envelope(message=f"{self.service.label} deleted successfully")
