"""
Report API views.

GET /v1/reports/production    - egg and mortality totals with daily trend
GET /v1/reports/financial     - revenue, expenses and profit (reports page only)
GET /v1/reports/performance   - dashboard metrics
GET /v1/reports/inventory     - stock value and low-stock items
"""
from rest_framework.views import APIView
from rest_framework.permissions import IsAuthenticated
from drf_spectacular.utils import extend_schema
from drf_spectacular.types import OpenApiTypes

from apps.core.permissions import HasRouteAccess, requires_route
from apps.core.responses import envelope
from apps.core.serializers import DateRangeFilterSerializer, validate_input
from apps.inventory.serializers import InventoryItemSerializer
from apps.reports.services import ReportService
from apps.reports.serializers import (
    ProductionReportFilterSerializer, FinancialReportFilterSerializer,
    InventoryReportFilterSerializer,
)


class ProductionReportView(APIView):

    @extend_schema(
        tags=['Reports'],
        summary='Production report',
        parameters=[ProductionReportFilterSerializer],
        responses={200: OpenApiTypes.OBJECT},
    )
    def get(self, request):
        filters = validate_input(ProductionReportFilterSerializer, request.query_params)
        return envelope(data=ReportService.production(filters))


class FinancialReportView(APIView):
    permission_classes = [IsAuthenticated, HasRouteAccess]

    @extend_schema(
        tags=['Reports'],
        summary='Financial report',
        description='Requires access to the reports page (Admin, Manager).',
        parameters=[FinancialReportFilterSerializer],
        responses={200: OpenApiTypes.OBJECT, 403: OpenApiTypes.OBJECT},
    )
    @requires_route('reports')
    def get(self, request):
        filters = validate_input(FinancialReportFilterSerializer, request.query_params)
        return envelope(data=ReportService.financial(filters))


class PerformanceReportView(APIView):

    @extend_schema(
        tags=['Reports'],
        summary='Performance metrics',
        parameters=[DateRangeFilterSerializer],
        responses={200: OpenApiTypes.OBJECT},
    )
    def get(self, request):
        filters = validate_input(DateRangeFilterSerializer, request.query_params)
        return envelope(data=ReportService.performance(filters))


class InventoryReportView(APIView):

    @extend_schema(
        tags=['Reports'],
        summary='Inventory report',
        parameters=[InventoryReportFilterSerializer],
        responses={200: OpenApiTypes.OBJECT},
    )
    def get(self, request):
        filters = validate_input(InventoryReportFilterSerializer, request.query_params)
        report = ReportService.inventory(filters)
        report['low_stock_items'] = InventoryItemSerializer(report['low_stock_items'], many=True).data
        return envelope(data=report)
