"""
Sales and expense API views.

GET    /v1/sales/                  - list sales (product_type, customer_name, date range)
POST   /v1/sales/                  - Admin, Manager
GET    /v1/sales/stats/summary     - revenue by product
GET    /v1/sales/{id}
PUT    /v1/sales/{id}              - Admin, Manager
DELETE /v1/sales/{id}              - Admin

The /v1/expenses/ routes mirror these with category and description search.
"""
from rest_framework.views import APIView
from drf_spectacular.utils import extend_schema, extend_schema_view
from drf_spectacular.types import OpenApiTypes

from apps.core.responses import envelope
from apps.core.serializers import DateRangeFilterSerializer, validate_input
from apps.core.views import RecordListView, RecordDetailView
from apps.finance.services import SalesService, ExpenseService
from apps.finance.serializers import (
    SalesRecordSerializer, SalesRecordInputSerializer, SalesFilterSerializer,
    ExpenseSerializer, ExpenseInputSerializer, ExpenseFilterSerializer,
)


@extend_schema_view(
    get=extend_schema(
        tags=['Sales'],
        summary='List sales',
        parameters=[SalesFilterSerializer],
        responses={200: SalesRecordSerializer(many=True)},
    ),
    post=extend_schema(
        tags=['Sales'],
        summary='Record sale',
        description='Roles: Admin, Manager',
        request=SalesRecordInputSerializer,
        responses={201: SalesRecordSerializer},
    ),
)
class SalesListView(RecordListView):
    rbac_resource = 'sales'
    service = SalesService
    serializer_class = SalesRecordSerializer
    input_serializer_class = SalesRecordInputSerializer
    filter_serializer_class = SalesFilterSerializer


@extend_schema_view(
    get=extend_schema(tags=['Sales'], summary='Get sale', responses={200: SalesRecordSerializer}),
    put=extend_schema(
        tags=['Sales'],
        summary='Update sale',
        description='Roles: Admin, Manager',
        request=SalesRecordInputSerializer,
        responses={200: SalesRecordSerializer},
    ),
    patch=extend_schema(exclude=True),
    delete=extend_schema(tags=['Sales'], summary='Delete sale', description='Roles: Admin'),
)
class SalesDetailView(RecordDetailView):
    rbac_resource = 'sales'
    service = SalesService
    serializer_class = SalesRecordSerializer
    input_serializer_class = SalesRecordInputSerializer


class SalesSummaryView(APIView):

    @extend_schema(
        tags=['Sales'],
        summary='Sales statistics',
        parameters=[DateRangeFilterSerializer],
        responses={200: OpenApiTypes.OBJECT},
    )
    def get(self, request):
        filters = validate_input(DateRangeFilterSerializer, request.query_params)
        return envelope(data=SalesService.summary(filters))


@extend_schema_view(
    get=extend_schema(
        tags=['Expenses'],
        summary='List expenses',
        parameters=[ExpenseFilterSerializer],
        responses={200: ExpenseSerializer(many=True)},
    ),
    post=extend_schema(
        tags=['Expenses'],
        summary='Record expense',
        description='Roles: Admin, Manager',
        request=ExpenseInputSerializer,
        responses={201: ExpenseSerializer},
    ),
)
class ExpenseListView(RecordListView):
    rbac_resource = 'expenses'
    service = ExpenseService
    serializer_class = ExpenseSerializer
    input_serializer_class = ExpenseInputSerializer
    filter_serializer_class = ExpenseFilterSerializer


@extend_schema_view(
    get=extend_schema(tags=['Expenses'], summary='Get expense', responses={200: ExpenseSerializer}),
    put=extend_schema(
        tags=['Expenses'],
        summary='Update expense',
        description='Roles: Admin, Manager',
        request=ExpenseInputSerializer,
        responses={200: ExpenseSerializer},
    ),
    patch=extend_schema(exclude=True),
    delete=extend_schema(tags=['Expenses'], summary='Delete expense', description='Roles: Admin'),
)
class ExpenseDetailView(RecordDetailView):
    rbac_resource = 'expenses'
    service = ExpenseService
    serializer_class = ExpenseSerializer
    input_serializer_class = ExpenseInputSerializer


class ExpenseSummaryView(APIView):

    @extend_schema(
        tags=['Expenses'],
        summary='Expense statistics',
        parameters=[DateRangeFilterSerializer],
        responses={200: OpenApiTypes.OBJECT},
    )
    def get(self, request):
        filters = validate_input(DateRangeFilterSerializer, request.query_params)
        return envelope(data=ExpenseService.summary(filters))
