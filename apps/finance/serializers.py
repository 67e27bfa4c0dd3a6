"""
Serializers for sales and expense endpoints.
"""
from rest_framework import serializers

from apps.core.serializers import RecordInputSerializer, DateRangeFilterSerializer
from apps.finance.models import SalesRecord, Expense, ProductType, ExpenseCategory
from apps.rbac.serializers import UserSummarySerializer


class SalesRecordSerializer(serializers.ModelSerializer):
    recorded_by = UserSummarySerializer(read_only=True)

    class Meta:
        model = SalesRecord
        fields = [
            'id', 'product_type', 'quantity', 'unit_price', 'total_amount',
            'customer_name', 'customer_phone', 'date', 'notes',
            'recorded_by', 'created_at', 'updated_at'
        ]
        read_only_fields = fields


class SalesRecordInputSerializer(RecordInputSerializer):
    """``total_amount`` defaults to quantity x unit_price when omitted."""

    class Meta:
        model = SalesRecord
        fields = [
            'product_type', 'quantity', 'unit_price', 'total_amount',
            'customer_name', 'customer_phone', 'date', 'notes'
        ]
        extra_kwargs = {
            'total_amount': {'required': False},
            'customer_name': {'required': False},
            'customer_phone': {'required': False},
            'notes': {'required': False},
        }


class SalesFilterSerializer(DateRangeFilterSerializer):
    product_type = serializers.ChoiceField(choices=ProductType.choices, required=False)
    customer_name = serializers.CharField(required=False)


class ExpenseSerializer(serializers.ModelSerializer):
    recorded_by = UserSummarySerializer(read_only=True)

    class Meta:
        model = Expense
        fields = [
            'id', 'category', 'description', 'amount', 'date', 'notes',
            'recorded_by', 'created_at', 'updated_at'
        ]
        read_only_fields = fields


class ExpenseInputSerializer(RecordInputSerializer):

    class Meta:
        model = Expense
        fields = ['category', 'description', 'amount', 'date', 'notes']
        extra_kwargs = {'notes': {'required': False}}


class ExpenseFilterSerializer(DateRangeFilterSerializer):
    category = serializers.ChoiceField(choices=ExpenseCategory.choices, required=False)
    search = serializers.CharField(required=False)
