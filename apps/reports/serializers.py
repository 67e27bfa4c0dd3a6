"""
Query filters for report endpoints.
"""
from rest_framework import serializers

from apps.core.serializers import DateRangeFilterSerializer, RecordFilterSerializer
from apps.inventory.models import ItemType


class ProductionReportFilterSerializer(RecordFilterSerializer):
    pass


class FinancialReportFilterSerializer(DateRangeFilterSerializer):
    pass


class InventoryReportFilterSerializer(serializers.Serializer):
    item_type = serializers.ChoiceField(choices=ItemType.choices, required=False)
