"""
Serializers for inventory endpoints.
"""
from rest_framework import serializers

from apps.core.serializers import RecordInputSerializer
from apps.inventory.models import InventoryItem, ItemType


class InventoryItemSerializer(serializers.ModelSerializer):
    is_low_stock = serializers.BooleanField(read_only=True)

    class Meta:
        model = InventoryItem
        fields = [
            'id', 'item_name', 'item_type', 'quantity', 'unit', 'minimum_stock',
            'unit_price', 'supplier', 'is_low_stock', 'created_at', 'updated_at'
        ]
        read_only_fields = fields


class InventoryItemInputSerializer(RecordInputSerializer):

    class Meta:
        model = InventoryItem
        fields = ['item_name', 'item_type', 'quantity', 'unit', 'minimum_stock', 'unit_price', 'supplier']
        extra_kwargs = {
            'unit': {'required': False},
            'minimum_stock': {'required': False},
            'unit_price': {'required': False},
            'supplier': {'required': False},
        }


class InventoryFilterSerializer(serializers.Serializer):
    item_type = serializers.ChoiceField(choices=ItemType.choices, required=False)
    search = serializers.CharField(required=False)
