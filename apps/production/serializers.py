"""
Serializers for production endpoints.
"""
from rest_framework import serializers

from apps.core.serializers import RecordInputSerializer, RecordFilterSerializer
from apps.flocks.serializers import BatchSummarySerializer
from apps.production.models import ProductionRecord
from apps.rbac.serializers import UserSummarySerializer


class ProductionRecordRowSerializer(serializers.ModelSerializer):
    recorded_by = UserSummarySerializer(read_only=True)

    class Meta:
        model = ProductionRecord
        fields = [
            'id', 'eggs_collected', 'mortality_count', 'date', 'notes',
            'recorded_by', 'created_at', 'updated_at'
        ]
        read_only_fields = fields


class ProductionRecordSerializer(ProductionRecordRowSerializer):
    batch = BatchSummarySerializer(read_only=True)

    class Meta(ProductionRecordRowSerializer.Meta):
        fields = ['id', 'batch'] + ProductionRecordRowSerializer.Meta.fields[1:]
        read_only_fields = fields


class ProductionRecordInputSerializer(RecordInputSerializer):
    """
    Create / partial update payload.

    ``mortality_count`` only affects the batch when the record is created;
    editing it later does not touch the bird count.
    """

    create_only_fields = ('batch',)

    class Meta:
        model = ProductionRecord
        fields = ['batch', 'eggs_collected', 'mortality_count', 'date', 'notes']
        extra_kwargs = {
            'mortality_count': {'required': False},
            'notes': {'required': False},
        }


class ProductionFilterSerializer(RecordFilterSerializer):
    pass
