"""
Serializers for flock endpoints.
"""
from rest_framework import serializers

from apps.core.serializers import RecordInputSerializer, DateRangeFilterSerializer
from apps.flocks.models import PoultryBatch, FlockStatus


class BatchSummarySerializer(serializers.ModelSerializer):
    """Compact batch representation used when expanding child records."""

    class Meta:
        model = PoultryBatch
        fields = ['id', 'breed', 'quantity', 'housing_unit', 'status']
        read_only_fields = fields


class FlockSerializer(serializers.ModelSerializer):

    class Meta:
        model = PoultryBatch
        fields = [
            'id', 'breed', 'quantity', 'age', 'date_acquired',
            'housing_unit', 'status', 'created_at', 'updated_at'
        ]
        read_only_fields = fields


class FlockDetailSerializer(FlockSerializer):
    """Flock with every child record expanded."""

    feed_records = serializers.SerializerMethodField()
    production_records = serializers.SerializerMethodField()
    health_records = serializers.SerializerMethodField()

    class Meta(FlockSerializer.Meta):
        fields = FlockSerializer.Meta.fields + ['feed_records', 'production_records', 'health_records']
        read_only_fields = fields

    def get_feed_records(self, obj):
        from apps.feeding.serializers import FeedRecordRowSerializer
        return FeedRecordRowSerializer(obj.feed_records.all(), many=True).data

    def get_production_records(self, obj):
        from apps.production.serializers import ProductionRecordRowSerializer
        return ProductionRecordRowSerializer(obj.production_records.all(), many=True).data

    def get_health_records(self, obj):
        from apps.health.serializers import HealthRecordRowSerializer
        return HealthRecordRowSerializer(obj.health_records.all(), many=True).data


class FlockInputSerializer(RecordInputSerializer):
    """Create / partial update payload for a flock."""

    class Meta:
        model = PoultryBatch
        fields = ['breed', 'quantity', 'age', 'date_acquired', 'housing_unit', 'status']
        extra_kwargs = {
            'housing_unit': {'required': False},
            'status': {'required': False},
        }


class FlockFilterSerializer(DateRangeFilterSerializer):
    status = serializers.ChoiceField(choices=FlockStatus.choices, required=False)
    breed = serializers.CharField(required=False)
    housing_unit = serializers.CharField(required=False)
