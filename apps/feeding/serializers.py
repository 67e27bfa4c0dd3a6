"""
Serializers for feeding endpoints.
"""
from rest_framework import serializers

from apps.core.serializers import RecordInputSerializer, RecordFilterSerializer
from apps.feeding.models import FeedRecord
from apps.flocks.serializers import BatchSummarySerializer
from apps.rbac.serializers import UserSummarySerializer


class FeedRecordRowSerializer(serializers.ModelSerializer):
    """Feed record without the batch expanded (nested under a flock)."""

    recorded_by = UserSummarySerializer(read_only=True)

    class Meta:
        model = FeedRecord
        fields = ['id', 'feed_type', 'quantity', 'unit', 'date', 'recorded_by', 'created_at', 'updated_at']
        read_only_fields = fields


class FeedRecordSerializer(FeedRecordRowSerializer):
    batch = BatchSummarySerializer(read_only=True)

    class Meta(FeedRecordRowSerializer.Meta):
        fields = ['id', 'batch'] + FeedRecordRowSerializer.Meta.fields[1:]
        read_only_fields = fields


class FeedRecordInputSerializer(RecordInputSerializer):
    create_only_fields = ('batch',)

    class Meta:
        model = FeedRecord
        fields = ['batch', 'feed_type', 'quantity', 'unit', 'date']
        extra_kwargs = {'unit': {'required': False}}


class FeedRecordFilterSerializer(RecordFilterSerializer):
    feed_type = serializers.CharField(required=False)
