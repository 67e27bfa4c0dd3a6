"""
Serializers for health endpoints.
"""
from rest_framework import serializers

from apps.core.serializers import RecordInputSerializer, RecordFilterSerializer
from apps.flocks.serializers import BatchSummarySerializer
from apps.health.models import HealthRecord, HealthStatus
from apps.rbac.serializers import UserSummarySerializer


class HealthRecordRowSerializer(serializers.ModelSerializer):
    vet = UserSummarySerializer(read_only=True)

    class Meta:
        model = HealthRecord
        fields = [
            'id', 'vaccination_date', 'vaccine_name', 'disease', 'treatment',
            'vet', 'status', 'notes', 'created_at', 'updated_at'
        ]
        read_only_fields = fields


class HealthRecordSerializer(HealthRecordRowSerializer):
    batch = BatchSummarySerializer(read_only=True)

    class Meta(HealthRecordRowSerializer.Meta):
        fields = ['id', 'batch'] + HealthRecordRowSerializer.Meta.fields[1:]
        read_only_fields = fields


class HealthRecordInputSerializer(RecordInputSerializer):
    create_only_fields = ('batch',)

    class Meta:
        model = HealthRecord
        fields = [
            'batch', 'vaccination_date', 'vaccine_name', 'disease',
            'treatment', 'status', 'notes'
        ]


class HealthFilterSerializer(RecordFilterSerializer):
    status = serializers.ChoiceField(choices=HealthStatus.choices, required=False)
    disease = serializers.CharField(required=False)
