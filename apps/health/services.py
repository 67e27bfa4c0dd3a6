"""
Health service.
"""
from apps.core.services import RecordService
from apps.health.models import HealthRecord


class HealthService(RecordService):
    model = HealthRecord
    label = 'Health record'
    related = ('batch', 'vet')
    ordering = ('-created_at',)
    exact_filters = ('batch_id', 'status')
    text_filters = {'disease': 'disease'}
    date_field = 'vaccination_date'
    recorder_field = 'vet'

    @classmethod
    def for_batch(cls, batch_id):
        return cls.list({'batch_id': batch_id})

    @classmethod
    def active_alerts(cls):
        """Records of batches under treatment or quarantined, newest first."""
        return cls.get_queryset().alerts().order_by(*cls.ordering)
