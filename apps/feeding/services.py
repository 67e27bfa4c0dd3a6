"""
Feeding service.
"""
from decimal import Decimal
from django.db.models import Sum, Value, DecimalField
from django.db.models.functions import Coalesce

from apps.core.services import RecordService
from apps.feeding.models import FeedRecord


class FeedingService(RecordService):
    model = FeedRecord
    label = 'Feed record'
    related = ('batch', 'recorded_by')
    exact_filters = ('batch_id',)
    text_filters = {'feed_type': 'feed_type'}

    @classmethod
    def for_batch(cls, batch_id):
        """
        Feed records of one batch plus the total quantity fed.

        Returns:
            tuple: (records queryset, total feed as Decimal)
        """
        records = cls.list({'batch_id': batch_id})
        total = records.aggregate(
            total=Coalesce(Sum('quantity'), Value(Decimal('0')), output_field=DecimalField())
        )['total']
        return records, total
