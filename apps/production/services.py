"""
Production service.

Recording mortality reduces the live bird count of the batch. The insert
and the decrement run in one transaction against a locked batch row, so two
concurrent submissions for the same batch both land.
"""
import logging
from django.db import transaction
from django.db.models import Avg, Count, F, Sum, Value, FloatField
from django.db.models.functions import Coalesce, Greatest

from apps.core.exceptions import NotFound
from apps.core.services import RecordService
from apps.flocks.models import PoultryBatch
from apps.production.models import ProductionRecord

logger = logging.getLogger(__name__)


class ProductionService(RecordService):
    model = ProductionRecord
    label = 'Production record'
    related = ('batch', 'recorded_by')
    exact_filters = ('batch_id',)

    @classmethod
    @transaction.atomic
    def create(cls, data, principal=None):
        record = super().create(data, principal=principal)

        mortality = record.mortality_count
        if mortality > 0:
            cls.apply_mortality(record.batch_id, mortality)
            # Re-read so the expanded batch shows the new quantity
            record = cls.get_by_id(record.pk)

        return record

    @staticmethod
    def apply_mortality(batch_id, count):
        """
        Decrement a batch's live bird count by ``count``, floored at zero.

        Must run inside a transaction.
        """
        PoultryBatch.objects.select_for_update().filter(pk=batch_id).first()
        updated = PoultryBatch.objects.filter(pk=batch_id).update(
            quantity=Greatest(F('quantity') - count, Value(0))
        )
        if updated != 1:
            raise NotFound("Flock not found")

        logger.info(
            "Mortality recorded",
            extra={'batch_id': str(batch_id), 'mortality_count': count}
        )

    @classmethod
    def for_batch(cls, batch_id):
        """Production rows of one batch plus egg and mortality totals."""
        records = cls.list({'batch_id': batch_id})
        totals = records.aggregate(
            total_eggs=Coalesce(Sum('eggs_collected'), 0),
            total_mortality=Coalesce(Sum('mortality_count'), 0),
        )
        return records, totals

    @staticmethod
    def summary():
        """
        Farm-wide production totals.

        Returns:
            dict: total_eggs, total_mortality, total_records,
            average_eggs_per_record and a per-batch breakdown
        """
        totals = ProductionRecord.objects.aggregate(
            total_eggs=Coalesce(Sum('eggs_collected'), 0),
            total_mortality=Coalesce(Sum('mortality_count'), 0),
            total_records=Count('id'),
            average_eggs_per_record=Coalesce(
                Avg('eggs_collected', output_field=FloatField()), Value(0.0)
            ),
        )
        totals['average_eggs_per_record'] = round(totals['average_eggs_per_record'], 2)

        by_batch = (
            ProductionRecord.objects
            .values('batch_id', 'batch__breed', 'batch__housing_unit')
            .annotate(
                total_eggs=Coalesce(Sum('eggs_collected'), 0),
                total_mortality=Coalesce(Sum('mortality_count'), 0),
                records=Count('id'),
            )
            .order_by('-total_eggs')
        )

        return {
            **totals,
            'by_batch': [
                {
                    'batch_id': row['batch_id'],
                    'breed': row['batch__breed'],
                    'housing_unit': row['batch__housing_unit'],
                    'total_eggs': row['total_eggs'],
                    'total_mortality': row['total_mortality'],
                    'records': row['records'],
                }
                for row in by_batch
            ],
        }
