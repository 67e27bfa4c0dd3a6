"""
Egg production and mortality records.
"""
from django.db import models

from apps.core.models import RecordedModel


class ProductionRecord(RecordedModel):
    """
    Eggs collected from a batch on a date, with birds lost that day.

    ``mortality_count`` keeps the number reported even when the batch
    quantity could only be reduced to zero.
    """

    batch = models.ForeignKey(
        'flocks.PoultryBatch',
        on_delete=models.CASCADE,
        related_name='production_records',
    )
    eggs_collected = models.PositiveIntegerField()
    mortality_count = models.PositiveIntegerField(default=0)
    notes = models.TextField(blank=True, default='')

    class Meta(RecordedModel.Meta):
        db_table = 'production_records'
        indexes = [
            models.Index(fields=['batch', 'date'], name='production_batch_date_idx'),
        ]

    def __str__(self):
        return f"{self.eggs_collected} eggs on {self.date}"
