"""
Feed consumption records.
"""
from decimal import Decimal
from django.core.validators import MinValueValidator
from django.db import models

from apps.core.models import RecordedModel


class FeedRecord(RecordedModel):
    """Feed given to a batch on a date."""

    batch = models.ForeignKey(
        'flocks.PoultryBatch',
        on_delete=models.CASCADE,
        related_name='feed_records',
    )
    feed_type = models.CharField(max_length=100, help_text="e.g. Layers Mash, Growers Pellets")
    quantity = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        validators=[MinValueValidator(Decimal('0'))],
    )
    unit = models.CharField(max_length=20, default='kg')

    class Meta(RecordedModel.Meta):
        db_table = 'feed_records'
        indexes = [
            models.Index(fields=['batch', 'date'], name='feed_batch_date_idx'),
        ]

    def __str__(self):
        return f"{self.feed_type} {self.quantity}{self.unit} on {self.date}"
