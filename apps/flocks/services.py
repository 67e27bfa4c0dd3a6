"""
Flock service.
"""
from django.db.models import Count, Q, Sum
from django.db.models.functions import Coalesce

from apps.core.exceptions import NotFound
from apps.core.services import RecordService
from apps.flocks.models import PoultryBatch, FlockStatus


class FlockService(RecordService):
    model = PoultryBatch
    label = 'Flock'
    ordering = ('-created_at',)
    exact_filters = ('status', 'housing_unit')
    text_filters = {'breed': 'breed'}
    date_field = 'date_acquired'
    recorder_field = None

    @classmethod
    def get_detail(cls, pk):
        """Flock with its feeding, production and health records expanded."""
        queryset = cls.get_queryset().prefetch_related(
            'feed_records__recorded_by',
            'production_records__recorded_by',
            'health_records__vet',
        )
        try:
            return queryset.get(pk=pk)
        except PoultryBatch.DoesNotExist:
            raise NotFound('Flock not found')

    @staticmethod
    def summary():
        """
        Flock counts and bird totals.

        Returns:
            dict: total_flocks, active_flocks, total_birds (Active batches
            only) and a per-status breakdown
        """
        totals = PoultryBatch.objects.aggregate(
            total_flocks=Count('id'),
            active_flocks=Count('id', filter=Q(status=FlockStatus.ACTIVE)),
            total_birds=Coalesce(Sum('quantity', filter=Q(status=FlockStatus.ACTIVE)), 0),
        )

        by_status = (
            PoultryBatch.objects.values('status')
            .annotate(count=Count('id'), total_birds=Coalesce(Sum('quantity'), 0))
            .order_by('status')
        )

        return {
            **totals,
            'flocks_by_status': list(by_status),
        }
