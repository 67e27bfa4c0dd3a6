"""
Shared record service for the farm resources.

Each resource subclasses :class:`RecordService` and declares its model,
which relations to expand, how lists are filtered and ordered, and which
field stores the recording user. Views never build querysets themselves.
"""
import logging
from django.db import transaction

from apps.core.exceptions import NotFound

logger = logging.getLogger(__name__)


class RecordService:
    """
    Uniform create / list / get / update / delete over one model.

    Class attributes:
        model: Django model class
        label: human-readable name used in messages ("Flock")
        related: relations joined with select_related for expansion
        ordering: list ordering
        exact_filters: query params applied as exact matches
        text_filters: query param -> field, matched case-insensitively
        date_field: field used by start_date/end_date, or None
        recorder_field: FK set to the principal on create, or None
    """

    model = None
    label = 'Record'
    related = ()
    ordering = ('-date', '-created_at')
    exact_filters = ()
    text_filters = {}
    date_field = 'date'
    recorder_field = 'recorded_by'

    @classmethod
    def get_queryset(cls):
        return cls.model.objects.select_related(*cls.related)

    @classmethod
    def filter_queryset(cls, queryset, filters):
        """Apply validated list filters to ``queryset``."""
        for name in cls.exact_filters:
            value = filters.get(name)
            if value not in (None, ''):
                queryset = queryset.filter(**{name: value})

        for param, field in cls.text_filters.items():
            value = filters.get(param)
            if value:
                queryset = queryset.filter(**{f'{field}__icontains': value})

        if cls.date_field:
            if filters.get('start_date'):
                queryset = queryset.filter(**{f'{cls.date_field}__gte': filters['start_date']})
            if filters.get('end_date'):
                queryset = queryset.filter(**{f'{cls.date_field}__lte': filters['end_date']})

        return queryset

    @classmethod
    def list(cls, filters=None):
        """
        List records matching ``filters``.

        Args:
            filters: Dict of validated query parameters

        Returns:
            QuerySet: Filtered records with relations expanded
        """
        queryset = cls.filter_queryset(cls.get_queryset(), filters or {})
        return queryset.order_by(*cls.ordering)

    @classmethod
    def get_by_id(cls, pk):
        try:
            return cls.get_queryset().get(pk=pk)
        except cls.model.DoesNotExist:
            raise NotFound(f"{cls.label} not found")

    @classmethod
    @transaction.atomic
    def create(cls, data, principal=None):
        """
        Persist a validated record and return it with relations expanded.

        The recording user is taken from ``principal``, never from input.
        """
        values = dict(data)
        if cls.recorder_field and principal is not None:
            values[f'{cls.recorder_field}_id'] = principal.id

        instance = cls.model.objects.create(**values)

        logger.info(
            f"{cls.label} created",
            extra={
                'record_id': str(instance.pk),
                'model': cls.model.__name__,
                'user_id': str(principal.id) if principal else None,
            }
        )
        return cls.get_by_id(instance.pk)

    @classmethod
    @transaction.atomic
    def update(cls, pk, data):
        """Apply a partial update; only the provided fields change."""
        instance = cls.get_by_id(pk)

        for field, value in data.items():
            setattr(instance, field, value)

        instance.save(update_fields=[*data.keys(), 'updated_at'])

        logger.info(
            f"{cls.label} updated",
            extra={
                'record_id': str(instance.pk),
                'model': cls.model.__name__,
                'fields': sorted(data.keys()),
            }
        )
        return cls.get_by_id(pk)

    @classmethod
    def delete(cls, pk):
        instance = cls.get_by_id(pk)
        instance.delete()

        logger.info(
            f"{cls.label} deleted",
            extra={'record_id': str(pk), 'model': cls.model.__name__}
        )
