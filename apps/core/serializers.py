"""
Base serializers for record input and list filters.
"""
from rest_framework import serializers

from apps.core.exceptions import ValidationError


class RecordInputSerializer(serializers.ModelSerializer):
    """
    Validates create and partial update payloads.

    Fields named in ``create_only_fields`` (e.g. the batch a record belongs
    to) are accepted on create and ignored on update.
    """

    create_only_fields = ()

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        if self.partial:
            for name in self.create_only_fields:
                self.fields.pop(name, None)


class DateRangeFilterSerializer(serializers.Serializer):
    """Inclusive ``start_date`` / ``end_date`` query filters."""

    start_date = serializers.DateField(required=False)
    end_date = serializers.DateField(required=False)

    def validate(self, attrs):
        start, end = attrs.get('start_date'), attrs.get('end_date')
        if start and end and start > end:
            raise serializers.ValidationError({'end_date': 'end_date must not be before start_date'})
        return attrs


class RecordFilterSerializer(DateRangeFilterSerializer):
    """Common list filters for batch records: batch and date range."""

    batch_id = serializers.UUIDField(required=False)


def validate_input(serializer_class, data, partial=False, context=None):
    """
    Run ``serializer_class`` over ``data`` and return validated data.

    Raises:
        ValidationError: listing every missing or invalid field
    """
    serializer = serializer_class(data=data, partial=partial, context=context or {})
    if not serializer.is_valid():
        fields = ', '.join(serializer.errors.keys())
        raise ValidationError(
            f"Missing or invalid fields: {fields}",
            details=serializer.errors,
        )
    return serializer.validated_data
