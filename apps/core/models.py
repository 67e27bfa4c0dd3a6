"""
Core models for the farm API.
Provides BaseModel with UUID primary keys and timestamp fields.
"""
import uuid
from django.db import models


class BaseModel(models.Model):
    """
    Abstract base model with UUID primary key and timestamps.

    Every farm record inherits from this model so ids are opaque and
    never reassigned. Deletes are permanent.
    """
    id = models.UUIDField(
        primary_key=True,
        default=uuid.uuid4,
        editable=False,
        help_text="Unique identifier"
    )

    created_at = models.DateTimeField(
        auto_now_add=True,
        db_index=True,
        help_text="Timestamp when the record was created"
    )

    updated_at = models.DateTimeField(
        auto_now=True,
        db_index=True,
        help_text="Timestamp when the record was last updated"
    )

    class Meta:
        abstract = True
        ordering = ['-created_at']


class RecordedModel(BaseModel):
    """
    Abstract base for operational records entered by a farm user.

    The recording user is kept when possible; deleting a user leaves the
    record in place with ``recorded_by`` cleared.
    """
    date = models.DateField(
        db_index=True,
        help_text="Date the activity took place"
    )

    recorded_by = models.ForeignKey(
        'rbac.User',
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='+',
        help_text="User who entered the record"
    )

    class Meta:
        abstract = True
        ordering = ['-date', '-created_at']
