"""
In-app notifications. Rows are stored only; nothing is pushed.
"""
from django.db import models

from apps.core.models import BaseModel


class NotificationType(models.TextChoices):
    INFO = 'Info', 'Info'
    WARNING = 'Warning', 'Warning'
    ALERT = 'Alert', 'Alert'
    SUCCESS = 'Success', 'Success'


class Notification(BaseModel):
    user = models.ForeignKey(
        'rbac.User',
        on_delete=models.CASCADE,
        related_name='notifications',
    )
    message = models.TextField()
    type = models.CharField(
        max_length=20,
        choices=NotificationType.choices,
        default=NotificationType.INFO,
    )
    is_read = models.BooleanField(default=False, db_index=True)

    class Meta:
        db_table = 'notifications'
        ordering = ['-created_at']
        indexes = [
            models.Index(fields=['user', 'is_read'], name='notification_user_read_idx'),
        ]

    def __str__(self):
        return f"{self.type}: {self.message[:50]}"
