"""
Vaccinations, diseases and treatments per batch.
"""
from django.db import models

from apps.core.models import BaseModel


class HealthStatus(models.TextChoices):
    HEALTHY = 'Healthy', 'Healthy'
    UNDER_TREATMENT = 'Under Treatment', 'Under Treatment'
    QUARANTINED = 'Quarantined', 'Quarantined'
    RECOVERED = 'Recovered', 'Recovered'


# Statuses that put a batch on the health alert list
ALERT_STATUSES = (HealthStatus.UNDER_TREATMENT, HealthStatus.QUARANTINED)


class HealthRecordQuerySet(models.QuerySet):

    def alerts(self):
        return self.filter(status__in=ALERT_STATUSES)


class HealthRecord(BaseModel):
    """
    A health observation for a batch.

    ``vet`` is the user who entered the record.
    """

    batch = models.ForeignKey(
        'flocks.PoultryBatch',
        on_delete=models.CASCADE,
        related_name='health_records',
    )
    vaccination_date = models.DateField(null=True, blank=True, db_index=True)
    vaccine_name = models.CharField(max_length=100, blank=True, default='')
    disease = models.CharField(max_length=100, blank=True, default='')
    treatment = models.TextField(blank=True, default='')
    vet = models.ForeignKey(
        'rbac.User',
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='+',
    )
    status = models.CharField(
        max_length=20,
        choices=HealthStatus.choices,
        default=HealthStatus.HEALTHY,
        db_index=True,
    )
    notes = models.TextField(blank=True, default='')

    objects = HealthRecordQuerySet.as_manager()

    class Meta:
        db_table = 'health_records'
        ordering = ['-created_at']

    def __str__(self):
        return f"{self.batch_id} {self.status}"

    @property
    def is_alert(self):
        return self.status in ALERT_STATUSES
