"""
Flock (poultry batch) model.
"""
from django.db import models

from apps.core.models import BaseModel


class FlockStatus(models.TextChoices):
    ACTIVE = 'Active', 'Active'
    SOLD = 'Sold', 'Sold'
    DECEASED = 'Deceased', 'Deceased'
    INACTIVE = 'Inactive', 'Inactive'


class PoultryBatch(BaseModel):
    """
    A batch of birds kept together.

    ``quantity`` is the live bird count. Production records with mortality
    decrement it, never below zero.
    """

    breed = models.CharField(max_length=100, help_text="Breed, e.g. Layer, Broiler, Kienyeji")
    quantity = models.PositiveIntegerField(help_text="Live bird count")
    age = models.PositiveIntegerField(help_text="Age in weeks")
    date_acquired = models.DateField(help_text="Date the batch arrived on the farm")
    housing_unit = models.CharField(max_length=100, blank=True, default='', db_index=True)
    status = models.CharField(
        max_length=20,
        choices=FlockStatus.choices,
        default=FlockStatus.ACTIVE,
        db_index=True,
    )

    class Meta:
        db_table = 'poultry_batches'
        ordering = ['-created_at']
        verbose_name = 'poultry batch'
        verbose_name_plural = 'poultry batches'

    def __str__(self):
        return f"{self.breed} ({self.quantity}) - {self.housing_unit or 'unhoused'}"
