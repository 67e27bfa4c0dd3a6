"""
Farm stock: feed, medicine and equipment on hand.
"""
from decimal import Decimal
from django.core.validators import MinValueValidator
from django.db import models
from django.db.models import F

from apps.core.models import BaseModel


class ItemType(models.TextChoices):
    FEED = 'Feed', 'Feed'
    MEDICINE = 'Medicine', 'Medicine'
    EQUIPMENT = 'Equipment', 'Equipment'
    OTHER = 'Other', 'Other'


class InventoryQuerySet(models.QuerySet):

    def low_stock(self):
        """Items at or below their minimum stock, evaluated at query time."""
        return self.filter(quantity__lte=F('minimum_stock'))


class InventoryItem(BaseModel):
    item_name = models.CharField(max_length=100)
    item_type = models.CharField(max_length=20, choices=ItemType.choices, db_index=True)
    quantity = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        validators=[MinValueValidator(Decimal('0'))],
    )
    unit = models.CharField(max_length=20, default='kg')
    minimum_stock = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        default=Decimal('10'),
        validators=[MinValueValidator(Decimal('0'))],
        help_text="Quantity at or below which the item is low on stock",
    )
    unit_price = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        null=True,
        blank=True,
        validators=[MinValueValidator(Decimal('0'))],
    )
    supplier = models.CharField(max_length=100, blank=True, default='')

    objects = InventoryQuerySet.as_manager()

    class Meta:
        db_table = 'inventory'
        ordering = ['-updated_at']

    def __str__(self):
        return f"{self.item_name} ({self.quantity} {self.unit})"

    @property
    def is_low_stock(self):
        return self.quantity <= self.minimum_stock
