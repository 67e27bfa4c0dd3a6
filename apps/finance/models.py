"""
Sales and expense records.

Financial rows keep their recording user: a user with recorded sales or
expenses cannot be deleted until those rows are.
"""
from decimal import Decimal
from django.core.validators import MinValueValidator
from django.db import models

from apps.core.models import RecordedModel

NON_NEGATIVE = [MinValueValidator(Decimal('0'))]


class ProductType(models.TextChoices):
    EGGS = 'Eggs', 'Eggs'
    BIRDS = 'Birds', 'Birds'
    MANURE = 'Manure', 'Manure'
    OTHER = 'Other', 'Other'


class ExpenseCategory(models.TextChoices):
    FEED = 'Feed', 'Feed'
    MEDICINE = 'Medicine', 'Medicine'
    LABOR = 'Labor', 'Labor'
    EQUIPMENT = 'Equipment', 'Equipment'
    UTILITIES = 'Utilities', 'Utilities'
    MAINTENANCE = 'Maintenance', 'Maintenance'
    OTHER = 'Other', 'Other'


class FinancialRecord(RecordedModel):
    recorded_by = models.ForeignKey(
        'rbac.User',
        on_delete=models.PROTECT,
        null=True,
        blank=True,
        related_name='+',
        help_text="User who entered the record"
    )
    notes = models.TextField(blank=True, default='')

    class Meta(RecordedModel.Meta):
        abstract = True


class SalesRecord(FinancialRecord):
    product_type = models.CharField(max_length=20, choices=ProductType.choices, db_index=True)
    quantity = models.DecimalField(max_digits=10, decimal_places=2, validators=NON_NEGATIVE)
    unit_price = models.DecimalField(max_digits=10, decimal_places=2, validators=NON_NEGATIVE)
    total_amount = models.DecimalField(max_digits=12, decimal_places=2, validators=NON_NEGATIVE)
    customer_name = models.CharField(max_length=100, blank=True, default='')
    customer_phone = models.CharField(max_length=20, blank=True, default='')

    class Meta(FinancialRecord.Meta):
        db_table = 'sales_records'

    def __str__(self):
        return f"{self.product_type} {self.total_amount} on {self.date}"


class Expense(FinancialRecord):
    category = models.CharField(max_length=20, choices=ExpenseCategory.choices, db_index=True)
    description = models.CharField(max_length=255)
    amount = models.DecimalField(max_digits=12, decimal_places=2, validators=NON_NEGATIVE)

    class Meta(FinancialRecord.Meta):
        db_table = 'expenses'

    def __str__(self):
        return f"{self.category} {self.amount} on {self.date}"
