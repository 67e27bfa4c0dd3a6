"""
Sales and expense services.
"""
from decimal import Decimal
from django.db.models import Count, DecimalField, Sum, Value
from django.db.models.functions import Coalesce

from apps.core.services import RecordService
from apps.finance.models import SalesRecord, Expense

CENTS = Decimal('0.01')


def money_sum(field):
    """``SUM(field)`` that is 0 over an empty set."""
    return Coalesce(Sum(field), Value(Decimal('0')), output_field=DecimalField())


class SalesService(RecordService):
    model = SalesRecord
    label = 'Sales record'
    related = ('recorded_by',)
    exact_filters = ('product_type',)
    text_filters = {'customer_name': 'customer_name'}

    @classmethod
    def create(cls, data, principal=None):
        values = dict(data)
        if values.get('total_amount') is None:
            values['total_amount'] = (values['quantity'] * values['unit_price']).quantize(CENTS)
        return super().create(values, principal=principal)

    @classmethod
    def summary(cls, filters=None):
        """
        Revenue totals with a per-product breakdown.

        Args:
            filters: optional start_date / end_date

        Returns:
            dict: total_revenue, total_sales, sales_by_product
        """
        sales = cls.filter_queryset(SalesRecord.objects.all(), filters or {})
        totals = sales.aggregate(total_revenue=money_sum('total_amount'), total_sales=Count('id'))
        by_product = (
            sales.values('product_type')
            .annotate(
                count=Count('id'),
                total_quantity=money_sum('quantity'),
                total_revenue=money_sum('total_amount'),
            )
            .order_by('product_type')
        )
        return {**totals, 'sales_by_product': list(by_product)}


class ExpenseService(RecordService):
    model = Expense
    label = 'Expense'
    related = ('recorded_by',)
    exact_filters = ('category',)
    text_filters = {'search': 'description'}

    @classmethod
    def summary(cls, filters=None):
        """
        Expense totals with a per-category breakdown.

        Returns:
            dict: total_expenses, expense_count, expenses_by_category
        """
        expenses = cls.filter_queryset(Expense.objects.all(), filters or {})
        totals = expenses.aggregate(total_expenses=money_sum('amount'), expense_count=Count('id'))
        by_category = (
            expenses.values('category')
            .annotate(count=Count('id'), total=money_sum('amount'))
            .order_by('-total')
        )
        return {**totals, 'expenses_by_category': list(by_category)}
