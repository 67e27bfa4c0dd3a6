"""
Aggregate reports over farm records.

Every report is read-only and computed per request. Sums over empty sets
are 0, and ratios with a zero denominator are 0.
"""
from decimal import Decimal, ROUND_HALF_UP
from django.db.models import Count, DecimalField, F, Sum, Value
from django.db.models.functions import Coalesce

from apps.feeding.models import FeedRecord
from apps.finance.models import SalesRecord, Expense
from apps.flocks.services import FlockService
from apps.health.models import HealthRecord, HealthStatus
from apps.inventory.models import InventoryItem
from apps.production.models import ProductionRecord

TWO_PLACES = Decimal('0.01')


def _decimal_sum(expression):
    return Coalesce(Sum(expression), Value(Decimal('0')), output_field=DecimalField())


def ratio(numerator, denominator, scale=1):
    """
    ``numerator / denominator * scale`` rounded to 2 places, or 0 when the
    denominator is 0.
    """
    if not denominator:
        return Decimal('0.00')
    value = Decimal(numerator) / Decimal(denominator) * scale
    return value.quantize(TWO_PLACES, rounding=ROUND_HALF_UP)


def _date_range(queryset, filters, field='date'):
    if filters.get('start_date'):
        queryset = queryset.filter(**{f'{field}__gte': filters['start_date']})
    if filters.get('end_date'):
        queryset = queryset.filter(**{f'{field}__lte': filters['end_date']})
    return queryset


class ReportService:
    """Production, financial, performance and inventory reports."""

    @staticmethod
    def production(filters=None):
        """
        Egg and mortality totals with a per-date trend.

        Args:
            filters: optional start_date, end_date, batch_id

        Returns:
            dict: summary (total_eggs, total_mortality, record_count,
            average_eggs_per_day) and trend sorted by date ascending
        """
        filters = filters or {}
        records = _date_range(ProductionRecord.objects.all(), filters)
        if filters.get('batch_id'):
            records = records.filter(batch_id=filters['batch_id'])

        summary = records.aggregate(
            total_eggs=Coalesce(Sum('eggs_collected'), 0),
            total_mortality=Coalesce(Sum('mortality_count'), 0),
            record_count=Count('id'),
        )
        summary['average_eggs_per_day'] = ratio(summary['total_eggs'], summary['record_count'])

        trend = (
            records.values('date')
            .annotate(
                total_eggs=Coalesce(Sum('eggs_collected'), 0),
                total_mortality=Coalesce(Sum('mortality_count'), 0),
            )
            .order_by('date')
        )

        return {'summary': summary, 'trend': list(trend)}

    @staticmethod
    def financial(filters=None):
        """
        Revenue, expenses, profit and margin.

        ``profit_margin`` is a percentage of revenue, 0 when there is no
        revenue.
        """
        filters = filters or {}
        sales = _date_range(SalesRecord.objects.all(), filters)
        expenses = _date_range(Expense.objects.all(), filters)

        sales_totals = sales.aggregate(
            total_revenue=_decimal_sum('total_amount'),
            sales_count=Count('id'),
        )
        expense_totals = expenses.aggregate(
            total_expenses=_decimal_sum('amount'),
            expense_count=Count('id'),
        )

        revenue = sales_totals['total_revenue']
        profit = revenue - expense_totals['total_expenses']

        revenue_by_product = (
            sales.values('product_type')
            .annotate(revenue=_decimal_sum('total_amount'))
            .order_by('-revenue')
        )
        expenses_by_category = (
            expenses.values('category')
            .annotate(total=_decimal_sum('amount'))
            .order_by('-total')
        )

        return {
            'summary': {
                'total_revenue': revenue,
                'total_expenses': expense_totals['total_expenses'],
                'profit': profit,
                'profit_margin': ratio(profit, revenue, scale=100),
                'sales_count': sales_totals['sales_count'],
                'expense_count': expense_totals['expense_count'],
            },
            'revenue_by_product': list(revenue_by_product),
            'expenses_by_category': list(expenses_by_category),
        }

    @staticmethod
    def performance(filters=None):
        """
        Farm-wide metrics for the dashboard.

        Date filters apply to production and feed records; flock, health
        and inventory figures describe the current state.
        """
        filters = filters or {}
        flocks = FlockService.summary()

        production = _date_range(ProductionRecord.objects.all(), filters).aggregate(
            total_eggs=Coalesce(Sum('eggs_collected'), 0),
            production_days=Count('id'),
        )
        total_eggs = production['total_eggs']

        total_feed = _date_range(FeedRecord.objects.all(), filters).aggregate(
            total=_decimal_sum('quantity')
        )['total']

        batches_by_status = {
            row['status']: row['batches']
            for row in HealthRecord.objects.values('status')
            .annotate(batches=Count('batch_id', distinct=True))
            .order_by()
        }

        return {
            'flock_metrics': {
                'total_flocks': flocks['total_flocks'],
                'active_flocks': flocks['active_flocks'],
                'total_birds': flocks['total_birds'],
            },
            'production_metrics': {
                'total_eggs': total_eggs,
                'production_days': production['production_days'],
                'average_eggs_per_day': ratio(total_eggs, production['production_days']),
            },
            'feed_metrics': {
                'total_feed': total_feed,
                'feed_to_egg_ratio': ratio(total_feed, total_eggs),
            },
            'health_metrics': {
                status.name.lower(): batches_by_status.get(status.value, 0)
                for status in HealthStatus
            },
            'inventory_metrics': {
                'low_stock_items': InventoryItem.objects.low_stock().count(),
            },
        }

    @staticmethod
    def inventory(filters=None):
        """
        Stock value and low-stock items.

        An item without a unit price adds nothing to ``total_value``.
        """
        filters = filters or {}
        items = InventoryItem.objects.all()
        if filters.get('item_type'):
            items = items.filter(item_type=filters['item_type'])

        totals = items.aggregate(
            total_items=Count('id'),
            total_value=_decimal_sum(
                F('quantity') * Coalesce(F('unit_price'), Value(Decimal('0')), output_field=DecimalField())
            ),
        )
        low_stock = items.low_stock().order_by('quantity', 'item_name')

        by_type = (
            items.values('item_type')
            .annotate(item_count=Count('id'), total_quantity=_decimal_sum('quantity'))
            .order_by('item_type')
        )

        return {
            'summary': {
                'total_items': totals['total_items'],
                'total_value': Decimal(totals['total_value']).quantize(TWO_PLACES, rounding=ROUND_HALF_UP),
                'low_stock_count': low_stock.count(),
            },
            'inventory_by_type': list(by_type),
            'low_stock_items': low_stock,
        }
