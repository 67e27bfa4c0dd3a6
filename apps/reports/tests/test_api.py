"""
Tests for report endpoints and their zero guards.
"""
import pytest
from datetime import date
from decimal import Decimal
from rest_framework import status

from apps.feeding.models import FeedRecord
from apps.finance.models import SalesRecord, Expense
from apps.health.models import HealthRecord
from apps.inventory.models import InventoryItem
from apps.production.models import ProductionRecord
from apps.reports.services import ReportService, ratio


class TestRatio:

    def test_zero_denominator(self):
        assert ratio(10, 0) == 0
        assert ratio(Decimal('5'), Decimal('0'), scale=100) == 0

    def test_rounds_to_two_places(self):
        assert ratio(10, 3) == Decimal('3.33')
        assert ratio(-20, 30, scale=100) == Decimal('-66.67')


@pytest.mark.django_db
class TestProductionReport:

    def test_empty_report(self):
        report = ReportService.production()

        assert report['summary'] == {
            'total_eggs': 0,
            'total_mortality': 0,
            'record_count': 0,
            'average_eggs_per_day': 0,
        }
        assert report['trend'] == []

    def test_totals_and_trend(self, worker_client, flock, worker_user):
        ProductionRecord.objects.create(batch=flock, eggs_collected=90, mortality_count=1, date=date(2024, 2, 2), recorded_by=worker_user)
        ProductionRecord.objects.create(batch=flock, eggs_collected=80, date=date(2024, 2, 1), recorded_by=worker_user)
        ProductionRecord.objects.create(batch=flock, eggs_collected=85, date=date(2024, 2, 1), recorded_by=worker_user)

        response = worker_client.get('/v1/reports/production')

        data = response.data['data']
        assert data['summary']['total_eggs'] == 255
        assert data['summary']['record_count'] == 3
        assert data['summary']['average_eggs_per_day'] == Decimal('85.00')
        assert [row['date'] for row in data['trend']] == [date(2024, 2, 1), date(2024, 2, 2)]
        assert data['trend'][0]['total_eggs'] == 165

    def test_date_range(self, flock, worker_user):
        ProductionRecord.objects.create(batch=flock, eggs_collected=90, date=date(2024, 2, 2), recorded_by=worker_user)
        ProductionRecord.objects.create(batch=flock, eggs_collected=80, date=date(2024, 3, 1), recorded_by=worker_user)

        report = ReportService.production({'start_date': date(2024, 2, 2), 'end_date': date(2024, 2, 2)})

        assert report['summary']['total_eggs'] == 90


@pytest.mark.django_db
class TestFinancialReport:

    def test_zero_revenue_margin(self, manager_user):
        Expense.objects.create(category='Feed', description='Mash', amount=Decimal('500'), date=date(2024, 3, 1), recorded_by=manager_user)

        summary = ReportService.financial()['summary']

        assert summary['total_revenue'] == 0
        assert summary['profit'] == Decimal('-500')
        assert summary['profit_margin'] == 0

    def test_profit_margin(self, manager_client, manager_user):
        SalesRecord.objects.create(product_type='Eggs', quantity=Decimal('100'), unit_price=Decimal('10'), total_amount=Decimal('1000'), date=date(2024, 3, 1), recorded_by=manager_user)
        Expense.objects.create(category='Feed', description='Mash', amount=Decimal('250'), date=date(2024, 3, 1), recorded_by=manager_user)

        data = manager_client.get('/v1/reports/financial').data['data']

        assert data['summary']['profit'] == Decimal('750')
        assert data['summary']['profit_margin'] == Decimal('75.00')
        assert data['revenue_by_product'][0]['product_type'] == 'Eggs'
        assert data['expenses_by_category'][0]['category'] == 'Feed'

    def test_financial_report_needs_reports_page(self, worker_client):
        response = worker_client.get('/v1/reports/financial')

        assert response.status_code == status.HTTP_403_FORBIDDEN

    def test_admin_opens_financial_report(self, admin_client):
        assert admin_client.get('/v1/reports/financial').status_code == status.HTTP_200_OK


@pytest.mark.django_db
class TestPerformanceReport:

    def test_empty_farm(self, vet_client):
        data = vet_client.get('/v1/reports/performance').data['data']

        assert data['flock_metrics']['total_flocks'] == 0
        assert data['production_metrics']['average_eggs_per_day'] == 0
        assert data['feed_metrics']['feed_to_egg_ratio'] == 0
        assert data['inventory_metrics']['low_stock_items'] == 0

    def test_metrics(self, flock, worker_user, vet_user):
        ProductionRecord.objects.create(batch=flock, eggs_collected=200, date=date(2024, 2, 1), recorded_by=worker_user)
        FeedRecord.objects.create(batch=flock, feed_type='Mash', quantity=Decimal('50'), date=date(2024, 2, 1), recorded_by=worker_user)
        HealthRecord.objects.create(batch=flock, vet=vet_user, status='Healthy')
        HealthRecord.objects.create(batch=flock, vet=vet_user, status='Healthy')
        HealthRecord.objects.create(batch=flock, vet=vet_user, status='Under Treatment')
        InventoryItem.objects.create(item_name='Mash', item_type='Feed', quantity=Decimal('10'))

        data = ReportService.performance()

        assert data['flock_metrics']['total_birds'] == 100
        assert data['feed_metrics']['feed_to_egg_ratio'] == Decimal('0.25')
        assert data['health_metrics'] == {
            'healthy': 1, 'under_treatment': 1, 'quarantined': 0, 'recovered': 0,
        }
        assert data['inventory_metrics']['low_stock_items'] == 1


@pytest.mark.django_db
class TestInventoryReport:

    def test_value_ignores_missing_price(self, manager_client):
        InventoryItem.objects.create(item_name='Mash', item_type='Feed', quantity=Decimal('20'), unit_price=Decimal('2.50'))
        InventoryItem.objects.create(item_name='Drinker', item_type='Equipment', quantity=Decimal('4'), minimum_stock=Decimal('1'))
        InventoryItem.objects.create(item_name='Vaccine', item_type='Medicine', quantity=Decimal('2'), unit_price=Decimal('100'))

        data = manager_client.get('/v1/reports/inventory').data['data']

        assert data['summary']['total_items'] == 3
        assert data['summary']['total_value'] == Decimal('250.00')
        assert data['summary']['low_stock_count'] == 1
        assert data['low_stock_items'][0]['item_name'] == 'Vaccine'
        assert len(data['inventory_by_type']) == 3

    def test_item_type_filter(self, manager_client):
        InventoryItem.objects.create(item_name='Mash', item_type='Feed', quantity=Decimal('20'))
        InventoryItem.objects.create(item_name='Vaccine', item_type='Medicine', quantity=Decimal('2'))

        data = manager_client.get('/v1/reports/inventory', {'item_type': 'Feed'}).data['data']

        assert data['summary']['total_items'] == 1
