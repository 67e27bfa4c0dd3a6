"""
Tests for inventory endpoints and the low-stock predicate.
"""
import pytest
from decimal import Decimal
from rest_framework import status

from apps.inventory.models import InventoryItem


def make_item(name, quantity, minimum_stock=Decimal('10'), item_type='Feed', unit_price=None):
    return InventoryItem.objects.create(
        item_name=name,
        item_type=item_type,
        quantity=Decimal(quantity),
        minimum_stock=minimum_stock,
        unit_price=unit_price,
    )


@pytest.mark.django_db
class TestLowStock:

    def test_boundary_is_inclusive(self):
        at_minimum = make_item('Layers Mash', '10')
        above = make_item('Growers Pellets', '11')

        low = list(InventoryItem.objects.low_stock())

        assert at_minimum in low
        assert above not in low
        assert at_minimum.is_low_stock
        assert not above.is_low_stock

    def test_alert_endpoint_orders_by_quantity(self, manager_client):
        make_item('Vaccine', '3', item_type='Medicine')
        make_item('Mash', '0')
        make_item('Drinkers', '50', item_type='Equipment')

        response = manager_client.get('/v1/inventory/alerts/low-stock')

        assert [i['item_name'] for i in response.data['data']] == ['Mash', 'Vaccine']
        assert all(i['is_low_stock'] for i in response.data['data'])

    def test_update_moves_item_out_of_low_stock(self, manager_client):
        item = make_item('Mash', '5')

        manager_client.put(f'/v1/inventory/{item.id}', {'quantity': '40'}, format='json')

        assert manager_client.get('/v1/inventory/alerts/low-stock').data['count'] == 0


@pytest.mark.django_db
class TestInventoryCrud:

    def test_create_defaults(self, manager_client):
        response = manager_client.post('/v1/inventory/', {
            'item_name': 'Layers Mash',
            'item_type': 'Feed',
            'quantity': '120',
        }, format='json')

        assert response.status_code == status.HTTP_201_CREATED
        assert response.data['data']['unit'] == 'kg'
        assert response.data['data']['minimum_stock'] == Decimal('10.00')

    def test_worker_cannot_create(self, worker_client):
        response = worker_client.post('/v1/inventory/', {
            'item_name': 'Mash', 'item_type': 'Feed', 'quantity': '1',
        }, format='json')

        assert response.status_code == status.HTTP_403_FORBIDDEN

    def test_search_and_type_filters(self, manager_client):
        make_item('Layers Mash', '100')
        make_item('Newcastle vaccine', '20', item_type='Medicine')

        assert manager_client.get('/v1/inventory/', {'search': 'MASH'}).data['count'] == 1
        assert manager_client.get('/v1/inventory/', {'item_type': 'Medicine'}).data['count'] == 1

    def test_manager_cannot_delete(self, manager_client):
        item = make_item('Mash', '5')

        response = manager_client.delete(f'/v1/inventory/{item.id}')

        assert response.status_code == status.HTTP_403_FORBIDDEN
