"""
Inventory service.
"""
from apps.core.services import RecordService
from apps.inventory.models import InventoryItem


class InventoryService(RecordService):
    model = InventoryItem
    label = 'Inventory item'
    ordering = ('-updated_at',)
    exact_filters = ('item_type',)
    text_filters = {'search': 'item_name'}
    date_field = None
    recorder_field = None

    @classmethod
    def low_stock(cls):
        """Low-stock items, lowest quantity first."""
        return cls.get_queryset().low_stock().order_by('quantity', 'item_name')
