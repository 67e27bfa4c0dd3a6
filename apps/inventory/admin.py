from django.contrib import admin
from apps.inventory.models import InventoryItem


@admin.register(InventoryItem)
class InventoryItemAdmin(admin.ModelAdmin):
    list_display = ['item_name', 'item_type', 'quantity', 'unit', 'minimum_stock', 'is_low_stock', 'updated_at']
    list_filter = ['item_type']
    search_fields = ['item_name', 'supplier']

    @admin.display(boolean=True, description='Low stock')
    def is_low_stock(self, obj):
        return obj.is_low_stock
