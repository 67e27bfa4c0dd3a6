from django.contrib import admin
from apps.production.models import ProductionRecord


@admin.register(ProductionRecord)
class ProductionRecordAdmin(admin.ModelAdmin):
    list_display = ['date', 'batch', 'eggs_collected', 'mortality_count', 'recorded_by']
    list_filter = ['date']
    raw_id_fields = ['batch', 'recorded_by']
    date_hierarchy = 'date'
