"""
Django admin configuration for flocks app.
"""
from django.contrib import admin
from apps.flocks.models import PoultryBatch


@admin.register(PoultryBatch)
class PoultryBatchAdmin(admin.ModelAdmin):
    list_display = ['breed', 'quantity', 'age', 'housing_unit', 'status', 'date_acquired']
    list_filter = ['status', 'breed', 'housing_unit']
    search_fields = ['breed', 'housing_unit']
    ordering = ['-created_at']
    readonly_fields = ['created_at', 'updated_at']
