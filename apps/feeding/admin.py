from django.contrib import admin
from apps.feeding.models import FeedRecord


@admin.register(FeedRecord)
class FeedRecordAdmin(admin.ModelAdmin):
    list_display = ['date', 'batch', 'feed_type', 'quantity', 'unit', 'recorded_by']
    list_filter = ['feed_type', 'date']
    search_fields = ['feed_type', 'batch__breed']
    raw_id_fields = ['batch', 'recorded_by']
    date_hierarchy = 'date'
