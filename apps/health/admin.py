from django.contrib import admin
from apps.health.models import HealthRecord


@admin.register(HealthRecord)
class HealthRecordAdmin(admin.ModelAdmin):
    list_display = ['batch', 'status', 'disease', 'vaccine_name', 'vaccination_date', 'vet', 'created_at']
    list_filter = ['status']
    search_fields = ['disease', 'vaccine_name']
    raw_id_fields = ['batch', 'vet']
