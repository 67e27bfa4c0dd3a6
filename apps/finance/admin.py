from django.contrib import admin
from apps.finance.models import SalesRecord, Expense


@admin.register(SalesRecord)
class SalesRecordAdmin(admin.ModelAdmin):
    list_display = ['date', 'product_type', 'quantity', 'unit_price', 'total_amount', 'customer_name']
    list_filter = ['product_type', 'date']
    search_fields = ['customer_name', 'customer_phone']
    date_hierarchy = 'date'


@admin.register(Expense)
class ExpenseAdmin(admin.ModelAdmin):
    list_display = ['date', 'category', 'description', 'amount']
    list_filter = ['category', 'date']
    search_fields = ['description']
    date_hierarchy = 'date'
