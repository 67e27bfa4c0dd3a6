"""
Django admin configuration for RBAC app.
"""
from django.contrib import admin
from .models import User


@admin.register(User)
class UserAdmin(admin.ModelAdmin):
    """
    Admin for the farm User model.

    Passwords are never edited here; use the API or ``changepassword``.
    """
    list_display = ['email', 'name', 'role', 'is_active', 'is_superuser', 'last_login_at', 'created_at']
    list_filter = ['role', 'is_active', 'is_superuser', 'created_at']
    search_fields = ['email', 'name', 'phone']
    ordering = ['-created_at']

    fieldsets = (
        (None, {
            'fields': ('email', 'name', 'phone')
        }),
        ('Access', {
            'fields': ('role', 'is_active', 'is_superuser')
        }),
        ('Activity', {
            'fields': ('last_login_at', 'created_at', 'updated_at')
        }),
    )

    readonly_fields = ['created_at', 'updated_at', 'last_login_at']
