"""
Users, roles and the access policy.
"""
from django.apps import AppConfig


class RbacConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'apps.rbac'
    verbose_name = 'Users & Roles'

    def ready(self):
        # Importing the policy validates its tables
        from apps.rbac import policy  # noqa: F401
