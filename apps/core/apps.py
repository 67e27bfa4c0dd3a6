from django.apps import AppConfig
from django.conf import settings
import logging

logger = logging.getLogger(__name__)


class CoreConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'apps.core'
    verbose_name = 'Core'

    def ready(self):
        """
        Warn at startup about configuration that breaks requests later.

        Login and registration raise ConfigError while JWT_SECRET_KEY is
        unset; the warning makes that visible before the first request.
        """
        if not getattr(settings, 'JWT_SECRET_KEY', None):
            logger.warning(
                "JWT_SECRET_KEY is not set; token issuance will fail. "
                "Generate one with: python -c \"import secrets; print(secrets.token_urlsafe(32))\""
            )
