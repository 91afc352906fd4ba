"""
App configuration for Catalog Service.
"""

import logging

from django.apps import AppConfig
from django.conf import settings

logger = logging.getLogger(__name__)


class CatalogServiceConfig(AppConfig):
    """App configuration for CatalogService."""

    name = "CatalogService"
    verbose_name = "Catalog Service"

    def ready(self):
        """Called when Django starts."""
        # Only setup once (avoid duplicate registration)
        if getattr(self, "_initialized", False):
            return
        if getattr(settings, "REGISTER_EVENT_HANDLERS", True):
            from core.infrastructure.event_handlers import register_event_handlers

            register_event_handlers()
        self._initialized = True
        logger.info("Catalog service ready")
