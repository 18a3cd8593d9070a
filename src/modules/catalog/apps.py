import threading

from django.apps import AppConfig
from django.conf import settings


class CatalogConfig(AppConfig):
    name = "modules.catalog"
    label = "catalog"

    _context = None
    _context_lock = threading.Lock()

    @property
    def context(self):
        """Process-wide ``CatalogContext``, created on first use."""
        if self._context is None:
            from modules.catalog.context import CatalogContext

            with self._context_lock:
                if self._context is None:
                    self._context = CatalogContext.from_settings(
                        settings.CATALOG_DATABASE_SETTINGS
                    )
        return self._context
