"""template-manager: a catalog of reusable HTML/text snippet templates."""

__version__ = "0.1.0"

from template_manager.catalog import Catalog, TemplateEntry, load_catalog, load_catalog_sync

__all__ = ["Catalog", "TemplateEntry", "load_catalog", "load_catalog_sync", "__version__"]
