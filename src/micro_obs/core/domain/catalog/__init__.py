from micro_obs.core.domain.catalog.catalog_entry import CatalogEntry, identifier_for

__all__ = ["CatalogEntry", "identifier_for"]
