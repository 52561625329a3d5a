from micro_obs.infrastructure.clients.catalog.catalog_http_client import CatalogHttpClient

__all__ = ["CatalogHttpClient"]
