from micro_obs.core.application.ports.catalog_lookup_port import (
    CatalogEntrySnapshot,
    CatalogLookupPort,
)
from micro_obs.core.application.ports.catalog_store_port import CatalogStorePort
from micro_obs.core.application.ports.order_store_port import OrderStorePort
from micro_obs.core.application.ports.sequence_port import SequencePort

__all__ = [
    "CatalogEntrySnapshot",
    "CatalogLookupPort",
    "CatalogStorePort",
    "OrderStorePort",
    "SequencePort",
]
