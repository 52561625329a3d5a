from micro_obs.infrastructure.configuration.item_settings import ItemServiceSettings
from micro_obs.infrastructure.configuration.order_settings import OrderServiceSettings

__all__ = ["ItemServiceSettings", "OrderServiceSettings"]
