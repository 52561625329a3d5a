from micro_obs.core.domain.order.order import Order
from micro_obs.core.domain.order.order_line import OrderLine

__all__ = ["Order", "OrderLine"]
