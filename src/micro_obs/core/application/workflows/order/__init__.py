from micro_obs.core.application.workflows.order.order_build_state import OrderBuildState
from micro_obs.core.application.workflows.order.order_builder import OrderBuilder

__all__ = ["OrderBuildState", "OrderBuilder"]
