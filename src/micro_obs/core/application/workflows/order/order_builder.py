"""Order construction pipeline: Allocate -> Verify each line -> Persist.

The builder never retries and never rolls back. An allocated order id is
consumed even when a later step fails, and nothing is persisted unless every
line passed verification.
"""

from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from typing import Any

from micro_obs.core.application.ports import CatalogLookupPort, OrderStorePort, SequencePort
from micro_obs.core.application.verification import verify_stock
from micro_obs.core.application.workflows.order.order_build_state import OrderBuildState
from micro_obs.core.domain.order import Order, OrderLine
from micro_obs.core.exceptions import ApplicationError, EmptyOrderError, PersistenceError
from micro_obs.infrastructure.observability.logger_factory_service import get_logger
from micro_obs.infrastructure.observability.metrics_service import ORDERS_BUILT_TOTAL
from micro_obs.infrastructure.observability.tracing_setup import trace_operation

logger = get_logger("order_builder")

TransitionListener = Callable[[OrderBuildState, dict[str, Any]], None]


@dataclass
class _BuildRun:
    """Tracks the state of one ``build`` call."""

    listener: TransitionListener | None
    state: OrderBuildState = OrderBuildState.START
    details: dict[str, Any] = field(default_factory=dict)

    def advance(self, state: OrderBuildState, **details: Any) -> None:
        self.state = state
        self.details.update(details)
        logger.debug("Order build transition", build_state=state.value, **self.details)
        if self.listener is not None:
            self.listener(state, dict(self.details))

    def fail(self, exc: ApplicationError) -> None:
        exc.context.setdefault("state", self.state.value)
        for key, value in self.details.items():
            exc.context.setdefault(key, value)
        self.advance(OrderBuildState.FAILED, reason=type(exc).__name__)


class OrderBuilder:
    """Builds verified orders from requested lines."""

    def __init__(
        self,
        sequence: SequencePort,
        catalog: CatalogLookupPort,
        orders: OrderStorePort,
        on_transition: TransitionListener | None = None,
    ) -> None:
        self._sequence = sequence
        self._catalog = catalog
        self._orders = orders
        self._on_transition = on_transition

    @trace_operation("workflow.order.build")
    async def build(self, lines: Sequence[OrderLine]) -> Order:
        run = _BuildRun(listener=self._on_transition)
        try:
            if not lines:
                raise EmptyOrderError()
            order_id = await self._step_1_allocate(run)
            await self._step_2_verify(run, lines)
            order = Order(id=order_id, lines=tuple(lines))
            await self._step_3_persist(run, order)
        except ApplicationError as exc:
            run.fail(exc)
            ORDERS_BUILT_TOTAL.labels(outcome=type(exc).__name__).inc()
            logger.warning(
                "Order build failed",
                error_type=type(exc).__name__,
                error_details=str(exc),
                **exc.context,
            )
            raise

        run.advance(OrderBuildState.DONE)
        ORDERS_BUILT_TOTAL.labels(outcome="created").inc()
        logger.info("Order built", order_id=order.id, line_count=len(order.lines))
        return order

    # ── Steps ────────────────────────────────────────────────────────

    async def _step_1_allocate(self, run: _BuildRun) -> int:
        run.advance(OrderBuildState.ALLOCATING)
        order_id = await self._sequence.next()
        run.details["order_id"] = order_id
        return order_id

    async def _step_2_verify(self, run: _BuildRun, lines: Sequence[OrderLine]) -> None:
        for index, line in enumerate(lines):
            run.advance(OrderBuildState.VERIFYING, line_index=index, item_id=line.item_id)
            entry = await self._catalog.fetch(line.item_id)
            verify_stock(entry, line.quantity)

    async def _step_3_persist(self, run: _BuildRun, order: Order) -> None:
        run.details.pop("line_index", None)
        run.details.pop("item_id", None)
        run.advance(OrderBuildState.PERSISTING)
        duplicates = order.duplicate_item_ids()
        if duplicates:
            logger.warning(
                "Order has repeated item ids, later lines overwrite earlier ones in storage",
                order_id=order.id,
                item_ids=duplicates,
            )
        try:
            await self._orders.save(order)
        except PersistenceError:
            raise
        except ApplicationError as exc:
            raise PersistenceError(str(exc), context=dict(exc.context)) from exc
