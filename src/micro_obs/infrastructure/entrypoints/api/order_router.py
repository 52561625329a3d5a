from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import JSONResponse

from micro_obs.core.application.ports import OrderStorePort
from micro_obs.core.application.workflows.order.order_builder import OrderBuilder
from micro_obs.core.domain.order.order_marshalling import parse_order_id
from micro_obs.core.exceptions import ParseError
from micro_obs.infrastructure.entrypoints.api.api_envelope import respond
from micro_obs.infrastructure.entrypoints.api.dtos.order_dto import CreateOrderDTO, OrderOutDTO

router = APIRouter()


def get_order_store(request: Request) -> OrderStorePort:
    return request.app.state.order_store


def get_order_builder(request: Request) -> OrderBuilder:
    return request.app.state.order_builder


@router.get("/orders", name="getAllOrders")
async def get_all_orders(orders: OrderStorePort = Depends(get_order_store)) -> JSONResponse:
    found = []
    for order_id in await orders.scan_ids():
        order = await orders.get(order_id)
        if order is not None:
            found.append(order)

    if not found:
        return respond(status.HTTP_404_NOT_FOUND, "no orders present")
    return respond(
        status.HTTP_200_OK,
        "orders retrieved",
        [OrderOutDTO.from_order(order).model_dump() for order in found],
    )


@router.get("/orders/{order_id}", name="getOrder")
async def get_order(order_id: str, orders: OrderStorePort = Depends(get_order_store)) -> JSONResponse:
    try:
        parsed_id = parse_order_id(order_id)
    except ParseError:
        return respond(status.HTTP_400_BAD_REQUEST, f"invalid order ID {order_id}")

    order = await orders.get(parsed_id)
    if order is None:
        return respond(status.HTTP_404_NOT_FOUND, f"order with ID {parsed_id} doesn't exist")
    return respond(status.HTTP_200_OK, "order retrieved", [OrderOutDTO.from_order(order).model_dump()])


@router.post("/orders/create", name="createOrder")
async def create_order(
    payload: CreateOrderDTO, builder: OrderBuilder = Depends(get_order_builder)
) -> JSONResponse:
    """Allocate an id, verify every line against the item service and persist the order.

    Pipeline failures propagate to the ``ApplicationError`` handler, which maps
    them to a status code.
    """
    order = await builder.build(payload.to_lines())
    return respond(
        status.HTTP_201_CREATED,
        f"order {order.id} created",
        [OrderOutDTO.from_order(order).model_dump()],
    )
