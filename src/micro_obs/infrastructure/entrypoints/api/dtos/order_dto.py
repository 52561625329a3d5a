from pydantic import BaseModel, Field

from micro_obs.core.domain.order import Order, OrderLine


class OrderLineInDTO(BaseModel):
    id: str = Field(pattern=r"^[a-zA-Z0-9]+$")
    qty: int = Field(ge=0)


class CreateOrderDTO(BaseModel):
    items: list[OrderLineInDTO] = []

    def to_lines(self) -> list[OrderLine]:
        return [OrderLine(item_id=item.id, quantity=item.qty) for item in self.items]


class OrderLineOutDTO(BaseModel):
    id: str
    qty: int


class OrderOutDTO(BaseModel):
    id: int
    items: list[OrderLineOutDTO]

    @classmethod
    def from_order(cls, order: Order) -> "OrderOutDTO":
        return cls(
            id=order.id,
            items=[OrderLineOutDTO(id=line.item_id, qty=line.quantity) for line in order.lines],
        )
