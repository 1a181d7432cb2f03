"""Order pricing and lifecycle rules"""

from dataclasses import dataclass
from datetime import date
from typing import Dict, Iterable, Tuple

from ..value_objects.money import Money
from ..enums import OrderStatus, ShippingMethod


SHIPPING_COSTS_CENTS: Dict[ShippingMethod, int] = {
    ShippingMethod.STANDARD: 599,
    ShippingMethod.EXPRESS: 1599,
    ShippingMethod.OVERNIGHT: 2999,
    ShippingMethod.FREE_SHIPPING: 0,
}

ALLOWED_TRANSITIONS: Dict[OrderStatus, Tuple[OrderStatus, ...]] = {
    OrderStatus.PAYMENT_CONFIRMED: (OrderStatus.PROCESSING, OrderStatus.CANCELLED),
    OrderStatus.PROCESSING: (OrderStatus.SHIPPED, OrderStatus.CANCELLED),
    OrderStatus.SHIPPED: (OrderStatus.DELIVERED,),
    OrderStatus.DELIVERED: (),
    OrderStatus.CANCELLED: (),
}


class InvalidOrderTransition(ValueError):
    def __init__(self, current: OrderStatus, requested: OrderStatus):
        super().__init__(f"Cannot move order from {current.value} to {requested.value}")
        self.current = current
        self.requested = requested


def ensure_transition(current: OrderStatus, requested: OrderStatus) -> None:
    """Business logic: only forward moves along the lifecycle, or cancellation before shipping"""
    if requested not in ALLOWED_TRANSITIONS[current]:
        raise InvalidOrderTransition(current, requested)


@dataclass(frozen=True)
class OrderLine:
    unit_price: Money
    quantity: int

    @property
    def total(self) -> Money:
        return self.unit_price.times(self.quantity)


@dataclass(frozen=True)
class OrderTotals:
    subtotal: Money
    tax: Money
    shipping: Money

    @property
    def total(self) -> Money:
        return self.subtotal + self.tax + self.shipping


def shipping_cost(method: ShippingMethod, currency: str = "USD") -> Money:
    return Money.from_cents(SHIPPING_COSTS_CENTS[method], currency)


def price_order(
    lines: Iterable[OrderLine],
    method: ShippingMethod,
    tax_rate: float,
    currency: str = "USD",
) -> OrderTotals:
    """Price one seller's share of a checkout."""
    subtotal = Money.from_cents(0, currency)
    for line in lines:
        subtotal = subtotal + line.total
    return OrderTotals(
        subtotal=subtotal,
        tax=subtotal.percent(tax_rate),
        shipping=shipping_cost(method, currency),
    )


def order_number_prefix(day: date) -> str:
    return f"ORD-{day:%Y%m%d}-"


def format_order_number(day: date, sequence: int) -> str:
    return f"{order_number_prefix(day)}{sequence:06d}"
