"""Shopping cart and checkout use cases"""

import logging
from datetime import date, datetime
from typing import Dict, List
from uuid import UUID, uuid4

from sqlalchemy import func
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from ...core.config import settings
from ...core.exceptions import BadRequestError, NotFoundError
from ...domain.entities.order import OrderLine, format_order_number, order_number_prefix, price_order
from ...domain.enums import OrderStatus
from ...domain.repositories.unit_of_work import IUnitOfWork
from ...domain.value_objects.actor import ActorPayload
from ...domain.value_objects.money import Money
from ...infrastructure.orm.shop_model import (
    ShopAddressModel, ShopCartItemModel, ShopOrderItemModel, ShopOrderModel, ShopOrderStatusHistoryModel,
    ShopProductModel
)
from ..dtos.shop_dtos import (
    CartDto, CartItemCreateDto, CartItemDto, CartItemUpdateDto, CheckoutDto, CheckoutResponseDto
)
from .common import ensure_owner, get_or_404
from .product_use_cases import get_listed_product

logger = logging.getLogger(__name__)

MAX_CHECKOUT_ATTEMPTS = 3


def _cart_item_dto(item: ShopCartItemModel) -> CartItemDto:
    unit_price = Money.from_cents(item.product.price_cents, item.product.currency)
    return CartItemDto(
        id=item.id,
        product_id=item.product_id,
        product_name=item.product.name,
        unit_price=float(unit_price),
        quantity=item.quantity,
        line_total=float(unit_price.times(item.quantity)),
    )


def last_order_sequence(session: Session, day: date) -> int:
    """Highest order sequence number already used on `day`, 0 when none"""
    prefix = order_number_prefix(day)
    last = session.query(func.max(ShopOrderModel.order_number)).filter(
        ShopOrderModel.order_number.like(f"{prefix}%")
    ).scalar()
    return int(last[len(prefix):]) if last else 0


def _ensure_in_stock(product, quantity: int) -> None:
    if quantity > product.stock_quantity:
        raise BadRequestError(
            f"Only {product.stock_quantity} units of '{product.name}' are in stock"
        )


class GetCartUseCase:

    def __init__(self, unit_of_work: IUnitOfWork):
        self.unit_of_work = unit_of_work

    async def execute(self, actor: ActorPayload) -> CartDto:
        async with self.unit_of_work:
            items = self.unit_of_work.session.query(ShopCartItemModel).filter(
                ShopCartItemModel.customer_id == actor.id
            ).order_by(ShopCartItemModel.created_at.asc()).all()

            lines = [_cart_item_dto(item) for item in items]
            subtotal = Money.from_cents(0, settings.CURRENCY)
            for item in items:
                subtotal = subtotal + Money.from_cents(item.product.price_cents, settings.CURRENCY).times(item.quantity)
            return CartDto(items=lines, subtotal=float(subtotal), currency=settings.CURRENCY)


class AddCartItemUseCase:
    """Add a product to the cart, merging with an existing line"""

    def __init__(self, unit_of_work: IUnitOfWork):
        self.unit_of_work = unit_of_work

    async def execute(self, actor: ActorPayload, request: CartItemCreateDto) -> CartItemDto:
        async with self.unit_of_work:
            session = self.unit_of_work.session
            product = get_listed_product(session, request.product_id)
            item = session.query(ShopCartItemModel).filter(
                ShopCartItemModel.customer_id == actor.id,
                ShopCartItemModel.product_id == product.id
            ).first()

            quantity = request.quantity + (item.quantity if item else 0)
            _ensure_in_stock(product, quantity)

            if item:
                item.quantity = quantity
            else:
                item = ShopCartItemModel(customer_id=actor.id, product_id=product.id, quantity=quantity)
                session.add(item)
            await self.unit_of_work.commit()
            return _cart_item_dto(item)


class UpdateCartItemUseCase:

    def __init__(self, unit_of_work: IUnitOfWork):
        self.unit_of_work = unit_of_work

    async def execute(self, actor: ActorPayload, item_id: UUID, request: CartItemUpdateDto) -> CartItemDto:
        async with self.unit_of_work:
            item = get_or_404(self.unit_of_work.session, ShopCartItemModel, item_id, "Cart item")
            ensure_owner(actor, item.customer_id, "Cart item")
            _ensure_in_stock(item.product, request.quantity)
            item.quantity = request.quantity
            await self.unit_of_work.commit()
            return _cart_item_dto(item)


class RemoveCartItemUseCase:

    def __init__(self, unit_of_work: IUnitOfWork):
        self.unit_of_work = unit_of_work

    async def execute(self, actor: ActorPayload, item_id: UUID) -> None:
        async with self.unit_of_work:
            session = self.unit_of_work.session
            item = get_or_404(session, ShopCartItemModel, item_id, "Cart item")
            ensure_owner(actor, item.customer_id, "Cart item")
            session.delete(item)
            await self.unit_of_work.commit()


class CheckoutUseCase:
    """
    Turn the customer's cart into orders, one per seller.

    All orders of a checkout share a transaction id. Stock is reserved, the
    payment is recorded as confirmed and the cart is emptied in the same
    database transaction; any failure leaves the cart untouched. A checkout
    that loses an order number to a concurrent one is retried from scratch.
    """

    def __init__(self, unit_of_work: IUnitOfWork):
        self.unit_of_work = unit_of_work

    async def execute(self, actor: ActorPayload, request: CheckoutDto) -> CheckoutResponseDto:
        for attempt in range(1, MAX_CHECKOUT_ATTEMPTS + 1):
            try:
                return await self._place_orders(actor, request)
            except IntegrityError as e:
                if "order_number" not in str(e.orig) or attempt == MAX_CHECKOUT_ATTEMPTS:
                    raise
                logger.warning(
                    "Order number taken by a concurrent checkout of customer %s, retrying (attempt %d)",
                    actor.id, attempt
                )

    async def _place_orders(self, actor: ActorPayload, request: CheckoutDto) -> CheckoutResponseDto:
        async with self.unit_of_work:
            session = self.unit_of_work.session
            items = session.query(ShopCartItemModel).filter(
                ShopCartItemModel.customer_id == actor.id
            ).order_by(ShopCartItemModel.created_at.asc()).all()
            if not items:
                raise BadRequestError("Cart is empty")

            address = session.query(ShopAddressModel).filter(
                ShopAddressModel.id == request.address_id,
                ShopAddressModel.customer_id == actor.id,
                ShopAddressModel.deleted_at.is_(None)
            ).first()
            if not address:
                raise NotFoundError("Address", request.address_id)

            by_seller: Dict[UUID, List[ShopCartItemModel]] = {}
            for item in items:
                product = item.product
                if not product.is_active or product.is_deleted:
                    raise BadRequestError(f"Product '{product.name}' is no longer available")
                _ensure_in_stock(product, item.quantity)
                by_seller.setdefault(product.seller_id, []).append(item)

            priced = []
            grand_total = Money.from_cents(0, settings.CURRENCY)
            for seller_id, seller_items in by_seller.items():
                lines = [
                    OrderLine(Money.from_cents(item.product.price_cents, settings.CURRENCY), item.quantity)
                    for item in seller_items
                ]
                totals = price_order(lines, request.shipping_method, settings.TAX_RATE, settings.CURRENCY)
                grand_total = grand_total + totals.total
                priced.append((seller_id, seller_items, totals))

            if grand_total.to_cents() < settings.MIN_ORDER_TOTAL_CENTS:
                minimum = Money.from_cents(settings.MIN_ORDER_TOTAL_CENTS, settings.CURRENCY)
                raise BadRequestError(f"Order total must be at least {minimum}")

            now = datetime.utcnow()
            sequence = last_order_sequence(session, now.date())
            transaction_id = uuid4()

            order_ids = []
            for seller_id, seller_items, totals in priced:
                sequence += 1
                order = ShopOrderModel(
                    customer_id=actor.id,
                    seller_id=seller_id,
                    order_number=format_order_number(now.date(), sequence),
                    checkout_transaction_id=transaction_id,
                    status=OrderStatus.PAYMENT_CONFIRMED.value,
                    shipping_method=request.shipping_method.value,
                    subtotal_cents=totals.subtotal.to_cents(),
                    tax_cents=totals.tax.to_cents(),
                    shipping_cents=totals.shipping.to_cents(),
                    total_cents=totals.total.to_cents(),
                    currency=settings.CURRENCY,
                    delivery_recipient_name=address.recipient_name,
                    delivery_phone=address.phone,
                    delivery_address_line1=address.address_line1,
                    delivery_address_line2=address.address_line2,
                    delivery_city=address.city,
                    delivery_state_province=address.state_province,
                    delivery_postal_code=address.postal_code,
                    delivery_country=address.country,
                    payment_confirmed_at=now,
                )
                session.add(order)
                session.flush()

                for item in seller_items:
                    product = item.product
                    session.add(ShopOrderItemModel(
                        order_id=order.id,
                        product_id=product.id,
                        product_name=product.name,
                        quantity=item.quantity,
                        unit_price_cents=product.price_cents,
                    ))
                    reserved = session.query(ShopProductModel).filter(
                        ShopProductModel.id == product.id,
                        ShopProductModel.stock_quantity >= item.quantity
                    ).update(
                        {ShopProductModel.stock_quantity: ShopProductModel.stock_quantity - item.quantity},
                        synchronize_session=False,
                    )
                    if not reserved:
                        raise BadRequestError(f"'{product.name}' no longer has {item.quantity} units in stock")

                session.add(ShopOrderStatusHistoryModel(
                    order_id=order.id,
                    previous_status=None,
                    new_status=OrderStatus.PAYMENT_CONFIRMED.value,
                    change_reason="Payment confirmed at checkout",
                    changed_by_role=actor.role.value,
                    changed_by_id=actor.id,
                ))
                order_ids.append(order.id)

            for item in items:
                session.delete(item)

            await self.unit_of_work.commit()
            logger.info(
                "Checkout %s by customer %s created %d order(s) totalling %s",
                transaction_id, actor.id, len(order_ids), grand_total
            )
            return CheckoutResponseDto(
                message="Order placed successfully",
                order_ids=order_ids,
                total=float(grand_total),
            )
