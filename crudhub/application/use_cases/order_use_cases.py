"""Order listing and lifecycle use cases"""

import logging
from datetime import datetime
from typing import Optional
from uuid import UUID

from sqlalchemy.orm import Session

from ...core.exceptions import ConflictError
from ...domain.entities.order import InvalidOrderTransition, ensure_transition
from ...domain.enums import OrderStatus
from ...domain.repositories.unit_of_work import IUnitOfWork
from ...domain.value_objects.actor import ActorPayload
from ...infrastructure.orm.shop_model import ShopOrderModel, ShopOrderStatusHistoryModel, ShopProductModel
from ..dtos.common_dtos import Page, PageRequest
from ..dtos.shop_dtos import OrderCancelDto, OrderDto, OrderStatusHistoryDto, OrderStatusUpdateDto
from .common import ensure_owner, get_or_404, paginate

logger = logging.getLogger(__name__)

STATUS_TIMESTAMPS = {
    OrderStatus.SHIPPED: "shipped_at",
    OrderStatus.DELIVERED: "delivered_at",
    OrderStatus.CANCELLED: "cancelled_at",
}


def change_order_status(
    session: Session,
    order: ShopOrderModel,
    new_status: OrderStatus,
    actor: ActorPayload,
    reason: Optional[str] = None,
) -> None:
    """Move an order along its lifecycle and record the change"""
    current = OrderStatus(order.status)
    try:
        ensure_transition(current, new_status)
    except InvalidOrderTransition as e:
        raise ConflictError(str(e))

    order.status = new_status.value
    stamp = STATUS_TIMESTAMPS.get(new_status)
    if stamp:
        setattr(order, stamp, datetime.utcnow())

    if new_status is OrderStatus.CANCELLED:
        for item in order.items:
            session.query(ShopProductModel).filter(ShopProductModel.id == item.product_id).update(
                {ShopProductModel.stock_quantity: ShopProductModel.stock_quantity + item.quantity},
                synchronize_session=False,
            )

    session.add(ShopOrderStatusHistoryModel(
        order_id=order.id,
        previous_status=current.value,
        new_status=new_status.value,
        change_reason=reason,
        changed_by_role=actor.role.value,
        changed_by_id=actor.id,
    ))
    logger.info("Order %s moved from %s to %s by %s %s", order.order_number, current.value, new_status.value, actor.role.value, actor.id)


class ListOrdersUseCase:
    """Orders of one customer or one seller, newest first"""

    def __init__(self, unit_of_work: IUnitOfWork):
        self.unit_of_work = unit_of_work

    async def execute(
        self,
        page: PageRequest,
        customer_id: Optional[UUID] = None,
        seller_id: Optional[UUID] = None,
        status: Optional[OrderStatus] = None,
    ) -> Page:
        async with self.unit_of_work:
            query = self.unit_of_work.session.query(ShopOrderModel)
            if customer_id is not None:
                query = query.filter(ShopOrderModel.customer_id == customer_id)
            if seller_id is not None:
                query = query.filter(ShopOrderModel.seller_id == seller_id)
            if status is not None:
                query = query.filter(ShopOrderModel.status == status.value)
            query = query.order_by(ShopOrderModel.created_at.desc(), ShopOrderModel.order_number.desc())
            return paginate(query, page, OrderDto.from_model)


class GetOrderUseCase:

    def __init__(self, unit_of_work: IUnitOfWork):
        self.unit_of_work = unit_of_work

    async def execute(self, actor: ActorPayload, order_id: UUID) -> OrderDto:
        async with self.unit_of_work:
            order = get_or_404(self.unit_of_work.session, ShopOrderModel, order_id, "Order")
            ensure_owner(actor, order.customer_id, "Order")
            return OrderDto.from_model(order, with_items=True)


class GetOrderHistoryUseCase:

    def __init__(self, unit_of_work: IUnitOfWork):
        self.unit_of_work = unit_of_work

    async def execute(self, actor: ActorPayload, order_id: UUID, page: PageRequest) -> Page:
        async with self.unit_of_work:
            session = self.unit_of_work.session
            order = get_or_404(session, ShopOrderModel, order_id, "Order")
            ensure_owner(actor, order.customer_id, "Order")
            query = session.query(ShopOrderStatusHistoryModel).filter(
                ShopOrderStatusHistoryModel.order_id == order.id
            ).order_by(ShopOrderStatusHistoryModel.created_at.asc())
            return paginate(query, page, OrderStatusHistoryDto.model_validate)


class CancelOrderUseCase:
    """Customer cancellation; restores the reserved stock"""

    def __init__(self, unit_of_work: IUnitOfWork):
        self.unit_of_work = unit_of_work

    async def execute(self, actor: ActorPayload, order_id: UUID, request: OrderCancelDto) -> OrderDto:
        async with self.unit_of_work:
            session = self.unit_of_work.session
            order = get_or_404(session, ShopOrderModel, order_id, "Order")
            ensure_owner(actor, order.customer_id, "Order")
            change_order_status(session, order, OrderStatus.CANCELLED, actor, request.reason)
            await self.unit_of_work.commit()
            return OrderDto.from_model(order, with_items=True)


class UpdateOrderStatusUseCase:
    """Seller moves one of their orders along the lifecycle"""

    def __init__(self, unit_of_work: IUnitOfWork):
        self.unit_of_work = unit_of_work

    async def execute(self, actor: ActorPayload, order_id: UUID, request: OrderStatusUpdateDto) -> OrderDto:
        async with self.unit_of_work:
            session = self.unit_of_work.session
            order = get_or_404(session, ShopOrderModel, order_id, "Order")
            ensure_owner(actor, order.seller_id, "Order")
            change_order_status(session, order, request.status, actor, request.reason)
            await self.unit_of_work.commit()
            return OrderDto.from_model(order, with_items=True)
