"""Shopping mall DTOs"""

from datetime import datetime
from typing import List, Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from ...domain.enums import OrderStatus, ShippingMethod


class ProductCreateDto(BaseModel):
    name: str = Field(..., min_length=1, max_length=200)
    description: Optional[str] = Field(None, max_length=10000)
    category: Optional[str] = Field(None, max_length=80)
    price: float = Field(..., gt=0)
    stock_quantity: int = Field(0, ge=0)
    is_active: bool = True


class ProductUpdateDto(BaseModel):
    name: Optional[str] = Field(None, min_length=1, max_length=200)
    description: Optional[str] = Field(None, max_length=10000)
    category: Optional[str] = Field(None, max_length=80)
    price: Optional[float] = Field(None, gt=0)
    stock_quantity: Optional[int] = Field(None, ge=0)
    is_active: Optional[bool] = None


class ProductDto(BaseModel):
    id: UUID
    seller_id: UUID
    name: str
    description: Optional[str] = None
    category: Optional[str] = None
    price: float
    currency: str
    stock_quantity: int
    is_active: bool
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_model(cls, product):
        return cls(
            id=product.id,
            seller_id=product.seller_id,
            name=product.name,
            description=product.description,
            category=product.category,
            price=product.price_cents / 100,
            currency=product.currency,
            stock_quantity=product.stock_quantity,
            is_active=product.is_active,
            created_at=product.created_at,
            updated_at=product.updated_at,
        )


class AddressCreateDto(BaseModel):
    recipient_name: str = Field(..., min_length=1, max_length=120)
    phone: str = Field(..., min_length=1, max_length=40)
    address_line1: str = Field(..., min_length=1, max_length=200)
    address_line2: Optional[str] = Field(None, max_length=200)
    city: str = Field(..., min_length=1, max_length=100)
    state_province: Optional[str] = Field(None, max_length=100)
    postal_code: str = Field(..., min_length=1, max_length=20)
    country: str = Field(..., min_length=2, max_length=2)


class AddressDto(AddressCreateDto):
    id: UUID
    customer_id: UUID
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


class CartItemCreateDto(BaseModel):
    product_id: UUID
    quantity: int = Field(1, ge=1)


class CartItemUpdateDto(BaseModel):
    quantity: int = Field(..., ge=1)


class CartItemDto(BaseModel):
    id: UUID
    product_id: UUID
    product_name: str
    unit_price: float
    quantity: int
    line_total: float


class CartDto(BaseModel):
    items: List[CartItemDto]
    subtotal: float
    currency: str


class CheckoutDto(BaseModel):
    address_id: UUID
    shipping_method: ShippingMethod = ShippingMethod.STANDARD


class CheckoutResponseDto(BaseModel):
    message: str
    order_ids: List[UUID]
    total: float


class OrderItemDto(BaseModel):
    id: UUID
    product_id: UUID
    product_name: str
    quantity: int
    unit_price: float
    line_total: float

    @classmethod
    def from_model(cls, item):
        return cls(
            id=item.id,
            product_id=item.product_id,
            product_name=item.product_name,
            quantity=item.quantity,
            unit_price=item.unit_price_cents / 100,
            line_total=item.unit_price_cents * item.quantity / 100,
        )


class OrderDto(BaseModel):
    """Order summary; items are only filled in on the detail endpoint"""
    id: UUID
    order_number: str
    customer_id: UUID
    seller_id: UUID
    checkout_transaction_id: UUID
    status: OrderStatus
    shipping_method: ShippingMethod
    subtotal: float
    tax: float
    shipping: float
    total: float
    currency: str
    delivery_recipient_name: str
    delivery_address_line1: str
    delivery_city: str
    delivery_postal_code: str
    delivery_country: str
    payment_confirmed_at: Optional[datetime] = None
    shipped_at: Optional[datetime] = None
    delivered_at: Optional[datetime] = None
    cancelled_at: Optional[datetime] = None
    created_at: datetime
    items: Optional[List[OrderItemDto]] = None

    @classmethod
    def from_model(cls, order, with_items: bool = False):
        return cls(
            id=order.id,
            order_number=order.order_number,
            customer_id=order.customer_id,
            seller_id=order.seller_id,
            checkout_transaction_id=order.checkout_transaction_id,
            status=order.status,
            shipping_method=order.shipping_method,
            subtotal=order.subtotal_cents / 100,
            tax=order.tax_cents / 100,
            shipping=order.shipping_cents / 100,
            total=order.total_cents / 100,
            currency=order.currency,
            delivery_recipient_name=order.delivery_recipient_name,
            delivery_address_line1=order.delivery_address_line1,
            delivery_city=order.delivery_city,
            delivery_postal_code=order.delivery_postal_code,
            delivery_country=order.delivery_country,
            payment_confirmed_at=order.payment_confirmed_at,
            shipped_at=order.shipped_at,
            delivered_at=order.delivered_at,
            cancelled_at=order.cancelled_at,
            created_at=order.created_at,
            items=[OrderItemDto.from_model(item) for item in order.items] if with_items else None,
        )


class OrderStatusUpdateDto(BaseModel):
    status: OrderStatus
    reason: Optional[str] = Field(None, max_length=1000)


class OrderCancelDto(BaseModel):
    reason: Optional[str] = Field(None, max_length=1000)


class OrderStatusHistoryDto(BaseModel):
    id: UUID
    order_id: UUID
    previous_status: Optional[OrderStatus] = None
    new_status: OrderStatus
    change_reason: Optional[str] = None
    changed_by_role: str
    changed_by_id: Optional[UUID] = None
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


class WishlistCreateDto(BaseModel):
    product_id: UUID


class WishlistItemDto(BaseModel):
    id: UUID
    product_id: UUID
    created_at: datetime
    product: ProductDto

    @classmethod
    def from_model(cls, item):
        return cls(
            id=item.id,
            product_id=item.product_id,
            created_at=item.created_at,
            product=ProductDto.from_model(item.product),
        )
