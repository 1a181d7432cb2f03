"""Shopping mall ORM Models"""

from datetime import datetime

from sqlalchemy import (
    Column, String, Text, Boolean, Integer, DateTime, ForeignKey, Uuid, UniqueConstraint
)
from sqlalchemy.orm import relationship

from ...db.models import Base, UuidPrimaryKeyMixin, TimestampMixin, SoftDeleteMixin
from ...domain.enums import OrderStatus


class ShopProductModel(UuidPrimaryKeyMixin, TimestampMixin, SoftDeleteMixin, Base):
    __tablename__ = 'shop_products'

    seller_id = Column(Uuid, ForeignKey('sellers.id'), nullable=False, index=True)
    name = Column(String(200), nullable=False)
    description = Column(Text, nullable=True)
    category = Column(String(80), nullable=True, index=True)
    price_cents = Column(Integer, nullable=False)  # Amount in cents
    currency = Column(String(3), default='USD', nullable=False)
    stock_quantity = Column(Integer, default=0, nullable=False)
    is_active = Column(Boolean, default=True, nullable=False)


class ShopAddressModel(UuidPrimaryKeyMixin, TimestampMixin, SoftDeleteMixin, Base):
    __tablename__ = 'shop_addresses'

    customer_id = Column(Uuid, ForeignKey('customers.id'), nullable=False, index=True)
    recipient_name = Column(String(120), nullable=False)
    phone = Column(String(40), nullable=False)
    address_line1 = Column(String(200), nullable=False)
    address_line2 = Column(String(200), nullable=True)
    city = Column(String(100), nullable=False)
    state_province = Column(String(100), nullable=True)
    postal_code = Column(String(20), nullable=False)
    country = Column(String(2), nullable=False)


class ShopCartItemModel(UuidPrimaryKeyMixin, TimestampMixin, Base):
    __tablename__ = 'shop_cart_items'
    __table_args__ = (
        UniqueConstraint('customer_id', 'product_id', name='uq_shop_cart_items_product'),
    )

    customer_id = Column(Uuid, ForeignKey('customers.id'), nullable=False, index=True)
    product_id = Column(Uuid, ForeignKey('shop_products.id'), nullable=False)
    quantity = Column(Integer, nullable=False)

    product = relationship('ShopProductModel')


class ShopOrderModel(UuidPrimaryKeyMixin, TimestampMixin, Base):
    __tablename__ = 'shop_orders'

    customer_id = Column(Uuid, ForeignKey('customers.id'), nullable=False, index=True)
    seller_id = Column(Uuid, ForeignKey('sellers.id'), nullable=False, index=True)
    order_number = Column(String(32), unique=True, nullable=False)
    checkout_transaction_id = Column(Uuid, nullable=False, index=True)
    status = Column(String(30), default=OrderStatus.PAYMENT_CONFIRMED.value, nullable=False, index=True)
    shipping_method = Column(String(30), nullable=False)

    # Amounts in cents
    subtotal_cents = Column(Integer, nullable=False)
    tax_cents = Column(Integer, nullable=False)
    shipping_cents = Column(Integer, nullable=False)
    total_cents = Column(Integer, nullable=False)
    currency = Column(String(3), default='USD', nullable=False)

    # Delivery address snapshot
    delivery_recipient_name = Column(String(120), nullable=False)
    delivery_phone = Column(String(40), nullable=False)
    delivery_address_line1 = Column(String(200), nullable=False)
    delivery_address_line2 = Column(String(200), nullable=True)
    delivery_city = Column(String(100), nullable=False)
    delivery_state_province = Column(String(100), nullable=True)
    delivery_postal_code = Column(String(20), nullable=False)
    delivery_country = Column(String(2), nullable=False)

    payment_confirmed_at = Column(DateTime, nullable=True)
    shipped_at = Column(DateTime, nullable=True)
    delivered_at = Column(DateTime, nullable=True)
    cancelled_at = Column(DateTime, nullable=True)

    items = relationship('ShopOrderItemModel', order_by='ShopOrderItemModel.created_at')


class ShopOrderItemModel(UuidPrimaryKeyMixin, Base):
    __tablename__ = 'shop_order_items'

    order_id = Column(Uuid, ForeignKey('shop_orders.id'), nullable=False, index=True)
    product_id = Column(Uuid, ForeignKey('shop_products.id'), nullable=False)
    product_name = Column(String(200), nullable=False)
    quantity = Column(Integer, nullable=False)
    unit_price_cents = Column(Integer, nullable=False)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)


class ShopOrderStatusHistoryModel(UuidPrimaryKeyMixin, Base):
    __tablename__ = 'shop_order_status_history'

    order_id = Column(Uuid, ForeignKey('shop_orders.id'), nullable=False, index=True)
    previous_status = Column(String(30), nullable=True)
    new_status = Column(String(30), nullable=False)
    change_reason = Column(Text, nullable=True)
    changed_by_role = Column(String(20), nullable=False)
    changed_by_id = Column(Uuid, nullable=True)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)


class ShopWishlistItemModel(UuidPrimaryKeyMixin, Base):
    __tablename__ = 'shop_wishlist_items'
    __table_args__ = (
        UniqueConstraint('customer_id', 'product_id', name='uq_shop_wishlist_items_product'),
    )

    customer_id = Column(Uuid, ForeignKey('customers.id'), nullable=False, index=True)
    product_id = Column(Uuid, ForeignKey('shop_products.id'), nullable=False)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)

    product = relationship('ShopProductModel')
