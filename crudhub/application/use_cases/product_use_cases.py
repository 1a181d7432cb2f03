"""Shopping mall products, addresses and wishlist"""

from typing import Optional
from uuid import UUID

from sqlalchemy import or_

from ...core.config import settings
from ...core.exceptions import ConflictError, NotFoundError
from ...domain.enums import ProductSort
from ...domain.repositories.unit_of_work import IUnitOfWork
from ...domain.value_objects.actor import ActorPayload
from ...domain.value_objects.money import Money
from ...infrastructure.orm.shop_model import ShopAddressModel, ShopProductModel, ShopWishlistItemModel
from ..dtos.common_dtos import Page, PageRequest
from ..dtos.shop_dtos import (
    AddressCreateDto, AddressDto, ProductCreateDto, ProductDto, ProductUpdateDto, WishlistCreateDto,
    WishlistItemDto
)
from .common import LIKE_ESCAPE, contains_pattern, ensure_owner, get_or_404, paginate

PRODUCT_ORDERING = {
    ProductSort.NEWEST: ShopProductModel.created_at.desc(),
    ProductSort.PRICE_ASC: ShopProductModel.price_cents.asc(),
    ProductSort.PRICE_DESC: ShopProductModel.price_cents.desc(),
    ProductSort.NAME: ShopProductModel.name.asc(),
}


def get_listed_product(session, product_id: UUID) -> ShopProductModel:
    """Product visible to customers: active and not deleted"""
    product = session.query(ShopProductModel).filter(
        ShopProductModel.id == product_id,
        ShopProductModel.is_active.is_(True),
        ShopProductModel.deleted_at.is_(None)
    ).first()
    if not product:
        raise NotFoundError("Product", product_id)
    return product


def _to_cents(amount: float) -> int:
    return Money.from_amount(amount, settings.CURRENCY).to_cents()


class ListProductsUseCase:
    """Public catalogue, or one seller's own listing including inactive products"""

    def __init__(self, unit_of_work: IUnitOfWork):
        self.unit_of_work = unit_of_work

    async def execute(
        self,
        page: PageRequest,
        search: Optional[str] = None,
        category: Optional[str] = None,
        min_price: Optional[float] = None,
        max_price: Optional[float] = None,
        sort: ProductSort = ProductSort.NEWEST,
        seller_id: Optional[UUID] = None,
    ) -> Page:
        async with self.unit_of_work:
            query = self.unit_of_work.session.query(ShopProductModel).filter(
                ShopProductModel.deleted_at.is_(None)
            )
            if seller_id is not None:
                query = query.filter(ShopProductModel.seller_id == seller_id)
            else:
                query = query.filter(ShopProductModel.is_active.is_(True))
            if search:
                pattern = contains_pattern(search)
                query = query.filter(or_(
                    ShopProductModel.name.ilike(pattern, escape=LIKE_ESCAPE),
                    ShopProductModel.description.ilike(pattern, escape=LIKE_ESCAPE),
                ))
            if category:
                query = query.filter(ShopProductModel.category == category)
            if min_price is not None:
                query = query.filter(ShopProductModel.price_cents >= _to_cents(min_price))
            if max_price is not None:
                query = query.filter(ShopProductModel.price_cents <= _to_cents(max_price))

            query = query.order_by(PRODUCT_ORDERING[sort], ShopProductModel.id)
            return paginate(query, page, ProductDto.from_model)


class GetProductUseCase:

    def __init__(self, unit_of_work: IUnitOfWork):
        self.unit_of_work = unit_of_work

    async def execute(self, product_id: UUID) -> ProductDto:
        async with self.unit_of_work:
            return ProductDto.from_model(get_listed_product(self.unit_of_work.session, product_id))


class CreateProductUseCase:

    def __init__(self, unit_of_work: IUnitOfWork):
        self.unit_of_work = unit_of_work

    async def execute(self, actor: ActorPayload, request: ProductCreateDto) -> ProductDto:
        async with self.unit_of_work:
            product = ShopProductModel(
                seller_id=actor.id,
                name=request.name,
                description=request.description,
                category=request.category,
                price_cents=_to_cents(request.price),
                currency=settings.CURRENCY,
                stock_quantity=request.stock_quantity,
                is_active=request.is_active,
            )
            self.unit_of_work.session.add(product)
            await self.unit_of_work.commit()
            return ProductDto.from_model(product)


class UpdateProductUseCase:

    def __init__(self, unit_of_work: IUnitOfWork):
        self.unit_of_work = unit_of_work

    async def execute(self, actor: ActorPayload, product_id: UUID, request: ProductUpdateDto) -> ProductDto:
        async with self.unit_of_work:
            product = get_or_404(self.unit_of_work.session, ShopProductModel, product_id, "Product")
            ensure_owner(actor, product.seller_id, "Product")

            changes = request.model_dump(exclude_unset=True, exclude_none=True)
            if "price" in changes:
                product.price_cents = _to_cents(changes.pop("price"))
            for field, value in changes.items():
                setattr(product, field, value)
            await self.unit_of_work.commit()
            return ProductDto.from_model(product)


class DeleteProductUseCase:

    def __init__(self, unit_of_work: IUnitOfWork):
        self.unit_of_work = unit_of_work

    async def execute(self, actor: ActorPayload, product_id: UUID, as_admin: bool = False) -> None:
        async with self.unit_of_work:
            product = get_or_404(self.unit_of_work.session, ShopProductModel, product_id, "Product")
            if not as_admin:
                ensure_owner(actor, product.seller_id, "Product")
            product.soft_delete()
            await self.unit_of_work.commit()


class CreateAddressUseCase:

    def __init__(self, unit_of_work: IUnitOfWork):
        self.unit_of_work = unit_of_work

    async def execute(self, actor: ActorPayload, request: AddressCreateDto) -> AddressDto:
        async with self.unit_of_work:
            address = ShopAddressModel(customer_id=actor.id, **request.model_dump())
            self.unit_of_work.session.add(address)
            await self.unit_of_work.commit()
            return AddressDto.model_validate(address)


class ListAddressesUseCase:

    def __init__(self, unit_of_work: IUnitOfWork):
        self.unit_of_work = unit_of_work

    async def execute(self, actor: ActorPayload, page: PageRequest) -> Page:
        async with self.unit_of_work:
            query = self.unit_of_work.session.query(ShopAddressModel).filter(
                ShopAddressModel.customer_id == actor.id,
                ShopAddressModel.deleted_at.is_(None)
            ).order_by(ShopAddressModel.created_at.desc())
            return paginate(query, page, AddressDto.model_validate)


class DeleteAddressUseCase:

    def __init__(self, unit_of_work: IUnitOfWork):
        self.unit_of_work = unit_of_work

    async def execute(self, actor: ActorPayload, address_id: UUID) -> None:
        async with self.unit_of_work:
            address = get_or_404(self.unit_of_work.session, ShopAddressModel, address_id, "Address")
            ensure_owner(actor, address.customer_id, "Address")
            address.soft_delete()
            await self.unit_of_work.commit()


class AddToWishlistUseCase:

    def __init__(self, unit_of_work: IUnitOfWork):
        self.unit_of_work = unit_of_work

    async def execute(self, actor: ActorPayload, request: WishlistCreateDto) -> WishlistItemDto:
        async with self.unit_of_work:
            session = self.unit_of_work.session
            product = get_or_404(session, ShopProductModel, request.product_id, "Product")
            existing = session.query(ShopWishlistItemModel).filter(
                ShopWishlistItemModel.customer_id == actor.id,
                ShopWishlistItemModel.product_id == product.id
            ).first()
            if existing:
                raise ConflictError("Product is already in your wishlist")

            item = ShopWishlistItemModel(customer_id=actor.id, product_id=product.id)
            session.add(item)
            await self.unit_of_work.commit()
            return WishlistItemDto.from_model(item)


class ListWishlistUseCase:

    def __init__(self, unit_of_work: IUnitOfWork):
        self.unit_of_work = unit_of_work

    async def execute(self, actor: ActorPayload, page: PageRequest) -> Page:
        async with self.unit_of_work:
            query = self.unit_of_work.session.query(ShopWishlistItemModel).join(
                ShopProductModel, ShopWishlistItemModel.product_id == ShopProductModel.id
            ).filter(
                ShopWishlistItemModel.customer_id == actor.id,
                ShopProductModel.deleted_at.is_(None)
            ).order_by(ShopWishlistItemModel.created_at.desc())
            return paginate(query, page, WishlistItemDto.from_model)


class RemoveFromWishlistUseCase:

    def __init__(self, unit_of_work: IUnitOfWork):
        self.unit_of_work = unit_of_work

    async def execute(self, actor: ActorPayload, product_id: UUID) -> None:
        async with self.unit_of_work:
            session = self.unit_of_work.session
            item = session.query(ShopWishlistItemModel).filter(
                ShopWishlistItemModel.customer_id == actor.id,
                ShopWishlistItemModel.product_id == product_id
            ).first()
            if not item:
                raise NotFoundError("Wishlist item", product_id)
            session.delete(item)
            await self.unit_of_work.commit()
