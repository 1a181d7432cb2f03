"""Shopping mall routes"""

from typing import Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Query, Response, status

from ...api.dependencies import (
    get_current_admin, get_current_customer, get_current_seller, get_page_request, get_unit_of_work
)
from ...application.dtos.common_dtos import Page, PageRequest
from ...application.dtos.shop_dtos import (
    AddressCreateDto, AddressDto, CartDto, CartItemCreateDto, CartItemDto, CartItemUpdateDto,
    CheckoutDto, CheckoutResponseDto, OrderCancelDto, OrderDto, OrderStatusHistoryDto,
    OrderStatusUpdateDto, ProductCreateDto, ProductDto, ProductUpdateDto, WishlistCreateDto,
    WishlistItemDto
)
from ...application.use_cases.cart_use_cases import (
    AddCartItemUseCase, CheckoutUseCase, GetCartUseCase, RemoveCartItemUseCase, UpdateCartItemUseCase
)
from ...application.use_cases.order_use_cases import (
    CancelOrderUseCase, GetOrderHistoryUseCase, GetOrderUseCase, ListOrdersUseCase, UpdateOrderStatusUseCase
)
from ...application.use_cases.product_use_cases import (
    AddToWishlistUseCase, CreateAddressUseCase, CreateProductUseCase, DeleteAddressUseCase,
    DeleteProductUseCase, GetProductUseCase, ListAddressesUseCase, ListProductsUseCase,
    ListWishlistUseCase, RemoveFromWishlistUseCase, UpdateProductUseCase
)
from ...domain.enums import OrderStatus, ProductSort
from ...domain.repositories.unit_of_work import IUnitOfWork
from ...domain.value_objects.actor import ActorPayload

router = APIRouter()


# Products

@router.get("/products", response_model=Page[ProductDto])
async def list_products(
    search: Optional[str] = Query(None, max_length=200),
    category: Optional[str] = None,
    min_price: Optional[float] = Query(None, ge=0),
    max_price: Optional[float] = Query(None, ge=0),
    sort: ProductSort = ProductSort.NEWEST,
    page: PageRequest = Depends(get_page_request),
    unit_of_work: IUnitOfWork = Depends(get_unit_of_work)
):
    """Browse active products"""
    return await ListProductsUseCase(unit_of_work).execute(
        page,
        search=search,
        category=category,
        min_price=min_price,
        max_price=max_price,
        sort=sort,
    )


@router.get("/products/{product_id}", response_model=ProductDto)
async def get_product(product_id: UUID, unit_of_work: IUnitOfWork = Depends(get_unit_of_work)):
    return await GetProductUseCase(unit_of_work).execute(product_id)


@router.post("/seller/products", response_model=ProductDto, status_code=status.HTTP_201_CREATED)
async def create_product(
    request: ProductCreateDto,
    seller: ActorPayload = Depends(get_current_seller),
    unit_of_work: IUnitOfWork = Depends(get_unit_of_work)
):
    return await CreateProductUseCase(unit_of_work).execute(seller, request)


@router.get("/seller/products", response_model=Page[ProductDto])
async def list_my_products(
    sort: ProductSort = ProductSort.NEWEST,
    page: PageRequest = Depends(get_page_request),
    seller: ActorPayload = Depends(get_current_seller),
    unit_of_work: IUnitOfWork = Depends(get_unit_of_work)
):
    """List the seller's own products, inactive ones included"""
    return await ListProductsUseCase(unit_of_work).execute(page, sort=sort, seller_id=seller.id)


@router.put("/seller/products/{product_id}", response_model=ProductDto)
async def update_product(
    product_id: UUID,
    request: ProductUpdateDto,
    seller: ActorPayload = Depends(get_current_seller),
    unit_of_work: IUnitOfWork = Depends(get_unit_of_work)
):
    return await UpdateProductUseCase(unit_of_work).execute(seller, product_id, request)


@router.delete("/seller/products/{product_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_product(
    product_id: UUID,
    seller: ActorPayload = Depends(get_current_seller),
    unit_of_work: IUnitOfWork = Depends(get_unit_of_work)
):
    await DeleteProductUseCase(unit_of_work).execute(seller, product_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("/admin/products/{product_id}", status_code=status.HTTP_204_NO_CONTENT)
async def admin_delete_product(
    product_id: UUID,
    admin: ActorPayload = Depends(get_current_admin),
    unit_of_work: IUnitOfWork = Depends(get_unit_of_work)
):
    await DeleteProductUseCase(unit_of_work).execute(admin, product_id, as_admin=True)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


# Addresses

@router.post("/customer/addresses", response_model=AddressDto, status_code=status.HTTP_201_CREATED)
async def create_address(
    request: AddressCreateDto,
    customer: ActorPayload = Depends(get_current_customer),
    unit_of_work: IUnitOfWork = Depends(get_unit_of_work)
):
    return await CreateAddressUseCase(unit_of_work).execute(customer, request)


@router.get("/customer/addresses", response_model=Page[AddressDto])
async def list_addresses(
    page: PageRequest = Depends(get_page_request),
    customer: ActorPayload = Depends(get_current_customer),
    unit_of_work: IUnitOfWork = Depends(get_unit_of_work)
):
    return await ListAddressesUseCase(unit_of_work).execute(customer, page)


@router.delete("/customer/addresses/{address_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_address(
    address_id: UUID,
    customer: ActorPayload = Depends(get_current_customer),
    unit_of_work: IUnitOfWork = Depends(get_unit_of_work)
):
    await DeleteAddressUseCase(unit_of_work).execute(customer, address_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


# Cart

@router.get("/customer/cart", response_model=CartDto)
async def get_cart(
    customer: ActorPayload = Depends(get_current_customer),
    unit_of_work: IUnitOfWork = Depends(get_unit_of_work)
):
    return await GetCartUseCase(unit_of_work).execute(customer)


@router.post("/customer/cart/items", response_model=CartItemDto, status_code=status.HTTP_201_CREATED)
async def add_cart_item(
    request: CartItemCreateDto,
    customer: ActorPayload = Depends(get_current_customer),
    unit_of_work: IUnitOfWork = Depends(get_unit_of_work)
):
    """Add a product to the cart"""
    return await AddCartItemUseCase(unit_of_work).execute(customer, request)


@router.put("/customer/cart/items/{item_id}", response_model=CartItemDto)
async def update_cart_item(
    item_id: UUID,
    request: CartItemUpdateDto,
    customer: ActorPayload = Depends(get_current_customer),
    unit_of_work: IUnitOfWork = Depends(get_unit_of_work)
):
    return await UpdateCartItemUseCase(unit_of_work).execute(customer, item_id, request)


@router.delete("/customer/cart/items/{item_id}", status_code=status.HTTP_204_NO_CONTENT)
async def remove_cart_item(
    item_id: UUID,
    customer: ActorPayload = Depends(get_current_customer),
    unit_of_work: IUnitOfWork = Depends(get_unit_of_work)
):
    await RemoveCartItemUseCase(unit_of_work).execute(customer, item_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


# Orders

@router.post("/customer/orders", response_model=CheckoutResponseDto, status_code=status.HTTP_201_CREATED)
async def checkout(
    request: CheckoutDto,
    customer: ActorPayload = Depends(get_current_customer),
    unit_of_work: IUnitOfWork = Depends(get_unit_of_work)
):
    """Check out the cart, creating one order per seller"""
    return await CheckoutUseCase(unit_of_work).execute(customer, request)


@router.get("/customer/orders", response_model=Page[OrderDto])
async def list_my_orders(
    order_status: Optional[OrderStatus] = Query(None, alias="status"),
    page: PageRequest = Depends(get_page_request),
    customer: ActorPayload = Depends(get_current_customer),
    unit_of_work: IUnitOfWork = Depends(get_unit_of_work)
):
    return await ListOrdersUseCase(unit_of_work).execute(page, customer_id=customer.id, status=order_status)


@router.get("/customer/orders/{order_id}", response_model=OrderDto)
async def get_order(
    order_id: UUID,
    customer: ActorPayload = Depends(get_current_customer),
    unit_of_work: IUnitOfWork = Depends(get_unit_of_work)
):
    return await GetOrderUseCase(unit_of_work).execute(customer, order_id)


@router.get("/customer/orders/{order_id}/history", response_model=Page[OrderStatusHistoryDto])
async def get_order_history(
    order_id: UUID,
    page: PageRequest = Depends(get_page_request),
    customer: ActorPayload = Depends(get_current_customer),
    unit_of_work: IUnitOfWork = Depends(get_unit_of_work)
):
    return await GetOrderHistoryUseCase(unit_of_work).execute(customer, order_id, page)


@router.post("/customer/orders/{order_id}/cancel", response_model=OrderDto)
async def cancel_order(
    order_id: UUID,
    request: Optional[OrderCancelDto] = None,
    customer: ActorPayload = Depends(get_current_customer),
    unit_of_work: IUnitOfWork = Depends(get_unit_of_work)
):
    """Cancel an order that has not shipped yet"""
    return await CancelOrderUseCase(unit_of_work).execute(customer, order_id, request or OrderCancelDto())


@router.get("/seller/orders", response_model=Page[OrderDto])
async def list_seller_orders(
    order_status: Optional[OrderStatus] = Query(None, alias="status"),
    page: PageRequest = Depends(get_page_request),
    seller: ActorPayload = Depends(get_current_seller),
    unit_of_work: IUnitOfWork = Depends(get_unit_of_work)
):
    return await ListOrdersUseCase(unit_of_work).execute(page, seller_id=seller.id, status=order_status)


@router.put("/seller/orders/{order_id}/status", response_model=OrderDto)
async def update_order_status(
    order_id: UUID,
    request: OrderStatusUpdateDto,
    seller: ActorPayload = Depends(get_current_seller),
    unit_of_work: IUnitOfWork = Depends(get_unit_of_work)
):
    return await UpdateOrderStatusUseCase(unit_of_work).execute(seller, order_id, request)


# Wishlist

@router.post("/customer/wishlist", response_model=WishlistItemDto, status_code=status.HTTP_201_CREATED)
async def add_to_wishlist(
    request: WishlistCreateDto,
    customer: ActorPayload = Depends(get_current_customer),
    unit_of_work: IUnitOfWork = Depends(get_unit_of_work)
):
    return await AddToWishlistUseCase(unit_of_work).execute(customer, request)


@router.get("/customer/wishlist", response_model=Page[WishlistItemDto])
async def list_wishlist(
    page: PageRequest = Depends(get_page_request),
    customer: ActorPayload = Depends(get_current_customer),
    unit_of_work: IUnitOfWork = Depends(get_unit_of_work)
):
    return await ListWishlistUseCase(unit_of_work).execute(customer, page)


@router.delete("/customer/wishlist/{product_id}", status_code=status.HTTP_204_NO_CONTENT)
async def remove_from_wishlist(
    product_id: UUID,
    customer: ActorPayload = Depends(get_current_customer),
    unit_of_work: IUnitOfWork = Depends(get_unit_of_work)
):
    await RemoveFromWishlistUseCase(unit_of_work).execute(customer, product_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
