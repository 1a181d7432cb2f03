# =============================================================================
# tests/test_shop.py - Products, cart, checkout, orders and wishlist
# =============================================================================

import re
from uuid import uuid4

import pytest

from tests.conftest import API

SHOP = f"{API}/shop"

ADDRESS = {
    "recipient_name": "Jamie Doe",
    "phone": "+1-555-0101",
    "address_line1": "1 Main Street",
    "city": "Springfield",
    "state_province": "IL",
    "postal_code": "62701",
    "country": "US",
}


def create_product(client, seller, **fields):
    payload = {"name": "Coffee mug", "price": 20.00, "stock_quantity": 10, "category": "kitchen", **fields}
    response = client.post(f"{SHOP}/seller/products", json=payload, headers=seller.headers)
    assert response.status_code == 201, response.text
    return response.json()


def create_address(client, customer):
    response = client.post(f"{SHOP}/customer/addresses", json=ADDRESS, headers=customer.headers)
    assert response.status_code == 201, response.text
    return response.json()


def add_to_cart(client, customer, product_id, quantity=1):
    return client.post(
        f"{SHOP}/customer/cart/items",
        json={"product_id": product_id, "quantity": quantity},
        headers=customer.headers,
    )


def checkout(client, customer, address_id, shipping_method="standard"):
    return client.post(
        f"{SHOP}/customer/orders",
        json={"address_id": address_id, "shipping_method": shipping_method},
        headers=customer.headers,
    )


@pytest.fixture
def placed_order(client, customer, seller):
    """One order of two mugs, returned as the order detail."""
    product = create_product(client, seller)
    address = create_address(client, customer)
    add_to_cart(client, customer, product["id"], quantity=2)
    order_id = checkout(client, customer, address["id"]).json()["order_ids"][0]
    return client.get(f"{SHOP}/customer/orders/{order_id}", headers=customer.headers).json()


class TestProducts:

    def test_create_stores_price(self, client, seller):
        product = create_product(client, seller, price=12.34)

        assert product["price"] == 12.34
        assert product["seller_id"] == seller.id
        assert product["is_active"] is True

    def test_public_listing_hides_inactive_but_seller_sees_it(self, client, seller):
        create_product(client, seller, name="Visible")
        create_product(client, seller, name="Hidden", is_active=False)

        public = client.get(f"{SHOP}/products").json()
        own = client.get(f"{SHOP}/seller/products", headers=seller.headers).json()

        assert [p["name"] for p in public["data"]] == ["Visible"]
        assert own["pagination"]["records"] == 2

    def test_inactive_product_detail_is_not_found(self, client, seller):
        product = create_product(client, seller, is_active=False)

        assert client.get(f"{SHOP}/products/{product['id']}").status_code == 404

    def test_price_filters_and_sorting(self, client, seller):
        create_product(client, seller, name="Cheap", price=5.00)
        create_product(client, seller, name="Middle", price=15.00)
        create_product(client, seller, name="Pricey", price=50.00)

        body = client.get(
            f"{SHOP}/products", params={"min_price": 10, "max_price": 60, "sort": "price_desc"}
        ).json()

        assert [p["name"] for p in body["data"]] == ["Pricey", "Middle"]

    def test_search_and_category(self, client, seller):
        create_product(client, seller, name="Green tea", category="drinks")
        create_product(client, seller, name="Tea towel", category="kitchen")

        body = client.get(f"{SHOP}/products", params={"search": "tea", "category": "drinks"}).json()

        assert [p["name"] for p in body["data"]] == ["Green tea"]

    def test_search_percent_sign(self, client, seller):
        create_product(client, seller, name="Mug 100% ceramic")
        create_product(client, seller, name="Mug 1000 pack")

        body = client.get(f"{SHOP}/products", params={"search": "100%"}).json()

        assert [p["name"] for p in body["data"]] == ["Mug 100% ceramic"]

    def test_only_owner_updates(self, client, join):
        owner, rival = join("seller"), join("seller")
        product = create_product(client, owner)
        url = f"{SHOP}/seller/products/{product['id']}"

        assert client.put(url, json={"price": 1.0}, headers=rival.headers).status_code == 403
        updated = client.put(url, json={"price": 25.5, "stock_quantity": 3}, headers=owner.headers).json()
        assert (updated["price"], updated["stock_quantity"]) == (25.5, 3)

    def test_soft_delete_by_owner_and_admin(self, client, seller, admin):
        first, second = create_product(client, seller), create_product(client, seller)

        assert client.delete(f"{SHOP}/seller/products/{first['id']}", headers=seller.headers).status_code == 204
        assert client.delete(f"{SHOP}/admin/products/{second['id']}", headers=admin.headers).status_code == 204
        assert client.get(f"{SHOP}/products").json()["data"] == []
        assert client.delete(f"{SHOP}/seller/products/{first['id']}", headers=seller.headers).status_code == 404

    def test_customer_cannot_create_products(self, client, customer):
        response = client.post(f"{SHOP}/seller/products", json={"name": "x", "price": 1}, headers=customer.headers)

        assert response.status_code == 403


class TestAddresses:

    def test_address_lifecycle(self, client, customer):
        address = create_address(client, customer)

        listed = client.get(f"{SHOP}/customer/addresses", headers=customer.headers).json()
        assert [a["id"] for a in listed["data"]] == [address["id"]]

        url = f"{SHOP}/customer/addresses/{address['id']}"
        assert client.delete(url, headers=customer.headers).status_code == 204
        assert client.get(f"{SHOP}/customer/addresses", headers=customer.headers).json()["data"] == []

    def test_cannot_delete_someone_elses_address(self, client, join):
        owner, other = join("customer"), join("customer")
        address = create_address(client, owner)

        response = client.delete(f"{SHOP}/customer/addresses/{address['id']}", headers=other.headers)

        assert response.status_code == 403


class TestCart:

    def test_adding_twice_merges_quantities(self, client, customer, seller):
        product = create_product(client, seller, price=2.50)

        add_to_cart(client, customer, product["id"], 1)
        merged = add_to_cart(client, customer, product["id"], 2)
        cart = client.get(f"{SHOP}/customer/cart", headers=customer.headers).json()

        assert merged.status_code == 201
        assert merged.json()["quantity"] == 3
        assert len(cart["items"]) == 1
        assert cart["items"][0]["line_total"] == 7.5
        assert cart["subtotal"] == 7.5

    def test_quantity_above_stock(self, client, customer, seller):
        product = create_product(client, seller, stock_quantity=2)

        assert add_to_cart(client, customer, product["id"], 3).status_code == 400

    def test_inactive_or_missing_product(self, client, customer, seller):
        product = create_product(client, seller, is_active=False)

        assert add_to_cart(client, customer, product["id"]).status_code == 404
        assert add_to_cart(client, customer, str(uuid4())).status_code == 404

    def test_update_and_remove_line(self, client, customer, seller):
        product = create_product(client, seller)
        item = add_to_cart(client, customer, product["id"]).json()
        url = f"{SHOP}/customer/cart/items/{item['id']}"

        assert client.put(url, json={"quantity": 4}, headers=customer.headers).json()["quantity"] == 4
        assert client.put(url, json={"quantity": 11}, headers=customer.headers).status_code == 400
        assert client.delete(url, headers=customer.headers).status_code == 204
        assert client.get(f"{SHOP}/customer/cart", headers=customer.headers).json()["items"] == []


class TestCheckout:

    def test_checkout_prices_and_clears_cart(self, client, customer, seller):
        product = create_product(client, seller, price=20.00, stock_quantity=5)
        address = create_address(client, customer)
        add_to_cart(client, customer, product["id"], 2)

        response = checkout(client, customer, address["id"])

        assert response.status_code == 201
        body = response.json()
        assert body["message"] == "Order placed successfully"
        assert body["total"] == 49.99  # 40.00 + 4.00 tax + 5.99 standard shipping
        assert client.get(f"{SHOP}/customer/cart", headers=customer.headers).json()["items"] == []
        assert client.get(f"{SHOP}/products/{product['id']}").json()["stock_quantity"] == 3

        order = client.get(f"{SHOP}/customer/orders/{body['order_ids'][0]}", headers=customer.headers).json()
        assert re.fullmatch(r"ORD-\d{8}-000001", order["order_number"])
        assert order["status"] == "payment_confirmed"
        assert (order["subtotal"], order["tax"], order["shipping"]) == (40.0, 4.0, 5.99)
        assert order["delivery_city"] == "Springfield"
        assert [(i["product_name"], i["quantity"]) for i in order["items"]] == [("Coffee mug", 2)]

    def test_one_order_per_seller(self, client, customer, join):
        first_seller, second_seller = join("seller"), join("seller")
        mug = create_product(client, first_seller, price=10.00)
        pen = create_product(client, second_seller, name="Pen", price=5.00)
        address = create_address(client, customer)
        add_to_cart(client, customer, mug["id"], 1)
        add_to_cart(client, customer, pen["id"], 2)

        body = checkout(client, customer, address["id"]).json()

        assert len(body["order_ids"]) == 2
        assert body["total"] == 33.98
        orders = [
            client.get(f"{SHOP}/customer/orders/{order_id}", headers=customer.headers).json()
            for order_id in body["order_ids"]
        ]
        assert len({o["checkout_transaction_id"] for o in orders}) == 1
        assert sorted(o["order_number"][-6:] for o in orders) == ["000001", "000002"]
        seller_view = client.get(f"{SHOP}/seller/orders", headers=second_seller.headers).json()
        assert seller_view["pagination"]["records"] == 1

    def test_order_numbers_continue_the_day(self, client, customer, seller):
        product = create_product(client, seller)
        address = create_address(client, customer)

        numbers = []
        for _ in range(2):
            add_to_cart(client, customer, product["id"])
            order_id = checkout(client, customer, address["id"]).json()["order_ids"][0]
            numbers.append(client.get(f"{SHOP}/customer/orders/{order_id}", headers=customer.headers).json()["order_number"])

        assert [n[-6:] for n in numbers] == ["000001", "000002"]

    def test_empty_cart(self, client, customer):
        address = create_address(client, customer)

        assert checkout(client, customer, address["id"]).status_code == 400

    def test_address_of_another_customer(self, client, join, seller):
        buyer, other = join("customer"), join("customer")
        product = create_product(client, seller)
        add_to_cart(client, buyer, product["id"])

        response = checkout(client, buyer, create_address(client, other)["id"])

        assert response.status_code == 404

    def test_product_deactivated_after_adding(self, client, customer, seller):
        product = create_product(client, seller)
        address = create_address(client, customer)
        add_to_cart(client, customer, product["id"])
        client.put(f"{SHOP}/seller/products/{product['id']}", json={"is_active": False}, headers=seller.headers)

        response = checkout(client, customer, address["id"])

        assert response.status_code == 400
        assert len(client.get(f"{SHOP}/customer/cart", headers=customer.headers).json()["items"]) == 1

    def test_stock_dropped_after_adding(self, client, customer, seller):
        product = create_product(client, seller, stock_quantity=5)
        address = create_address(client, customer)
        add_to_cart(client, customer, product["id"], 4)
        client.put(f"{SHOP}/seller/products/{product['id']}", json={"stock_quantity": 1}, headers=seller.headers)

        assert checkout(client, customer, address["id"]).status_code == 400

    def test_minimum_order_total(self, client, customer, seller):
        product = create_product(client, seller, price=1.00)
        address = create_address(client, customer)
        add_to_cart(client, customer, product["id"])

        assert checkout(client, customer, address["id"], "free_shipping").status_code == 400


class TestOrders:

    def test_customer_listing_and_status_filter(self, client, customer, placed_order):
        confirmed = client.get(
            f"{SHOP}/customer/orders", params={"status": "payment_confirmed"}, headers=customer.headers
        ).json()
        shipped = client.get(f"{SHOP}/customer/orders", params={"status": "shipped"}, headers=customer.headers).json()

        assert [o["id"] for o in confirmed["data"]] == [placed_order["id"]]
        assert shipped["data"] == []

    def test_other_customer_cannot_read_order(self, client, join, placed_order):
        other = join("customer")

        response = client.get(f"{SHOP}/customer/orders/{placed_order['id']}", headers=other.headers)

        assert response.status_code == 403

    def test_seller_moves_order_through_lifecycle(self, client, customer, seller, placed_order):
        url = f"{SHOP}/seller/orders/{placed_order['id']}/status"

        for status in ("processing", "shipped", "delivered"):
            response = client.put(url, json={"status": status}, headers=seller.headers)
            assert response.status_code == 200, response.text

        order = response.json()
        assert order["shipped_at"] is not None
        assert order["delivered_at"] is not None

        history = client.get(
            f"{SHOP}/customer/orders/{placed_order['id']}/history", headers=customer.headers
        ).json()
        assert [h["new_status"] for h in history["data"]] == [
            "payment_confirmed", "processing", "shipped", "delivered"
        ]
        assert history["data"][1]["previous_status"] == "payment_confirmed"

    def test_invalid_transition_is_conflict(self, client, seller, placed_order):
        response = client.put(
            f"{SHOP}/seller/orders/{placed_order['id']}/status", json={"status": "delivered"}, headers=seller.headers
        )

        assert response.status_code == 409

    def test_other_seller_cannot_update(self, client, join, placed_order):
        rival = join("seller")

        response = client.put(
            f"{SHOP}/seller/orders/{placed_order['id']}/status", json={"status": "processing"}, headers=rival.headers
        )

        assert response.status_code == 403

    def test_cancel_restores_stock(self, client, customer, placed_order):
        product_id = placed_order["items"][0]["product_id"]

        response = client.post(
            f"{SHOP}/customer/orders/{placed_order['id']}/cancel",
            json={"reason": "Changed my mind"},
            headers=customer.headers,
        )

        assert response.status_code == 200
        assert response.json()["status"] == "cancelled"
        assert response.json()["cancelled_at"] is not None
        assert client.get(f"{SHOP}/products/{product_id}").json()["stock_quantity"] == 10

    def test_cannot_cancel_shipped_order(self, client, customer, seller, placed_order):
        url = f"{SHOP}/seller/orders/{placed_order['id']}/status"
        client.put(url, json={"status": "processing"}, headers=seller.headers)
        client.put(url, json={"status": "shipped"}, headers=seller.headers)

        response = client.post(f"{SHOP}/customer/orders/{placed_order['id']}/cancel", headers=customer.headers)

        assert response.status_code == 409


class TestWishlist:

    def test_add_list_remove(self, client, customer, seller):
        product = create_product(client, seller)

        added = client.post(f"{SHOP}/customer/wishlist", json={"product_id": product["id"]}, headers=customer.headers)
        duplicate = client.post(
            f"{SHOP}/customer/wishlist", json={"product_id": product["id"]}, headers=customer.headers
        )
        listed = client.get(f"{SHOP}/customer/wishlist", headers=customer.headers).json()
        url = f"{SHOP}/customer/wishlist/{product['id']}"

        assert added.status_code == 201
        assert added.json()["product"]["name"] == "Coffee mug"
        assert duplicate.status_code == 409
        assert [item["product_id"] for item in listed["data"]] == [product["id"]]
        assert client.delete(url, headers=customer.headers).status_code == 204
        assert client.delete(url, headers=customer.headers).status_code == 404

    def test_missing_product(self, client, customer):
        response = client.post(f"{SHOP}/customer/wishlist", json={"product_id": str(uuid4())}, headers=customer.headers)

        assert response.status_code == 404

    def test_deleted_products_drop_out_of_wishlist(self, client, customer, seller):
        product = create_product(client, seller)
        client.post(f"{SHOP}/customer/wishlist", json={"product_id": product["id"]}, headers=customer.headers)
        client.delete(f"{SHOP}/seller/products/{product['id']}", headers=seller.headers)

        listed = client.get(f"{SHOP}/customer/wishlist", headers=customer.headers).json()

        assert listed["data"] == []
