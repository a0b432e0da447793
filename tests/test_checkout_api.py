"""POST /checkout against a real SQLite database."""

from decimal import Decimal

from storefront.data.models import OrderItemModel, OrderModel
from tests.factories import add_to_cart, auth, cart_items_of, make_address, make_user, make_variant, stock_of


def test_places_order(client, db, notifier):
    user = make_user(db)
    address = make_address(db, user)
    variant = make_variant(db, stock=5, price="599.00")
    add_to_cart(db, user, variant, 3)

    response = client.post("/checkout", json={"addressId": address.id}, headers=auth(user))

    assert response.status_code == 201
    order_id = response.json()["orderId"]

    db.expire_all()
    order = db.get(OrderModel, order_id)
    assert order.user_id == user.id
    assert order.status == "PENDING"
    assert order.payment_method == "COD"
    assert order.payment_status == "UNPAID"
    assert Decimal(order.total_amount) == Decimal("1797.00")

    items = db.query(OrderItemModel).filter(OrderItemModel.order_id == order_id).all()
    assert [(i.variant_id, i.quantity, Decimal(i.price)) for i in items] == [
        (variant.id, 3, Decimal("599.00"))
    ]
    assert stock_of(db, variant.id) == 2
    assert cart_items_of(db, user) == []
    assert notifier.placed == [(user.id, order_id)]


def test_insufficient_stock(client, db):
    user = make_user(db)
    address = make_address(db, user)
    variant = make_variant(db, stock=2, size="L", color="Navy")
    add_to_cart(db, user, variant, 3)

    response = client.post("/checkout", json={"addressId": address.id}, headers=auth(user))

    assert response.status_code == 400
    assert response.json() == {"error": "Not enough stock for Navy L. Available: 2"}
    assert db.query(OrderModel).count() == 0
    assert stock_of(db, variant.id) == 2
    assert [i.quantity for i in cart_items_of(db, user)] == [3]


def test_empty_cart(client, db):
    user = make_user(db)
    address = make_address(db, user)

    response = client.post("/checkout", json={"addressId": address.id}, headers=auth(user))

    assert response.status_code == 400
    assert response.json() == {"error": "Cart is empty"}


def test_missing_address(client, db):
    user = make_user(db)

    response = client.post("/checkout", json={}, headers=auth(user))

    assert response.status_code == 400
    assert response.json() == {"error": "Please select a delivery address"}


def test_address_of_another_user(client, db):
    user = make_user(db)
    other = make_user(db)
    foreign = make_address(db, other)
    variant = make_variant(db, stock=5)
    add_to_cart(db, user, variant, 1)

    response = client.post("/checkout", json={"addressId": foreign.id}, headers=auth(user))

    assert response.status_code == 400
    assert response.json() == {"error": "Invalid address"}
    assert db.query(OrderModel).count() == 0
    assert stock_of(db, variant.id) == 5


def test_requires_token(client):
    response = client.post("/checkout", json={"addressId": "x"})

    assert response.status_code == 401
    assert response.json() == {"error": "Unauthorized"}


def test_rejects_bad_token(client):
    response = client.post(
        "/checkout",
        json={"addressId": "x"},
        headers={"Authorization": "Bearer not-a-token"},
    )

    assert response.status_code == 401


def test_checkout_in_progress(client, db, lock_service):
    user = make_user(db)
    address = make_address(db, user)
    variant = make_variant(db, stock=5)
    add_to_cart(db, user, variant, 1)
    lock_service.held[user.id] = "another-request"

    response = client.post("/checkout", json={"addressId": address.id}, headers=auth(user))

    assert response.status_code == 409
    assert db.query(OrderModel).count() == 0
    assert stock_of(db, variant.id) == 5


def test_second_checkout_sees_reduced_stock(client, db):
    variant = make_variant(db, stock=5, size="S", color="White")
    first, second = make_user(db), make_user(db)
    for user in (first, second):
        add_to_cart(db, user, variant, 3)
    first_address = make_address(db, first)
    second_address = make_address(db, second)

    ok = client.post("/checkout", json={"addressId": first_address.id}, headers=auth(first))
    rejected = client.post("/checkout", json={"addressId": second_address.id}, headers=auth(second))

    assert ok.status_code == 201
    assert rejected.status_code == 400
    assert rejected.json() == {"error": "Not enough stock for White S. Available: 2"}
    assert stock_of(db, variant.id) == 2
    assert db.query(OrderModel).count() == 1


def test_order_is_returned_when_notification_fails(client, db, notifier, monkeypatch):
    user = make_user(db)
    address = make_address(db, user)
    variant = make_variant(db, stock=5)
    add_to_cart(db, user, variant, 1)

    def broker_down(user_id, order_id):
        raise ConnectionError("broker down")

    monkeypatch.setattr(notifier, "send_order_placed", broker_down)

    response = client.post("/checkout", json={"addressId": address.id}, headers=auth(user))

    assert response.status_code == 201
    db.expire_all()
    assert db.get(OrderModel, response.json()["orderId"]) is not None
    assert stock_of(db, variant.id) == 4
