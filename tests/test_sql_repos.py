"""SQLAlchemy repositories and unit of work on SQLite."""

import pytest

from storefront.data.models import CartItemModel, OrderItemModel, OrderModel, ProductVariantModel
from storefront.domain.entities import NewOrder, NewOrderItem, Principal
from storefront.domain.errors import CartChanged, OrderPlacementFailed, StockConflict
from storefront.services.checkout_service import CheckoutService
from storefront.repos.unit_of_work import SqlUnitOfWork
from tests.factories import add_to_cart, cart_items_of, make_address, make_user, make_variant, stock_of


@pytest.fixture()
def uow(session_factory):
    session = session_factory()
    yield SqlUnitOfWork(session)
    session.close()


def test_decrement_stock_only_when_enough(db, uow):
    variant = make_variant(db, stock=5)

    assert uow.run(lambda u: u.variants.decrement_stock(variant.id, 3)) is True
    assert uow.run(lambda u: u.variants.decrement_stock(variant.id, 3)) is False
    assert stock_of(db, variant.id) == 2


def test_decrement_unknown_variant(uow):
    assert uow.run(lambda u: u.variants.decrement_stock("missing", 1)) is False


def test_load_cart_with_items(db, uow):
    user = make_user(db)
    variant = make_variant(db, stock=4, price="249.50", size="XL", color="Olive")
    add_to_cart(db, user, variant, 2)

    cart = uow.carts.load_cart_with_items(user.id)

    [line] = cart.lines
    assert (line.variant_id, line.size, line.color, line.stock, line.quantity) == (variant.id, "XL", "Olive", 4, 2)
    assert str(line.unit_price) == "249.50"
    assert str(cart.total) == "499.00"


def test_load_cart_for_user_without_cart(db, uow):
    assert uow.carts.load_cart_with_items(make_user(db).id) is None


def test_run_rolls_back_every_write(db, uow):
    user = make_user(db)
    address = make_address(db, user)
    variant = make_variant(db, stock=5)
    add_to_cart(db, user, variant, 1)
    cart = uow.carts.load_cart_with_items(user.id)

    def work(u):
        u.orders.create_order_with_items(
            NewOrder(
                user_id=user.id,
                address_id=address.id,
                total_amount=variant.product.selling_price,
                items=[NewOrderItem(variant_id=variant.id, quantity=1, price=variant.product.selling_price)],
            )
        )
        u.variants.decrement_stock(variant.id, 1)
        u.carts.clear_cart(cart.cart_id, [line.item_id for line in cart.lines])
        raise RuntimeError("boom")

    with pytest.raises(RuntimeError):
        uow.run(work)

    db.expire_all()
    assert db.query(OrderModel).count() == 0
    assert stock_of(db, variant.id) == 5
    assert len(cart_items_of(db, user)) == 1


def test_update_order_status_sets_tracking_number(db, uow):
    user = make_user(db)
    address = make_address(db, user)
    order_id = uow.run(
        lambda u: u.orders.create_order_with_items(
            NewOrder(user_id=user.id, address_id=address.id, total_amount=0, items=[])
        )
    )

    record = uow.run(lambda u: u.orders.update_order_status(order_id, "SHIPPED", "TRACK-9"))

    assert record.status.value == "SHIPPED"
    assert record.tracking_number == "TRACK-9"
    assert uow.orders.get_order(order_id).tracking_number == "TRACK-9"


def test_clear_cart_counts_only_items_still_there(db, uow):
    user = make_user(db)
    item = add_to_cart(db, user, make_variant(db), 1)
    item_id, cart_id = item.id, item.cart_id

    assert uow.run(lambda u: u.carts.clear_cart(cart_id, [item_id, "gone"])) == 1
    assert uow.run(lambda u: u.carts.clear_cart(cart_id, [item_id])) == 0


class TestSqlCheckout:
    """CheckoutService on a real session, with another session changing rows mid-checkout."""

    @pytest.fixture()
    def shopper(self, db):
        user = make_user(db)
        address = make_address(db, user)
        variant = make_variant(db, stock=5)
        add_to_cart(db, user, variant, 3)
        return Principal(user_id=user.id), user, address.id, variant.id

    def _uow_with(self, session_factory, interfere):
        class InterferingUnitOfWork(SqlUnitOfWork):
            def run(self, work):
                other = session_factory()
                try:
                    interfere(other)
                    other.commit()
                finally:
                    other.close()
                return super().run(work)

        return InterferingUnitOfWork(session_factory())

    def test_places_order(self, db, uow, shopper):
        principal, user, address_id, variant_id = shopper

        order_id = CheckoutService(uow).place_order(principal, address_id)

        db.expire_all()
        assert db.get(OrderModel, order_id).user_id == user.id
        assert stock_of(db, variant_id) == 2
        assert cart_items_of(db, user) == []

    def test_stock_sold_after_check_aborts_everything(self, db, session_factory, shopper):
        principal, user, address_id, variant_id = shopper

        def sell_four(session):
            session.get(ProductVariantModel, variant_id).stock = 1

        uow = self._uow_with(session_factory, sell_four)

        with pytest.raises(OrderPlacementFailed) as exc:
            CheckoutService(uow).place_order(principal, address_id)

        assert isinstance(exc.value.__cause__, StockConflict)
        db.expire_all()
        assert db.query(OrderModel).count() == 0
        assert db.query(OrderItemModel).count() == 0
        assert stock_of(db, variant_id) == 1
        assert [i.quantity for i in cart_items_of(db, user)] == [3]
        uow.db.close()

    def test_cart_already_checked_out_aborts(self, db, session_factory, shopper):
        principal, user, address_id, variant_id = shopper

        def empty_cart(session):
            session.query(CartItemModel).delete(synchronize_session=False)

        uow = self._uow_with(session_factory, empty_cart)

        with pytest.raises(OrderPlacementFailed) as exc:
            CheckoutService(uow).place_order(principal, address_id)

        assert isinstance(exc.value.__cause__, CartChanged)
        db.expire_all()
        assert db.query(OrderModel).count() == 0
        assert stock_of(db, variant_id) == 5
        uow.db.close()
