"""Tests for the SQLAlchemy repositories against a SQLite file."""

from datetime import timezone

import pytest
from sqlalchemy.orm import sessionmaker

from foodlane.domain.exceptions import (
    DuplicateOrderError,
    EntityNotFoundError,
    InsufficientStockError,
)
from foodlane.domain.model.food import FoodItem
from foodlane.domain.model.order import Order
from foodlane.domain.model.user import User
from foodlane.domain.model.value_objects import Money, Quantity
from foodlane.infrastructure.bootstrap import build_engine, init_db
from foodlane.infrastructure.persistence.sql_unit_of_work import SqlAlchemyUnitOfWork
from tests.fakes import make_food


@pytest.fixture()
def uow_factory(tmp_path):
    engine = build_engine(f"sqlite:///{tmp_path / 'foodlane.db'}")
    init_db(engine)
    session_factory = sessionmaker(bind=engine, expire_on_commit=False)
    yield lambda: SqlAlchemyUnitOfWork(session_factory)
    engine.dispose()


def _seed(uow_factory, *foods: FoodItem) -> None:
    with uow_factory() as uow:
        for food in foods:
            uow.foods.add(food)
        uow.commit()


class TestSqlFoodRepository:

    def test_round_trip(self, uow_factory):
        food = FoodItem.create("s@x.com", "Ramen", Money.of("11.25"), 4, category="Noodles")
        _seed(uow_factory, food)

        with uow_factory() as uow:
            loaded = uow.foods.get_by_id(food.id)

        assert loaded == food

    def test_missing_is_none(self, uow_factory):
        with uow_factory() as uow:
            assert uow.foods.get_by_id("nope") is None

    def test_uncommitted_add_is_discarded(self, uow_factory):
        with uow_factory() as uow:
            uow.foods.add(make_food("F1"))

        with uow_factory() as uow:
            assert uow.foods.count() == 0

    def test_pagination_follows_insertion_order(self, uow_factory):
        _seed(uow_factory, *[make_food(f"F{i}") for i in range(1, 26)])

        with uow_factory() as uow:
            second = uow.foods.list_page(2, 10)
            beyond = uow.foods.list_page(4, 10)
            total = uow.foods.count()

        assert [f.id for f in second] == [f"F{i}" for i in range(11, 21)]
        assert beyond == []
        assert total == 25

    def test_top_ordered_with_stable_ties(self, uow_factory):
        _seed(
            uow_factory,
            make_food("C", order_count=3),
            make_food("A", order_count=5),
            make_food("B", order_count=3),
        )

        with uow_factory() as uow:
            first = [f.id for f in uow.foods.list_top_ordered(2)]
            again = [f.id for f in uow.foods.list_top_ordered(2)]

        assert first[0] == "A"
        assert first[1] in {"B", "C"}
        assert first == again

    def test_list_by_seller(self, uow_factory):
        _seed(
            uow_factory,
            make_food("F1", seller="a@x.com"),
            make_food("F2", seller="b@x.com"),
        )
        with uow_factory() as uow:
            assert [f.id for f in uow.foods.list_by_seller("a@x.com")] == ["F1"]

    def test_update_and_delete(self, uow_factory):
        _seed(uow_factory, make_food("F1", price="8.50"))

        with uow_factory() as uow:
            assert uow.foods.update("F1", {"price": Money.of("9.75"), "name": "Curry"})
            assert not uow.foods.update("nope", {"name": "X"})
            uow.commit()

        with uow_factory() as uow:
            food = uow.foods.get_by_id("F1")
            assert (food.name, food.price) == ("Curry", Money.of("9.75"))
            assert uow.foods.delete("F1")
            assert not uow.foods.delete("F1")
            uow.commit()

        with uow_factory() as uow:
            assert uow.foods.get_by_id("F1") is None

    def test_reserve_decrements_and_counts(self, uow_factory):
        _seed(uow_factory, make_food("F1", quantity=5))

        with uow_factory() as uow:
            uow.foods.reserve("F1", 3)
            uow.commit()

        with uow_factory() as uow:
            food = uow.foods.get_by_id("F1")
        assert (food.quantity, food.order_count) == (2, 1)

    def test_reserve_guard_rejects_oversell(self, uow_factory):
        _seed(uow_factory, make_food("F1", quantity=2))

        with uow_factory() as uow:
            with pytest.raises(InsufficientStockError, match="have 2 available"):
                uow.foods.reserve("F1", 3)

        with uow_factory() as uow:
            food = uow.foods.get_by_id("F1")
        assert (food.quantity, food.order_count) == (2, 0)

    def test_reserve_missing_food(self, uow_factory):
        with uow_factory() as uow:
            with pytest.raises(EntityNotFoundError):
                uow.foods.reserve("nope", 1)


class TestSqlOrderRepository:

    def _order(self, buyer="b@x.com", key=None) -> Order:
        return Order.place(make_food("F1"), buyer, Quantity(2), idempotency_key=key)

    def test_round_trip_keeps_utc_timestamp(self, uow_factory):
        order = self._order()
        with uow_factory() as uow:
            uow.orders.add(order)
            uow.commit()

        with uow_factory() as uow:
            [loaded] = uow.orders.list_by_buyer("b@x.com")

        assert loaded.created_at.tzinfo == timezone.utc
        assert loaded.unit_price == order.unit_price
        assert loaded.quantity == Quantity(2)
        assert loaded.food_name == "Pad Thai"

    def test_list_by_buyer(self, uow_factory):
        with uow_factory() as uow:
            uow.orders.add(self._order("a@x.com"))
            uow.orders.add(self._order("b@x.com"))
            uow.orders.add(self._order("a@x.com"))
            uow.commit()

        with uow_factory() as uow:
            assert len(uow.orders.list_by_buyer("a@x.com")) == 2
            assert uow.orders.list_by_buyer("c@x.com") == []

    def test_duplicate_idempotency_key(self, uow_factory):
        with uow_factory() as uow:
            uow.orders.add(self._order(key="k1"))
            uow.commit()

        with uow_factory() as uow:
            with pytest.raises(DuplicateOrderError):
                uow.orders.add(self._order(key="k1"))

    def test_lookup_by_idempotency_key(self, uow_factory):
        order = self._order(key="k1")
        with uow_factory() as uow:
            uow.orders.add(order)
            uow.orders.add(self._order())
            uow.commit()

        with uow_factory() as uow:
            assert uow.orders.get_by_idempotency_key("b@x.com", "k1").id == order.id
            assert uow.orders.get_by_idempotency_key("other@x.com", "k1") is None

    def test_delete(self, uow_factory):
        order = self._order()
        with uow_factory() as uow:
            uow.orders.add(order)
            uow.commit()

        with uow_factory() as uow:
            assert uow.orders.delete(order.id)
            uow.commit()

        with uow_factory() as uow:
            assert uow.orders.list_by_buyer("b@x.com") == []
            assert not uow.orders.delete(order.id)


class TestSqlUserRepository:

    def test_round_trip(self, uow_factory):
        with uow_factory() as uow:
            uow.users.add(User.register("b@x.com", name="Bea"))
            uow.commit()

        with uow_factory() as uow:
            user = uow.users.get_by_email("b@x.com")
            assert user.name == "Bea"
            assert user.created_at.tzinfo == timezone.utc
            assert uow.users.get_by_email("c@x.com") is None
