"""Unit tests for the InventoryReservationService domain service."""

from concurrent.futures import ThreadPoolExecutor

import pytest

from foodlane.domain.exceptions import (
    EntityNotFoundError,
    InsufficientStockError,
    SelfPurchaseError,
    ValidationError,
)
from foodlane.domain.model.value_objects import Money
from foodlane.domain.service.inventory_reservation_service import (
    InventoryReservationService,
)
from tests.fakes import FakeOrderRepository, FakeStore, FakeUnitOfWork, make_food


def _service(store: FakeStore) -> InventoryReservationService:
    return InventoryReservationService(FakeUnitOfWork(store))


def _stock(store: FakeStore, food_id: str = "F1") -> tuple[int, int]:
    food = store.foods[food_id]
    return food.quantity, food.order_count


class TestPlaceOrder:

    def test_end_to_end_scenario(self):
        store = FakeStore([make_food("F1", seller="s@x.com", quantity=5)])

        order = _service(store).place_order("b@x.com", "F1", 3)

        assert _stock(store) == (2, 1)
        assert store.orders == {order.id: order}

        with pytest.raises(InsufficientStockError, match="Not enough food"):
            _service(store).place_order("b@x.com", "F1", 3)

        assert _stock(store) == (2, 1)
        assert len(store.orders) == 1

    def test_records_price_snapshot(self):
        store = FakeStore([make_food("F1", price="8.50", quantity=5)])
        order = _service(store).place_order("b@x.com", "F1", 2)
        assert order.unit_price == Money.of("8.50")
        assert order.total == Money.of("17.00")

    def test_commits_unit_of_work(self):
        store = FakeStore([make_food("F1")])
        uow = FakeUnitOfWork(store)
        InventoryReservationService(uow).place_order("b@x.com", "F1", 1)
        assert uow.committed

    def test_can_buy_entire_stock(self):
        store = FakeStore([make_food("F1", quantity=5)])
        _service(store).place_order("b@x.com", "F1", 5)
        assert _stock(store) == (0, 1)

    def test_self_purchase_rejected_without_side_effects(self):
        store = FakeStore([make_food("F1", seller="s@x.com", quantity=5)])

        with pytest.raises(SelfPurchaseError):
            _service(store).place_order("s@x.com", "F1", 1)

        assert _stock(store) == (5, 0)
        assert store.orders == {}

    def test_missing_food_rejected(self):
        store = FakeStore()
        with pytest.raises(EntityNotFoundError, match="not found"):
            _service(store).place_order("b@x.com", "nope", 1)

    def test_non_positive_quantity_rejected(self):
        store = FakeStore([make_food("F1")])
        with pytest.raises(ValidationError, match="must be positive"):
            _service(store).place_order("b@x.com", "F1", 0)
        assert _stock(store) == (5, 0)

    def test_order_failure_rolls_back_stock(self, monkeypatch):
        store = FakeStore([make_food("F1", quantity=5)])

        def broken_add(self, order):
            raise RuntimeError("ledger unavailable")

        monkeypatch.setattr(FakeOrderRepository, "add", broken_add)

        with pytest.raises(RuntimeError, match="ledger unavailable"):
            _service(store).place_order("b@x.com", "F1", 3)

        assert _stock(store) == (5, 0)
        assert store.orders == {}


class TestIdempotency:

    def test_same_key_returns_first_order(self):
        store = FakeStore([make_food("F1", quantity=5)])

        first = _service(store).place_order("b@x.com", "F1", 2, idempotency_key="k1")
        again = _service(store).place_order("b@x.com", "F1", 2, idempotency_key="k1")

        assert again.id == first.id
        assert _stock(store) == (3, 1)
        assert len(store.orders) == 1

    def test_keys_are_scoped_per_buyer(self):
        store = FakeStore([make_food("F1", quantity=5)])

        a = _service(store).place_order("a@x.com", "F1", 1, idempotency_key="k1")
        b = _service(store).place_order("b@x.com", "F1", 1, idempotency_key="k1")

        assert a.id != b.id
        assert _stock(store) == (3, 2)

    def test_without_key_each_call_is_new(self):
        store = FakeStore([make_food("F1", quantity=5)])
        _service(store).place_order("b@x.com", "F1", 1)
        _service(store).place_order("b@x.com", "F1", 1)
        assert len(store.orders) == 2


class TestConcurrentReservations:

    def test_no_oversell(self):
        store = FakeStore([make_food("F1", quantity=10)])
        requests = [3, 4, 2, 5, 1, 3, 2, 4]

        def attempt(qty: int) -> int:
            try:
                _service(store).place_order("b@x.com", "F1", qty)
            except InsufficientStockError:
                return 0
            return qty

        with ThreadPoolExecutor(max_workers=8) as pool:
            accepted = list(pool.map(attempt, requests))

        quantity, order_count = _stock(store)
        assert sum(accepted) <= 10
        assert quantity == 10 - sum(accepted)
        assert quantity >= 0
        assert order_count == sum(1 for q in accepted if q)
        assert sum(o.quantity.value for o in store.orders.values()) == sum(accepted)
