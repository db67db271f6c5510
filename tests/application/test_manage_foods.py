"""Integration tests for the seller-side food use cases."""

import pytest

from foodlane.application.add_food import AddFoodHandler
from foodlane.application.remove_food import RemoveFoodHandler
from foodlane.application.update_food import UpdateFoodHandler
from foodlane.domain.exceptions import ValidationError
from foodlane.domain.model.value_objects import Money
from tests.fakes import FakeStore, make_food, uow_factory


class TestAddFood:

    def test_persists_new_listing(self):
        store = FakeStore()
        food = AddFoodHandler(uow_factory(store)).handle(
            seller_email="s@x.com", name="Ramen", price="11.00", quantity=4, category="Noodles"
        )
        saved = store.foods[food.id]
        assert saved.price == Money.of("11.00")
        assert saved.category == "Noodles"
        assert saved.order_count == 0

    def test_invalid_price_rejected(self):
        store = FakeStore()
        with pytest.raises(ValidationError, match="Invalid money amount"):
            AddFoodHandler(uow_factory(store)).handle(
                seller_email="s@x.com", name="Ramen", price="free", quantity=4
            )
        assert store.foods == {}


class TestUpdateFood:

    def test_updates_only_given_fields(self):
        store = FakeStore([make_food("F1", price="8.50", quantity=5)])
        result = UpdateFoodHandler(uow_factory(store)).handle("F1", {"price": "9.00"})

        assert (result.matched_count, result.modified_count) == (1, 1)
        assert store.foods["F1"].price == Money.of("9.00")
        assert store.foods["F1"].quantity == 5

    def test_missing_food_matches_nothing(self):
        result = UpdateFoodHandler(uow_factory(FakeStore())).handle("nope", {"name": "X"})
        assert (result.matched_count, result.modified_count) == (0, 0)

    def test_empty_change_set(self):
        store = FakeStore([make_food("F1")])
        result = UpdateFoodHandler(uow_factory(store)).handle("F1", {})
        assert (result.matched_count, result.modified_count) == (1, 0)

    def test_seller_cannot_be_changed(self):
        store = FakeStore([make_food("F1", seller="s@x.com")])
        with pytest.raises(ValidationError, match="immutable"):
            UpdateFoodHandler(uow_factory(store)).handle("F1", {"seller_email": "t@x.com"})
        assert store.foods["F1"].seller_email == "s@x.com"


class TestRemoveFood:

    def test_deletes(self):
        store = FakeStore([make_food("F1")])
        assert RemoveFoodHandler(uow_factory(store)).handle("F1") is True
        assert "F1" not in store.foods

    def test_missing_is_false(self):
        assert RemoveFoodHandler(uow_factory(FakeStore())).handle("F1") is False
