"""Integration tests for the catalog query use cases.

Uses in-memory fake repositories, no database.
"""

import pytest

from foodlane.application.browse_foods import (
    CountFoodsHandler,
    ListFoodsHandler,
    ListSellerFoodsHandler,
    ShowFoodHandler,
    TopFoodsHandler,
)
from foodlane.domain.exceptions import ValidationError
from tests.fakes import FakeStore, make_food, uow_factory


def _catalog(n: int = 25) -> FakeStore:
    return FakeStore([make_food(f"F{i}", name=f"Food {i}") for i in range(1, n + 1)])


class TestListFoods:

    def test_second_page_returns_items_11_to_20(self):
        page = ListFoodsHandler(uow_factory(_catalog())).handle(page=2, size=10)
        assert [f.id for f in page] == [f"F{i}" for i in range(11, 21)]

    def test_last_partial_page(self):
        page = ListFoodsHandler(uow_factory(_catalog())).handle(page=3, size=10)
        assert [f.id for f in page] == [f"F{i}" for i in range(21, 26)]

    def test_beyond_last_page_is_empty(self):
        assert ListFoodsHandler(uow_factory(_catalog())).handle(page=4, size=10) == []

    def test_empty_catalog(self):
        assert ListFoodsHandler(uow_factory(FakeStore())).handle() == []

    @pytest.mark.parametrize("page,size", [(0, 10), (1, 0), (-1, 5)])
    def test_non_positive_arguments_rejected(self, page, size):
        with pytest.raises(ValidationError, match="must be positive"):
            ListFoodsHandler(uow_factory(_catalog())).handle(page=page, size=size)


class TestTopFoods:

    def _store(self) -> FakeStore:
        return FakeStore([
            make_food("C", order_count=3),
            make_food("A", order_count=5),
            make_food("D", order_count=0),
            make_food("B", order_count=3),
        ])

    def test_sorted_by_order_count(self):
        top = TopFoodsHandler(uow_factory(self._store())).handle(limit=2)
        assert top[0].id == "A"
        assert top[1].id in {"B", "C"}

    def test_ties_are_stable_across_calls(self):
        handler = TopFoodsHandler(uow_factory(self._store()))
        first = [f.id for f in handler.handle(limit=4)]
        second = [f.id for f in handler.handle(limit=4)]
        assert first == second

    def test_default_limit_is_six(self):
        store = FakeStore([make_food(f"F{i}", order_count=i) for i in range(10)])
        top = TopFoodsHandler(uow_factory(store)).handle()
        assert [f.order_count for f in top] == [9, 8, 7, 6, 5, 4]


class TestOtherQueries:

    def test_show_food(self):
        dto = ShowFoodHandler(uow_factory(_catalog(3))).handle("F2")
        assert dto.name == "Food 2"
        assert dto.price == "8.50"

    def test_show_missing_food_is_none(self):
        assert ShowFoodHandler(uow_factory(_catalog(3))).handle("nope") is None

    def test_list_by_seller(self):
        store = FakeStore([
            make_food("F1", seller="a@x.com"),
            make_food("F2", seller="b@x.com"),
            make_food("F3", seller="a@x.com"),
        ])
        foods = ListSellerFoodsHandler(uow_factory(store)).handle("a@x.com")
        assert [f.id for f in foods] == ["F1", "F3"]

    def test_count(self):
        assert CountFoodsHandler(uow_factory(_catalog(7))).handle() == 7
