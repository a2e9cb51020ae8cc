"""Unit tests for the StockLedger."""

import pytest

from stockmanager.domain.exceptions import ProductStockError
from stockmanager.domain.model.product import Product
from stockmanager.domain.model.value_objects import Money
from stockmanager.domain.service.stock_ledger import StockLedger
from tests.fakes import FakeStore, FakeUnitOfWork


def _product(pid: str, stock: int | None, batch_size: int = 2) -> Product:
    return Product(
        id=pid,
        name=f"Product {pid}",
        sale_price=Money.of("10"),
        purchase_price=Money.of("6"),
        stock=stock,
        batch_size=batch_size,
    )


class TestAdjust:

    def test_stages_without_writing(self):
        store = FakeStore(products=[_product("A", 10)])
        with FakeUnitOfWork(store) as uow:
            ledger = StockLedger(uow.products)
            staged = ledger.adjust("A", -4)

            assert staged.stock == 6
            assert ledger.staged == {"A": 6}
            assert uow.products.get_by_id("A").stock == 10
        assert store.stock_of("A") == 10

    def test_negative_result_refused_and_not_staged(self):
        store = FakeStore(products=[_product("A", 3)])
        with FakeUnitOfWork(store) as uow:
            ledger = StockLedger(uow.products)
            with pytest.raises(ProductStockError, match="negative stock") as info:
                ledger.adjust("A", -4)

            assert info.value.product_id == "A"
            assert ledger.staged == {}

    def test_exactly_zero_allowed(self):
        store = FakeStore(products=[_product("A", 4)])
        with FakeUnitOfWork(store) as uow:
            assert StockLedger(uow.products).adjust("A", -4).stock == 0

    def test_adjustments_accumulate(self):
        store = FakeStore(products=[_product("A", 5)])
        with FakeUnitOfWork(store) as uow:
            ledger = StockLedger(uow.products)
            ledger.adjust("A", -3)
            with pytest.raises(ProductStockError):
                ledger.adjust("A", -3)
            assert ledger.staged == {"A": 2}

    def test_untracked_stock_counts_as_zero(self):
        store = FakeStore(products=[_product("A", None)])
        with FakeUnitOfWork(store) as uow:
            ledger = StockLedger(uow.products)
            assert ledger.adjust("A", 8).stock == 8
            with pytest.raises(ProductStockError):
                StockLedger(uow.products).adjust("A", -1)

    def test_unknown_product_refused(self):
        with FakeUnitOfWork() as uow:
            with pytest.raises(ProductStockError, match="not found") as info:
                StockLedger(uow.products).adjust("missing", 1)
        assert info.value.product_ids == ("missing",)


class TestCommit:

    def test_commit_saves_through_unit_of_work(self):
        store = FakeStore(products=[_product("A", 10), _product("B", 1)])
        with FakeUnitOfWork(store) as uow:
            ledger = StockLedger(uow.products)
            ledger.adjust("A", -1)
            ledger.adjust("B", 5)
            ledger.commit()
            assert ledger.staged == {}
            uow.commit()

        assert store.stock_of("A") == 9
        assert store.stock_of("B") == 6

    def test_discard_drops_staged_values(self):
        store = FakeStore(products=[_product("A", 10)])
        with FakeUnitOfWork(store) as uow:
            ledger = StockLedger(uow.products)
            ledger.adjust("A", -1)
            ledger.discard()
            ledger.commit()
            uow.commit()

        assert store.stock_of("A") == 10
