"""Unit tests for the Product aggregate."""

import pytest

from stockmanager.domain.exceptions import ValidationError
from stockmanager.domain.model.product import Product
from stockmanager.domain.model.value_objects import Money


def _create(**overrides) -> Product:
    fields = dict(
        id="1",
        name="Widget",
        sale_price=Money.of("15.00"),
        purchase_price=Money.of("9.00"),
        stock=10,
        min_stock=2,
        batch_size=6,
    )
    fields.update(overrides)
    return Product.create(**fields)


class TestProductCreation:

    def test_happy_path(self):
        product = _create(name="  Widget  ")
        assert product.name == "Widget"
        assert product.stock == 10
        assert product.batch_size == 6

    def test_untracked_stock_allowed(self):
        product = _create(stock=None)
        assert product.stock is None
        assert product.current_stock == 0

    def test_blank_name_rejected(self):
        with pytest.raises(ValidationError, match="name is required"):
            _create(name="   ")

    def test_negative_stock_rejected(self):
        with pytest.raises(ValidationError, match="stock cannot be negative"):
            _create(stock=-1)

    def test_batch_size_below_two_rejected(self):
        with pytest.raises(ValidationError, match="batch size must be at least 2"):
            _create(batch_size=1)

    def test_negative_min_stock_rejected(self):
        with pytest.raises(ValidationError, match="minimum stock"):
            _create(min_stock=-5)
