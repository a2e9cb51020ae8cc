"""JSON-document-backed implementation of ProductRepository.

Works on the ``products`` section of a document owned by a
JsonUnitOfWork; nothing touches the disk until the unit of work commits.
"""

from __future__ import annotations

from decimal import Decimal

from stockmanager.domain.model.product import Product
from stockmanager.domain.model.value_objects import Money
from stockmanager.domain.repository.product_repository import ProductRepository
from stockmanager.infrastructure.persistence.records import decoding


class JsonProductRepository(ProductRepository):

    def __init__(self, records: list[dict]) -> None:
        self._records = records

    # --- ProductRepository interface ------------------------------------------

    def get_by_id(self, product_id: str) -> Product | None:
        for raw in self._records:
            if raw["id"] == product_id:
                return self._to_domain(raw)
        return None

    def list_all(self) -> list[Product]:
        return [self._to_domain(raw) for raw in self._records]

    def save(self, product: Product) -> None:
        for i, raw in enumerate(self._records):
            if raw["id"] == product.id:
                self._records[i] = self._to_raw(product)
                return
        self._records.append(self._to_raw(product))

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(product: Product) -> dict:
        return {
            "id": product.id,
            "name": product.name,
            "sale_price": str(product.sale_price.amount),
            "purchase_price": str(product.purchase_price.amount),
            "currency": product.sale_price.currency,
            "stock": product.stock,
            "min_stock": product.min_stock,
            "batch_size": product.batch_size,
        }

    @staticmethod
    def _to_domain(raw: dict) -> Product:
        with decoding("product", raw):
            currency = raw.get("currency", "EUR")
            stock = raw.get("stock")
            if stock is not None and (not isinstance(stock, int) or stock < 0):
                raise ValueError(f"invalid stock {stock!r}")
            return Product(
                id=raw["id"],
                name=raw["name"],
                sale_price=Money(Decimal(raw["sale_price"]), currency),
                purchase_price=Money(Decimal(raw["purchase_price"]), currency),
                stock=stock,
                min_stock=raw.get("min_stock", 0),
                batch_size=raw["batch_size"],
            )
