"""Application service: Add Product use case."""

from __future__ import annotations

from stockmanager.application.dto import ProductDTO, product_to_dto
from stockmanager.domain.model.product import MIN_BATCH_SIZE, Product
from stockmanager.domain.model.value_objects import Money
from stockmanager.domain.repository.unit_of_work import UnitOfWork


class AddProductHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(
        self,
        name: str,
        sale_price: str,
        purchase_price: str,
        stock: int | None = 0,
        min_stock: int = 0,
        batch_size: int = MIN_BATCH_SIZE,
    ) -> ProductDTO:
        """Add a new product to the catalog."""
        with self._uow as uow:
            # Auto-assign ID based on existing products
            existing = uow.products.list_all()
            if existing:
                next_id = str(max(int(p.id) for p in existing) + 1)
            else:
                next_id = "1"

            product = Product.create(
                id=next_id,
                name=name,
                sale_price=Money.of(sale_price),
                purchase_price=Money.of(purchase_price),
                stock=stock,
                min_stock=min_stock,
                batch_size=batch_size,
            )
            uow.products.save(product)
            uow.commit()

        return product_to_dto(product)


class ListProductsHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(self) -> list[ProductDTO]:
        with self._uow as uow:
            return [product_to_dto(p) for p in uow.products.list_all()]
