"""Product aggregate.

Products live independently of orders. Only the fulfillment engine may
change ``stock``; every other field belongs to catalog maintenance.
"""

from __future__ import annotations

from dataclasses import dataclass

from stockmanager.domain.exceptions import ValidationError
from stockmanager.domain.model.value_objects import Money

MIN_BATCH_SIZE = 2


@dataclass
class Product:
    """A product in the catalog.

    ``stock`` may be ``None``, meaning the product is not reordered.
    ``batch_size`` converts supplier quantities (batches) into units.
    """

    id: str
    name: str
    sale_price: Money
    purchase_price: Money
    stock: int | None
    min_stock: int = 0
    batch_size: int = MIN_BATCH_SIZE

    @staticmethod
    def create(
        id: str,
        name: str,
        sale_price: Money,
        purchase_price: Money,
        stock: int | None = 0,
        min_stock: int = 0,
        batch_size: int = MIN_BATCH_SIZE,
    ) -> Product:
        """Build a new product, enforcing catalog invariants."""
        if not name or not name.strip():
            raise ValidationError("Product name is required")
        if stock is not None and stock < 0:
            raise ValidationError("Product stock cannot be negative")
        if min_stock < 0:
            raise ValidationError("Product minimum stock cannot be negative")
        if batch_size < MIN_BATCH_SIZE:
            raise ValidationError(
                f"Product batch size must be at least {MIN_BATCH_SIZE}, got {batch_size}"
            )
        return Product(
            id=id,
            name=name.strip(),
            sale_price=sale_price,
            purchase_price=purchase_price,
            stock=stock,
            min_stock=min_stock,
            batch_size=batch_size,
        )

    @property
    def current_stock(self) -> int:
        """Stock as a number; an untracked (``None``) stock counts as zero."""
        return self.stock if self.stock is not None else 0
