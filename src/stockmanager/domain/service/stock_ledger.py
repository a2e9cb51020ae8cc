"""Stock Ledger: the only path through which product stock changes.

``adjust()`` stages ``stock + delta`` for a product and refuses any
result below zero. Staged values stay inside the ledger until
``commit()`` saves them through the product repository, which itself
belongs to the caller's unit of work. Sign and unit conversion are the
caller's business.
"""

from __future__ import annotations

import logging
from dataclasses import replace

from stockmanager.domain.exceptions import ProductStockError
from stockmanager.domain.model.product import Product
from stockmanager.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class StockLedger:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo
        self._staged: dict[str, Product] = {}

    def current(self, product_id: str) -> Product:
        """Return the product as this ledger sees it (staged value first)."""
        staged = self._staged.get(product_id)
        if staged is not None:
            return staged
        product = self._product_repo.get_by_id(product_id)
        if product is None:
            raise ProductStockError(
                f"Product {product_id} was not found",
                product_ids=(product_id,),
            )
        return product

    def adjust(self, product_id: str, delta: int) -> Product:
        """Stage ``stock + delta`` for *product_id*.

        Raises ProductStockError, staging nothing, if the new stock would
        be negative.
        """
        product = self.current(product_id)
        new_stock = product.current_stock + delta
        if new_stock < 0:
            logger.debug(
                "Product %s has stock %s, cannot apply %+d",
                product_id, product.current_stock, delta,
            )
            raise ProductStockError(
                f"Product {product_id} cannot have a negative stock "
                f"(stock {product.current_stock}, change {delta:+d})",
                product_ids=(product_id,),
            )
        staged = replace(product, stock=new_stock)
        self._staged[product_id] = staged
        return staged

    @property
    def staged(self) -> dict[str, int]:
        """Pending stock values keyed by product id."""
        return {pid: p.current_stock for pid, p in self._staged.items()}

    def commit(self) -> None:
        """Write every staged product through the repository."""
        for product in self._staged.values():
            self._product_repo.save(product)
        self._staged.clear()

    def discard(self) -> None:
        self._staged.clear()
