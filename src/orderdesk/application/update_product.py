"""Application service: Update Product use case."""

from __future__ import annotations

import logging

from orderdesk.domain.exceptions import UnknownProductError
from orderdesk.domain.model.product import Product
from orderdesk.domain.model.value_objects import Money
from orderdesk.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class UpdateProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, product_id: str, new_price: str) -> Product:
        """Update a product's price.

        This does NOT affect draft lines or orders that already exist;
        they captured a price snapshot when the line was added.
        """
        product = self._product_repo.get_by_id(product_id)
        if product is None:
            raise UnknownProductError(f"Product with ID '{product_id}' not found")

        product.update_price(Money.of(new_price, product.price.currency))
        self._product_repo.save(product)
        logger.info("Product #%s price updated to %s", product_id, product.price)
        return product
