"""Application service: Cart Store.

Wraps the Cart aggregate with change notification. Products are resolved
by id through ``product_lookup`` (normally ``CatalogStore.get_product``),
so totals always reflect the catalog's current prices.
"""

from __future__ import annotations

import logging

from shopfront.application.dto import CartLineDTO
from shopfront.application.observable import Observable
from shopfront.domain.model.cart import Cart, CartLine, ProductLookup
from shopfront.domain.model.product import Product
from shopfront.domain.model.value_objects import Money

logger = logging.getLogger(__name__)


class CartStore(Observable):

    def __init__(self, product_lookup: ProductLookup, cart: Cart | None = None) -> None:
        super().__init__()
        self._lookup = product_lookup
        self._cart = cart or Cart()

    # --- Commands -------------------------------------------------------------

    def add(self, product: Product, quantity: int = 1) -> CartLine:
        line = self._cart.add(product, quantity)
        logger.debug("Cart: %s x%d (line %s)", product.name, line.quantity, line.id)
        self._notify()
        return line

    def set_quantity(self, line_id: str, quantity: int) -> None:
        """Update a line, removing it when ``quantity <= 0``."""
        if not self._cart.set_quantity(line_id, quantity):
            logger.debug("Cart: ignoring quantity change for unknown line %s", line_id)
            return
        self._notify()

    def remove(self, line_id: str) -> None:
        if not self._cart.remove(line_id):
            logger.debug("Cart: ignoring removal of unknown line %s", line_id)
            return
        self._notify()

    def clear(self) -> None:
        if not self._cart.lines:
            return
        self._cart.clear()
        self._notify()

    # --- Queries --------------------------------------------------------------

    def total(self) -> Money:
        return self._cart.total(self._lookup)

    def lines(self) -> list[CartLine]:
        return list(self._cart.lines)

    def line_for(self, product_id: str) -> CartLine | None:
        return self._cart.line_for(product_id)

    def item_count(self) -> int:
        return self._cart.item_count

    @property
    def is_empty(self) -> bool:
        return not self._cart.lines

    def line_dtos(self) -> list[CartLineDTO]:
        """Lines joined with their products, ready for display."""
        result: list[CartLineDTO] = []
        for line in self._cart.lines:
            product = self._lookup(line.product_id)
            if product is None:
                logger.warning("Cart line %s refers to unknown product %s", line.id, line.product_id)
                continue
            result.append(
                CartLineDTO(
                    line_id=line.id,
                    product_name=product.name,
                    quantity=line.quantity,
                    unit_price=str(product.price),
                    line_total=str(product.price * line.quantity),
                )
            )
        return result
