"""Cart aggregate — the shopper's in-progress order.

The Cart owns its lines. Each line points at a product by id; prices are
resolved through a lookup at the moment a total is computed, so the cart
never holds a stale copy of a product.

Invariants:
- at most one line per product id
- a line never sits at quantity 0 (it is removed instead)
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from typing import Callable, Optional

from shopfront.domain.model.product import Product
from shopfront.domain.model.value_objects import Money

ProductLookup = Callable[[str], Optional[Product]]


@dataclass
class CartLine:
    product_id: str
    quantity: int
    id: str = field(default_factory=lambda: uuid.uuid4().hex)


@dataclass
class Cart:
    """Aggregate root for cart lines.

    No quantity validation happens here: callers clamp user input at the
    boundary (see ``clamp_quantity``).
    """

    lines: list[CartLine] = field(default_factory=list)

    def add(self, product: Product, quantity: int = 1) -> CartLine:
        """Increment the product's line, creating it on first add."""
        line = self.line_for(product.id)
        if line is not None:
            line.quantity += quantity
            return line
        line = CartLine(product_id=product.id, quantity=quantity)
        self.lines.append(line)
        return line

    def set_quantity(self, line_id: str, quantity: int) -> bool:
        """Update a line in place, or drop it when ``quantity <= 0``.

        Returns False when no line has ``line_id``.
        """
        line = self._find_line(line_id)
        if line is None:
            return False
        if quantity > 0:
            line.quantity = quantity
        else:
            self.lines.remove(line)
        return True

    def remove(self, line_id: str) -> bool:
        line = self._find_line(line_id)
        if line is None:
            return False
        self.lines.remove(line)
        return True

    def clear(self) -> None:
        self.lines.clear()

    # --- Computed properties --------------------------------------------------

    def total(self, lookup: ProductLookup) -> Money:
        """Sum of ``price * quantity`` over every line, computed fresh.

        Lines whose product can no longer be resolved contribute nothing.
        """
        result = Money.zero()
        for line in self.lines:
            product = lookup(line.product_id)
            if product is None:
                continue
            result = result + product.price * line.quantity
        return result

    @property
    def item_count(self) -> int:
        return sum(line.quantity for line in self.lines)

    def line_for(self, product_id: str) -> CartLine | None:
        for line in self.lines:
            if line.product_id == product_id:
                return line
        return None

    # --- Internal helpers -----------------------------------------------------

    def _find_line(self, line_id: str) -> CartLine | None:
        for line in self.lines:
            if line.id == line_id:
                return line
        return None


MIN_LINE_QUANTITY = 1
MAX_LINE_QUANTITY = 99


def clamp_quantity(requested: int) -> int:
    """Bring user-entered quantities into the 1..99 stepper range."""
    return max(MIN_LINE_QUANTITY, min(MAX_LINE_QUANTITY, requested))
