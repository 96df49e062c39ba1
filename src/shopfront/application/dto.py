"""Data Transfer Objects — plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass

from shopfront.domain.model.product import Product


@dataclass(frozen=True)
class ItemSpec:
    """Input: what the shopper asked for (product name + quantity)."""

    product_name: str
    quantity: int


@dataclass(frozen=True)
class ProductDTO:
    id: str
    name: str
    category: str
    price: str  # formatted, e.g. "$15.00"
    rating: str
    review_count: int

    @staticmethod
    def from_product(product: Product) -> ProductDTO:
        return ProductDTO(
            id=product.id,
            name=product.name,
            category=product.category,
            price=str(product.price),
            rating=str(product.rating),
            review_count=product.review_count,
        )


@dataclass(frozen=True)
class CartLineDTO:
    """Output: a single cart line as displayed to the user."""

    line_id: str
    product_name: str
    quantity: int
    unit_price: str
    line_total: str


@dataclass(frozen=True)
class CheckoutSummaryDTO:
    """Output: the order summary shown before placing the order."""

    items: list[CartLineDTO]
    total: str
    payment_method: str
