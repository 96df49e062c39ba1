"""Product value — one entry of the catalog.

Products are created once when the catalog is fetched and never mutated.
Cart lines refer to them by ``id`` only.
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass

from shopfront.domain.exceptions import ValidationError
from shopfront.domain.model.value_objects import Money, Rating


@dataclass(frozen=True)
class Product:
    """A product in the catalog.

    The ``__init__`` does no validation so fakes and gateways can build
    records cheaply; use ``Product.create()`` for untrusted input.
    """

    id: str
    name: str
    price: Money
    category: str
    description: str = ""
    rating: Rating = Rating(0.0)
    review_count: int = 0
    image_name: str = ""

    @staticmethod
    def create(
        name: str,
        price: Money,
        category: str,
        description: str = "",
        rating: float = 0.0,
        review_count: int = 0,
        image_name: str = "",
        product_id: str | None = None,
    ) -> Product:
        """Build a product, enforcing all invariants.

        A random identifier is generated when none is given.
        """
        if not name or not name.strip():
            raise ValidationError("Product name is required")
        if not category or not category.strip():
            raise ValidationError("Product category is required")
        if review_count < 0:
            raise ValidationError("Review count cannot be negative")

        return Product(
            id=product_id or str(uuid.uuid4()),
            name=name.strip(),
            price=price,
            category=category.strip(),
            description=description,
            rating=Rating(rating),
            review_count=review_count,
            image_name=image_name,
        )
