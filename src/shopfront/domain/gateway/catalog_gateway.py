"""Abstract gateway for the paged product source.

Defined in the domain layer so the stores never depend on
infrastructure. The simulated static source lives in the
infrastructure layer; a REST client would sit beside it.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field

from shopfront.domain.model.product import Product


@dataclass(frozen=True)
class CatalogPage:
    """One batch of products and whether the source has more after it."""

    products: list[Product] = field(default_factory=list)
    has_more: bool = False


class CatalogGateway(ABC):

    @abstractmethod
    async def fetch_page(self, offset: int, limit: int | None) -> CatalogPage:
        """Return up to ``limit`` products starting at ``offset``.

        ``limit=None`` asks for everything from ``offset`` onward.
        Transport failures are raised as ``GatewayError``.
        """
