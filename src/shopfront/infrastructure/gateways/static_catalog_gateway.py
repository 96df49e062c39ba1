"""In-process CatalogGateway serving a fixed product list.

Slices the list like a paged REST endpoint would, after an artificial
delay.
"""

from __future__ import annotations

import asyncio

from shopfront.domain.gateway.catalog_gateway import CatalogGateway, CatalogPage
from shopfront.domain.model.product import Product


class StaticCatalogGateway(CatalogGateway):

    def __init__(self, products: list[Product], latency: float = 0.5) -> None:
        self._products = list(products)
        self._latency = latency

    async def fetch_page(self, offset: int, limit: int | None) -> CatalogPage:
        if self._latency > 0:
            await asyncio.sleep(self._latency)

        offset = max(0, offset)
        end = len(self._products) if limit is None else min(offset + limit, len(self._products))
        batch = self._products[offset:end]
        return CatalogPage(products=batch, has_more=end < len(self._products))
