"""Application service: Catalog Store.

Owns the loaded product sequence and the user's current view of it
(search text, category, sort, page). Derived views are recomputed on
every read; nothing is cached.

Fetching is delegated to a ``CatalogGateway``. Gateway failures never
escape this class: they end up in ``last_error``.
"""

from __future__ import annotations

import logging
from decimal import Decimal

from shopfront.application.observable import Observable
from shopfront.application.resilience import RetryPolicy, call_gateway
from shopfront.domain.exceptions import GatewayError
from shopfront.domain.gateway.catalog_gateway import CatalogGateway, CatalogPage
from shopfront.domain.model.catalog_query import (
    DEFAULT_MAX_PRICE,
    DEFAULT_MIN_PRICE,
    DEFAULT_PAGE_SIZE,
    CatalogQuery,
    SortOption,
    apply_query,
    categories_of,
    filter_subcategory,
    page_count,
    paginate,
)
from shopfront.domain.model.product import Product

logger = logging.getLogger(__name__)

NEAR_END_THRESHOLD = 5


class CatalogStore(Observable):

    def __init__(
        self,
        gateway: CatalogGateway,
        page_size: int = DEFAULT_PAGE_SIZE,
        near_end_threshold: int = NEAR_END_THRESHOLD,
        initial_load_size: int | None = None,
        retry_policy: RetryPolicy | None = None,
    ) -> None:
        super().__init__()
        self._gateway = gateway
        self._page_size = page_size
        self._near_end_threshold = near_end_threshold
        self._initial_load_size = initial_load_size
        self._retry_policy = retry_policy or RetryPolicy()

        self._products: list[Product] = []
        self._query = CatalogQuery()
        self.current_page = 1
        self.is_loading = False
        self.has_more = True
        self.last_error: str | None = None

    # --- Loading --------------------------------------------------------------

    async def load(self) -> None:
        """Populate the catalog once; later calls are no-ops."""
        if self._products or self.is_loading:
            logger.debug("Catalog already loaded or loading, skipping load()")
            return

        page = await self._fetch(offset=0, limit=self._initial_load_size)
        if page is not None:
            self._append(page)
            logger.info("Catalog loaded with %d products", len(self._products))
        self._notify()

    async def load_more_if_near_end(self, visible_product: Product) -> bool:
        """Fetch the next batch when ``visible_product`` is near the end.

        Returns True if a fetch was started.
        """
        position = self._position_of(visible_product.id)
        if position is None:
            return False
        if position < len(self._products) - self._near_end_threshold:
            return False
        if self.is_loading or not self.has_more:
            return False

        offset = len(self._products)
        page = await self._fetch(offset=offset, limit=self._page_size)
        if page is not None:
            self._append(page)
            logger.debug(
                "Loaded %d more products at offset %d (has_more=%s)",
                len(page.products), offset, self.has_more,
            )
        self._notify()
        return True

    # --- View setters ---------------------------------------------------------

    def set_search_text(self, text: str) -> None:
        self._update_query(self._query.with_search_text(text))

    def set_category(self, category: str | None) -> None:
        self._update_query(self._query.with_category(category))

    def set_sort_option(self, option: SortOption) -> None:
        self._update_query(self._query.with_sort_option(option))

    def set_page(self, page: int) -> None:
        self.current_page = max(1, page)
        self._notify()

    # --- Derived views --------------------------------------------------------

    @property
    def query(self) -> CatalogQuery:
        return self._query

    @property
    def page_size(self) -> int:
        return self._page_size

    @property
    def products(self) -> list[Product]:
        """The loaded sequence, unfiltered, in fetch order."""
        return list(self._products)

    def filtered_and_sorted(self) -> list[Product]:
        return apply_query(self._products, self._query)

    def page(self, n: int) -> list[Product]:
        return paginate(self.filtered_and_sorted(), n, self._page_size)

    def current_page_products(self) -> list[Product]:
        return self.page(self.current_page)

    def page_count(self) -> int:
        return page_count(len(self.filtered_and_sorted()), self._page_size)

    def categories(self) -> list[str]:
        return categories_of(self._products)

    def products_in_category(self, category: str) -> list[Product]:
        return [p for p in self._products if p.category == category]

    def subcategory(
        self,
        category: str,
        keyword: str,
        min_price: Decimal = DEFAULT_MIN_PRICE,
        max_price: Decimal = DEFAULT_MAX_PRICE,
        sort_option: SortOption | None = None,
    ) -> list[Product]:
        return filter_subcategory(
            self._products, category, keyword, min_price, max_price, sort_option
        )

    def get_product(self, product_id: str) -> Product | None:
        for product in self._products:
            if product.id == product_id:
                return product
        return None

    def find_by_name(self, name: str) -> Product | None:
        """Case-insensitive exact name match."""
        wanted = name.strip().casefold()
        for product in self._products:
            if product.name.casefold() == wanted:
                return product
        return None

    # --- Internal helpers -----------------------------------------------------

    async def _fetch(self, offset: int, limit: int | None) -> CatalogPage | None:
        self.is_loading = True
        self.last_error = None
        self._notify()
        try:
            return await call_gateway(
                lambda: self._gateway.fetch_page(offset, limit),
                self._retry_policy,
                "Catalog service",
            )
        except GatewayError as exc:
            logger.warning("Catalog fetch at offset %d failed: %s", offset, exc)
            self.last_error = str(exc)
            return None
        finally:
            self.is_loading = False

    def _append(self, page: CatalogPage) -> None:
        self._products.extend(page.products)
        self.has_more = page.has_more and bool(page.products)

    def _position_of(self, product_id: str) -> int | None:
        for index, product in enumerate(self._products):
            if product.id == product_id:
                return index
        return None

    def _update_query(self, query: CatalogQuery) -> None:
        self._query = query
        self.current_page = 1
        self._notify()
