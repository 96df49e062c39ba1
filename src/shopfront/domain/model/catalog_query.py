"""Catalog view rules: search, category filter, sort and pagination.

Everything here is a pure function of the product sequence and a
``CatalogQuery``. The store recomputes the view on every read.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from decimal import Decimal
from enum import Enum
from typing import Sequence

from shopfront.domain.exceptions import ValidationError
from shopfront.domain.model.product import Product

DEFAULT_PAGE_SIZE = 10


class SortOption(Enum):
    FEATURED = "featured"
    PRICE_ASC = "price-asc"
    PRICE_DESC = "price-desc"
    NEWEST = "newest"
    HIGHEST_RATED = "highest-rated"

    @property
    def label(self) -> str:
        return _SORT_LABELS[self]


_SORT_LABELS = {
    SortOption.FEATURED: "Featured",
    SortOption.PRICE_ASC: "Price: Low to High",
    SortOption.PRICE_DESC: "Price: High to Low",
    SortOption.NEWEST: "Newest",
    SortOption.HIGHEST_RATED: "Highest Rated",
}


@dataclass(frozen=True)
class CatalogQuery:
    search_text: str = ""
    category: str | None = None
    sort_option: SortOption = SortOption.FEATURED

    def with_search_text(self, text: str) -> CatalogQuery:
        return replace(self, search_text=text)

    def with_category(self, category: str | None) -> CatalogQuery:
        return replace(self, category=category)

    def with_sort_option(self, option: SortOption) -> CatalogQuery:
        return replace(self, sort_option=option)


def apply_query(products: Sequence[Product], query: CatalogQuery) -> list[Product]:
    """Filter by name substring, then by category, then sort."""
    result = list(products)

    if query.search_text:
        needle = query.search_text.casefold()
        result = [p for p in result if needle in p.name.casefold()]

    if query.category is not None:
        result = [p for p in result if p.category == query.category]

    return sort_products(result, query.sort_option)


def sort_products(products: Sequence[Product], option: SortOption) -> list[Product]:
    """Stable sort per ``option``.

    FEATURED and HIGHEST_RATED share the same ordering (rating, descending).
    NEWEST orders by the id string, descending; ids are random so this is
    not a chronological order.
    """
    if option is SortOption.PRICE_ASC:
        return sorted(products, key=lambda p: p.price.amount)
    if option is SortOption.PRICE_DESC:
        return sorted(products, key=lambda p: p.price.amount, reverse=True)
    if option is SortOption.NEWEST:
        return sorted(products, key=lambda p: p.id, reverse=True)
    return sorted(products, key=lambda p: p.rating.value, reverse=True)


def paginate(products: Sequence[Product], page: int, page_size: int) -> list[Product]:
    """Return the 1-based ``page`` of ``products``; empty past the end."""
    if page_size <= 0:
        raise ValidationError("Page size must be positive")
    if page < 1:
        return []
    start = (page - 1) * page_size
    return list(products[start:start + page_size])


def page_count(total: int, page_size: int) -> int:
    if page_size <= 0:
        raise ValidationError("Page size must be positive")
    return (total + page_size - 1) // page_size


def categories_of(products: Sequence[Product]) -> list[str]:
    return sorted({p.category for p in products})


# ---------------------------------------------------------------------------
# Sub-category browsing (keyword in description plus a price window)
# ---------------------------------------------------------------------------
DEFAULT_MIN_PRICE = Decimal("0")
DEFAULT_MAX_PRICE = Decimal("1000")

# The category screen only reorders by price or rating.
_SUBCATEGORY_SORTS = frozenset(
    {SortOption.PRICE_ASC, SortOption.PRICE_DESC, SortOption.HIGHEST_RATED}
)


def filter_subcategory(
    products: Sequence[Product],
    category: str,
    keyword: str,
    min_price: Decimal = DEFAULT_MIN_PRICE,
    max_price: Decimal = DEFAULT_MAX_PRICE,
    sort_option: SortOption | None = None,
) -> list[Product]:
    """Products of ``category`` whose description mentions ``keyword``.

    The price window is inclusive on both ends. Price and rating sorts
    reorder the result; any other option keeps catalog order.
    """
    if min_price > max_price:
        raise ValidationError(
            f"Minimum price {min_price} is above maximum price {max_price}"
        )
    needle = keyword.casefold()
    matches = [
        p
        for p in products
        if p.category == category
        and needle in p.description.casefold()
        and min_price <= p.price.amount <= max_price
    ]
    if sort_option in _SUBCATEGORY_SORTS:
        return sort_products(matches, sort_option)
    return matches
