"""Tests for the simulated gateways and the seeded catalog."""

from shopfront.domain.service.credential_policy import FixedCredentialPolicy
from shopfront.infrastructure.gateways.simulated_auth_gateway import SimulatedAuthGateway
from shopfront.infrastructure.gateways.static_catalog_gateway import StaticCatalogGateway
from shopfront.infrastructure.seed_catalog import seed_products
from tests.fakes import numbered_products


class TestStaticCatalogGateway:

    async def test_whole_catalog_when_unlimited(self):
        gateway = StaticCatalogGateway(numbered_products(17), latency=0)
        page = await gateway.fetch_page(0, None)
        assert len(page.products) == 17
        assert page.has_more is False

    async def test_batches_and_has_more(self):
        gateway = StaticCatalogGateway(numbered_products(17), latency=0)
        first = await gateway.fetch_page(0, 10)
        second = await gateway.fetch_page(10, 10)
        assert len(first.products) == 10 and first.has_more is True
        assert len(second.products) == 7 and second.has_more is False

    async def test_offset_past_end_is_empty(self):
        gateway = StaticCatalogGateway(numbered_products(3), latency=0)
        page = await gateway.fetch_page(5, 10)
        assert page.products == []
        assert page.has_more is False


class TestSimulatedAuthGateway:

    async def test_applies_policy(self):
        gateway = SimulatedAuthGateway(FixedCredentialPolicy(), latency=0)
        assert (await gateway.verify("test@example.com", "password")).success is True
        rejected = await gateway.verify("test@example.com", "guess")
        assert rejected.success is False
        assert rejected.error == "Invalid credentials"


class TestSeedCatalog:

    def test_seventeen_products_in_four_categories(self):
        products = seed_products()
        assert len(products) == 17
        assert {p.category for p in products} == {"Sports", "Electronics", "Home", "Accessories"}

    def test_ids_are_unique(self):
        products = seed_products()
        assert len({p.id for p in products}) == len(products)
