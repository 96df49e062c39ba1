"""Composition root — wires concrete gateways into the stores.

This is the only place in the codebase that knows about *all* layers.
Every store is created here and handed to the presentation layer through
the returned ``App``; nothing is a module-level singleton.
"""

from __future__ import annotations

from dataclasses import dataclass

from shopfront.application.auth_gate import AuthGate
from shopfront.application.cart_store import CartStore
from shopfront.application.catalog_store import CatalogStore
from shopfront.application.checkout import CheckoutHandler
from shopfront.application.profile_store import ProfileStore
from shopfront.domain.exceptions import ValidationError
from shopfront.domain.gateway.auth_gateway import AuthGateway
from shopfront.domain.gateway.catalog_gateway import CatalogGateway
from shopfront.domain.service.credential_policy import POLICIES, CredentialPolicy
from shopfront.infrastructure.config import Settings
from shopfront.infrastructure.gateways.simulated_auth_gateway import SimulatedAuthGateway
from shopfront.infrastructure.gateways.static_catalog_gateway import StaticCatalogGateway
from shopfront.infrastructure.seed_catalog import seed_products


@dataclass
class App:
    settings: Settings
    catalog: CatalogStore
    cart: CartStore
    auth: AuthGate
    profile: ProfileStore
    checkout: CheckoutHandler


def credential_policy(name: str) -> CredentialPolicy:
    try:
        return POLICIES[name]()
    except KeyError:
        raise ValidationError(
            f"Unknown auth policy '{name}' (expected one of: {', '.join(POLICIES)})"
        ) from None


def build_app(
    settings: Settings | None = None,
    catalog_gateway: CatalogGateway | None = None,
    auth_gateway: AuthGateway | None = None,
) -> App:
    settings = settings or Settings()

    if catalog_gateway is None:
        catalog_gateway = StaticCatalogGateway(seed_products(), latency=settings.catalog_latency)
    if auth_gateway is None:
        auth_gateway = SimulatedAuthGateway(
            credential_policy(settings.auth_policy), latency=settings.login_latency
        )

    catalog = CatalogStore(
        catalog_gateway,
        page_size=settings.page_size,
        near_end_threshold=settings.near_end_threshold,
        initial_load_size=settings.initial_load_size,
        retry_policy=settings.catalog_retry_policy,
    )
    cart = CartStore(product_lookup=catalog.get_product)

    return App(
        settings=settings,
        catalog=catalog,
        cart=cart,
        auth=AuthGate(auth_gateway, retry_policy=settings.auth_retry_policy),
        profile=ProfileStore(),
        checkout=CheckoutHandler(cart),
    )
