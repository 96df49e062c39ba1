"""Integration tests for the Checkout use case."""

import pytest

from shopfront.application.cart_store import CartStore
from shopfront.application.checkout import CheckoutHandler, PaymentMethod
from shopfront.domain.exceptions import ValidationError
from tests.fakes import make_product

BLENDER = make_product("Blender", price="59.99")
WALLET = make_product("Leather Wallet", price="49.99")


def _setup() -> tuple[CheckoutHandler, CartStore]:
    catalog = {p.id: p for p in (BLENDER, WALLET)}
    cart = CartStore(product_lookup=catalog.get)
    return CheckoutHandler(cart), cart


class TestCheckout:

    def test_summary_lists_lines_and_total(self):
        handler, cart = _setup()
        cart.add(BLENDER, 2)
        cart.add(WALLET)
        summary = handler.handle(PaymentMethod.PAYPAL)
        assert [i.product_name for i in summary.items] == ["Blender", "Leather Wallet"]
        assert summary.total == "$169.97"
        assert summary.payment_method == "paypal"

    def test_default_payment_is_credit_card(self):
        handler, cart = _setup()
        cart.add(BLENDER)
        assert handler.handle().payment_method == "credit-card"

    def test_checkout_leaves_cart_untouched(self):
        handler, cart = _setup()
        cart.add(BLENDER)
        handler.handle()
        assert cart.item_count() == 1

    def test_empty_cart_rejected(self):
        handler, _ = _setup()
        with pytest.raises(ValidationError, match="Cart is empty"):
            handler.handle()
