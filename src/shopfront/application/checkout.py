"""Application service: Checkout use case.

Builds the order summary for the current cart. Placing the order is a
stub: no payment is taken and the cart is left untouched.
"""

from __future__ import annotations

from enum import Enum

from shopfront.application.cart_store import CartStore
from shopfront.application.dto import CheckoutSummaryDTO
from shopfront.domain.exceptions import ValidationError


class PaymentMethod(Enum):
    CREDIT_CARD = "credit-card"
    PAYPAL = "paypal"
    APPLE_PAY = "apple-pay"


class CheckoutHandler:

    def __init__(self, cart_store: CartStore) -> None:
        self._cart_store = cart_store

    def handle(
        self, payment_method: PaymentMethod = PaymentMethod.CREDIT_CARD
    ) -> CheckoutSummaryDTO:
        if self._cart_store.is_empty:
            raise ValidationError("Cart is empty — add some products before checking out")

        return CheckoutSummaryDTO(
            items=self._cart_store.line_dtos(),
            total=str(self._cart_store.total()),
            payment_method=payment_method.value,
        )
