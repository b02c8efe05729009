"""
Mock payment - Fixed-pattern card check used by checkout.
"""
import re
import uuid
from typing import Optional

from ..models.booking import CheckoutRequest, PaymentOutcome


SUCCESS_CARD = "4242424242424242"
DECLINE_CARD = "4000000000000000"
ALLOWED_PREFIX = "42"

PAYMENT_MESSAGES = {
    PaymentOutcome.APPROVED: "Payment successful.",
    PaymentOutcome.DECLINED: "Card declined. Please try a different payment method.",
    PaymentOutcome.INVALID: "Invalid card number for testing. Use 4242 4242 4242 4242 for success.",
}


def clean_card_number(card_number: str) -> str:
    return re.sub(r"\s", "", card_number or "")


def check_card(card_number: str) -> PaymentOutcome:
    """Classify a card number: the test number and the allowed prefix pass."""
    number = clean_card_number(card_number)
    if number == SUCCESS_CARD:
        return PaymentOutcome.APPROVED
    if number == DECLINE_CARD:
        return PaymentOutcome.DECLINED
    if number.startswith(ALLOWED_PREFIX):
        return PaymentOutcome.APPROVED
    return PaymentOutcome.INVALID


def missing_payment_fields(request: CheckoutRequest) -> list[str]:
    """Names of required payment form fields left empty."""
    required = ["cardholder_name", "card_number", "expiry", "cvc"]
    return [f for f in required if not getattr(request, f).strip()]


def payment_reference(outcome: PaymentOutcome) -> Optional[str]:
    """Reference recorded with the booking for an approved payment."""
    if outcome != PaymentOutcome.APPROVED:
        return None
    return f"MOCK-{uuid.uuid4().hex[:12].upper()}"
