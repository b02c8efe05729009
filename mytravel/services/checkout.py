"""
Checkout - Mock payment followed by booking creation from the cart.
"""
import logging
from typing import Optional

from .booking_client import BookingClient, BookingError, get_booking_client
from .payment import (
    PAYMENT_MESSAGES,
    check_card,
    missing_payment_fields,
    payment_reference,
)
from ..models.booking import (
    CheckoutRequest,
    CheckoutResult,
    CreateBookingRequest,
    PaymentOutcome,
)
from ..models.session import CheckoutState, Session

logger = logging.getLogger(__name__)


class CheckoutService:
    """
    Runs one checkout attempt for a session.

    Failures never clear the cart; the user retries manually. Each attempt
    carries an idempotency key that stays the same until the cart changes
    or a booking is confirmed.
    """

    def __init__(self, client: Optional[BookingClient] = None):
        self.client = client or get_booking_client()

    async def checkout(self, session: Session, request: CheckoutRequest) -> CheckoutResult:
        if session.cart.is_empty():
            return self._fail(session, "Your cart is empty.")

        missing = missing_payment_fields(request)
        if missing:
            return self._fail(session, f"Missing required fields: {', '.join(missing)}")

        outcome = check_card(request.card_number)
        if outcome != PaymentOutcome.APPROVED:
            return self._fail(session, PAYMENT_MESSAGES[outcome], payment=outcome)

        key = session.checkout_key()
        booking_request = CreateBookingRequest.from_cart(
            session.cart,
            payment_reference=payment_reference(outcome),
            customer_email=request.customer_email,
            customer_name=request.customer_name or request.cardholder_name,
        )

        session.checkout_state = CheckoutState.PROCESSING
        try:
            booking = await self.client.create_booking(booking_request, idempotency_key=key)
        except BookingError as e:
            logger.warning(f"Checkout for session {session.session_id} failed: {e.message}")
            return self._fail(session, e.message, payment=outcome, idempotency_key=key)

        session.confirm_checkout(booking)
        logger.info(
            f"Session {session.session_id} confirmed booking #{booking.id} "
            f"for {booking.total_amount:.2f}"
        )
        return CheckoutResult(
            success=True,
            message=f"Booking confirmed! Your reference is #{booking.id}.",
            payment=outcome,
            booking=booking,
            idempotency_key=key,
        )

    @staticmethod
    def _fail(
        session: Session,
        message: str,
        payment: Optional[PaymentOutcome] = None,
        idempotency_key: Optional[str] = None
    ) -> CheckoutResult:
        session.fail_checkout(message)
        return CheckoutResult(
            success=False,
            message=message,
            payment=payment,
            idempotency_key=idempotency_key,
        )


# Global checkout instance
checkout_service: Optional[CheckoutService] = None


def get_checkout_service() -> CheckoutService:
    """Get or create the global checkout service."""
    global checkout_service
    if checkout_service is None:
        checkout_service = CheckoutService()
    return checkout_service
