"""
Booking Client - Submits cart contents to the booking-creation API.
Supports the remote HTTP API or an in-process mock service.
"""
import httpx
import logging
from datetime import datetime
from typing import Dict, Optional

from ..config import get_booking_config
from ..models.booking import (
    BookingRecord,
    BookingResponse,
    BookingStatus,
    CreateBookingRequest,
)

logger = logging.getLogger(__name__)

IDEMPOTENCY_HEADER = "Idempotency-Key"


class BookingError(Exception):
    """The booking could not be created."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class MockBookingService:
    """
    In-process stand-in for the booking API.

    Requests carrying an idempotency key that was already processed get
    the original response back instead of a second booking.
    """

    def __init__(self):
        self._bookings: Dict[int, BookingRecord] = {}
        self._responses: Dict[str, BookingResponse] = {}
        self._next_id = 1

    async def create_booking(
        self,
        request: CreateBookingRequest,
        idempotency_key: Optional[str] = None
    ) -> BookingResponse:
        if idempotency_key and idempotency_key in self._responses:
            logger.info(f"Duplicate booking request {idempotency_key}, returning original")
            return self._responses[idempotency_key]

        if not request.items:
            raise BookingError("At least one booking item is required", status_code=400)
        if not (request.customer_email or "").strip() or not (request.customer_name or "").strip():
            raise BookingError(
                "Customer email and name are required for guest checkout",
                status_code=400
            )

        now = datetime.now()
        record = BookingRecord(
            id=self._next_id,
            customer_email=request.customer_email.strip(),
            customer_name=request.customer_name.strip(),
            total_amount=sum(i.price for i in request.items),
            status=BookingStatus.CONFIRMED,
            created_at=now,
            confirmed_at=now,
            payment_reference=request.payment_reference,
            items=list(request.items),
        )
        self._bookings[record.id] = record
        self._next_id += 1

        response = BookingResponse(
            id=record.id,
            total_amount=record.total_amount,
            status=record.status.value,
        )
        if idempotency_key:
            self._responses[idempotency_key] = response
        return response

    def get_booking(self, booking_id: int) -> Optional[BookingRecord]:
        return self._bookings.get(booking_id)

    @property
    def booking_count(self) -> int:
        return len(self._bookings)


class BookingClient:
    """Async client for the booking-creation API."""

    def __init__(
        self,
        provider: Optional[str] = None,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None
    ):
        config = get_booking_config()
        self.provider = provider or config["provider"]
        self.base_url = (base_url or config.get("base_url") or "").rstrip("/")
        self.timeout = timeout if timeout is not None else config["timeout"]
        self._transport = transport

        if self.provider == "mock":
            self._mock = MockBookingService()
        else:
            self._mock = None

    @property
    def mock(self) -> Optional[MockBookingService]:
        return self._mock

    async def create_booking(
        self,
        request: CreateBookingRequest,
        idempotency_key: Optional[str] = None
    ) -> BookingResponse:
        """
        Create a booking from the request.

        Args:
            request: Customer details, payment reference and items
            idempotency_key: Identifies the checkout attempt; repeated
                submissions with the same key create one booking

        Returns:
            The created booking

        Raises:
            BookingError: The API rejected the request or was unreachable
        """
        if self._mock is not None:
            return await self._mock.create_booking(request, idempotency_key)

        headers = {"Accept": "application/json"}
        if idempotency_key:
            headers[IDEMPOTENCY_HEADER] = idempotency_key

        async with httpx.AsyncClient(
            base_url=self.base_url,
            timeout=self.timeout,
            transport=self._transport
        ) as client:
            try:
                response = await client.post(
                    "/api/bookings",
                    json=request.to_api_payload(),
                    headers=headers
                )
            except httpx.HTTPError as e:
                logger.error(f"Booking API unreachable: {e}")
                raise BookingError("Booking service is unavailable. Please try again.") from e

        if response.is_error:
            message = self._error_message(response)
            logger.error(f"Booking API error {response.status_code}: {message}")
            raise BookingError(message, status_code=response.status_code)

        try:
            return BookingResponse.from_api_payload(response.json())
        except (ValueError, KeyError, TypeError) as e:
            logger.error(f"Unexpected booking API response: {e}")
            raise BookingError("Unexpected response from booking service.") from e

    @staticmethod
    def _error_message(response: httpx.Response) -> str:
        try:
            data = response.json()
        except ValueError:
            data = None
        if isinstance(data, dict) and data.get("message"):
            return str(data["message"])
        return f"Booking failed with status {response.status_code}"


# Global client instance
booking_client: Optional[BookingClient] = None


def get_booking_client() -> BookingClient:
    """Get or create the global booking client."""
    global booking_client
    if booking_client is None:
        booking_client = BookingClient()
    return booking_client
