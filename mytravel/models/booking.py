"""
Booking models - Payloads exchanged with the booking-creation API and checkout results.
"""
from pydantic import BaseModel, Field
from typing import Optional
from datetime import datetime
from enum import Enum

from .cart import Cart


class BookingStatus(str, Enum):
    PENDING = "Pending"
    CONFIRMED = "Confirmed"
    CANCELLED = "Cancelled"


class BookingItemRequest(BaseModel):
    """One line of a booking, copied from a cart entry."""
    type: str
    title: str
    details: str = ""
    price: float = Field(..., ge=0)
    image_url: Optional[str] = None


class CreateBookingRequest(BaseModel):
    """Body sent to the booking-creation API."""
    customer_email: Optional[str] = None
    customer_name: Optional[str] = None
    payment_reference: str
    items: list[BookingItemRequest] = Field(default_factory=list)

    @classmethod
    def from_cart(
        cls,
        cart: Cart,
        payment_reference: str,
        customer_email: Optional[str] = None,
        customer_name: Optional[str] = None
    ) -> "CreateBookingRequest":
        """Build a booking request from the current cart contents."""
        return cls(
            customer_email=customer_email,
            customer_name=customer_name,
            payment_reference=payment_reference,
            items=[
                BookingItemRequest(
                    type=item.type.value,
                    title=item.title,
                    details=item.details,
                    price=item.price,
                    image_url=item.image,
                )
                for item in cart.items
            ],
        )

    def to_api_payload(self) -> dict:
        """Serialize using the API's camelCase field names."""
        return {
            "customerEmail": self.customer_email,
            "customerName": self.customer_name,
            "paymentReference": self.payment_reference,
            "items": [
                {
                    "type": item.type,
                    "title": item.title,
                    "details": item.details,
                    "price": item.price,
                    "imageUrl": item.image_url,
                }
                for item in self.items
            ],
        }


class BookingResponse(BaseModel):
    """Outcome of a successful booking creation."""
    id: int
    total_amount: float
    status: str = BookingStatus.CONFIRMED.value
    message: str = "Booking created successfully"

    @classmethod
    def from_api_payload(cls, data: dict) -> "BookingResponse":
        return cls(
            id=int(data["id"]),
            total_amount=float(data.get("totalAmount", data.get("total_amount", 0))),
            status=str(data.get("status", BookingStatus.CONFIRMED.value)),
            message=data.get("message", "Booking created successfully"),
        )


class BookingRecord(BaseModel):
    """A booking held by the in-process booking service."""
    id: int
    customer_email: str
    customer_name: str
    total_amount: float
    status: BookingStatus = BookingStatus.CONFIRMED
    created_at: datetime = Field(default_factory=datetime.now)
    confirmed_at: Optional[datetime] = None
    payment_reference: Optional[str] = None
    items: list[BookingItemRequest] = Field(default_factory=list)


class PaymentOutcome(str, Enum):
    """Result of the mock card check."""
    APPROVED = "approved"
    DECLINED = "declined"
    INVALID = "invalid"


class CheckoutRequest(BaseModel):
    """Payment form submitted at checkout."""
    cardholder_name: str = ""
    card_number: str = ""
    expiry: str = ""
    cvc: str = ""
    customer_email: Optional[str] = None
    customer_name: Optional[str] = None


class CheckoutResult(BaseModel):
    """What the confirmation or error screen shows."""
    success: bool
    message: str
    payment: Optional[PaymentOutcome] = None
    booking: Optional[BookingResponse] = None
    idempotency_key: Optional[str] = None
