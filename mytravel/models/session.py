"""
Session management - Per-visitor cart, itinerary and booking search state.
"""
from pydantic import BaseModel, Field
from typing import Optional
from datetime import datetime
from enum import Enum
import logging
import uuid
from pathlib import Path

from .booking import BookingResponse
from .cart import Cart
from .itinerary import Itinerary
from .search import BookingSearchState

logger = logging.getLogger(__name__)


class CheckoutState(str, Enum):
    """Where the session is in the checkout flow."""
    SHOPPING = "shopping"
    PROCESSING = "processing"
    FAILED = "failed"
    CONFIRMED = "confirmed"


class CheckoutAttempt(BaseModel):
    """Idempotency key bound to the cart revision it was issued for."""
    idempotency_key: str = Field(default_factory=lambda: str(uuid.uuid4()))
    cart_revision: int


class Session(BaseModel):
    """User session holding the explicit stores for one visitor."""
    session_id: str = Field(
        default_factory=lambda: str(uuid.uuid4()),
        description="Unique session identifier"
    )
    created_at: datetime = Field(
        default_factory=datetime.now,
        description="Session creation time"
    )
    updated_at: datetime = Field(
        default_factory=datetime.now,
        description="Last update time"
    )

    cart: Cart = Field(default_factory=Cart)
    itinerary: Itinerary = Field(default_factory=Itinerary)
    search: BookingSearchState = Field(default_factory=BookingSearchState)

    # Checkout
    checkout_state: CheckoutState = CheckoutState.SHOPPING
    checkout_attempt: Optional[CheckoutAttempt] = None
    last_error: Optional[str] = None
    confirmed_booking: Optional[BookingResponse] = None

    def touch(self):
        """Mark the session as modified."""
        self.updated_at = datetime.now()

    def checkout_key(self) -> str:
        """
        Idempotency key for the current checkout attempt.

        Reused while the cart is unchanged so a repeated submission of the
        same cart is recognised as the same attempt.
        """
        attempt = self.checkout_attempt
        if attempt is None or attempt.cart_revision != self.cart.revision:
            attempt = CheckoutAttempt(cart_revision=self.cart.revision)
            self.checkout_attempt = attempt
        return attempt.idempotency_key

    def confirm_checkout(self, booking: BookingResponse):
        """Record a confirmed booking and start a fresh cart."""
        self.cart.clear()
        self.checkout_attempt = None
        self.confirmed_booking = booking
        self.last_error = None
        self.checkout_state = CheckoutState.CONFIRMED
        self.touch()

    def fail_checkout(self, message: str):
        """Record a failed attempt. The cart is kept for a manual retry."""
        self.last_error = message
        self.checkout_state = CheckoutState.FAILED
        self.touch()

    def get_checkout_summary(self) -> dict:
        return {
            "state": self.checkout_state.value,
            "last_error": self.last_error,
            "booking": self.confirmed_booking.model_dump() if self.confirmed_booking else None,
        }


class SessionBackend:
    """Persistence boundary for sessions."""

    def load(self, session_id: str) -> Optional[Session]:
        raise NotImplementedError

    def save(self, session: Session):
        raise NotImplementedError

    def delete(self, session_id: str):
        raise NotImplementedError


class MemorySessionBackend(SessionBackend):
    """Keeps sessions in process memory; state is lost on restart."""

    def __init__(self):
        self._sessions: dict[str, Session] = {}

    def load(self, session_id: str) -> Optional[Session]:
        return self._sessions.get(session_id)

    def save(self, session: Session):
        self._sessions[session.session_id] = session

    def delete(self, session_id: str):
        self._sessions.pop(session_id, None)


class FileSessionBackend(SessionBackend):
    """Stores one JSON document per session in a directory."""

    def __init__(self, directory: str):
        self.directory = Path(directory)
        self.directory.mkdir(parents=True, exist_ok=True)

    def _path(self, session_id: str) -> Optional[Path]:
        # Session ids are generated UUIDs; reject anything that could escape the directory.
        try:
            uuid.UUID(session_id)
        except ValueError:
            return None
        return self.directory / f"{session_id}.json"

    def load(self, session_id: str) -> Optional[Session]:
        path = self._path(session_id)
        if path is None or not path.exists():
            return None
        try:
            return Session.model_validate_json(path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            logger.error(f"Could not load session {session_id}: {e}")
            return None

    def save(self, session: Session):
        path = self._path(session.session_id)
        if path is None:
            raise ValueError(f"Invalid session id: {session.session_id}")
        tmp_path = path.with_suffix(".tmp")
        tmp_path.write_text(session.model_dump_json(), encoding="utf-8")
        tmp_path.replace(path)

    def delete(self, session_id: str):
        path = self._path(session_id)
        if path is not None and path.exists():
            path.unlink()


class SessionStore:
    """Session store delegating to a pluggable backend."""

    def __init__(self, backend: Optional[SessionBackend] = None):
        self.backend = backend or MemorySessionBackend()

    def create(self) -> Session:
        """Create a new session."""
        session = Session()
        self.backend.save(session)
        logger.info(f"Created session {session.session_id}")
        return session

    def get(self, session_id: str) -> Optional[Session]:
        """Get a session by ID."""
        return self.backend.load(session_id)

    def update(self, session: Session):
        """Update a session."""
        session.touch()
        self.backend.save(session)

    def delete(self, session_id: str):
        """Delete a session."""
        self.backend.delete(session_id)


# Global session store
session_store: Optional[SessionStore] = None


def get_session_store() -> SessionStore:
    """Get or create the global session store."""
    global session_store
    if session_store is None:
        from ..config import settings
        if settings.session_backend == "file":
            backend = FileSessionBackend(settings.session_dir)
        else:
            backend = MemorySessionBackend()
        session_store = SessionStore(backend)
    return session_store
