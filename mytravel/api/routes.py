"""
API Routes for the MyTravel planner service.
"""
from fastapi import APIRouter, Depends, HTTPException, Response
from pydantic import BaseModel
from typing import Optional

from ..models.cart import CartItemInput
from ..models.booking import CheckoutRequest
from ..models.destination import Continent, DestinationType
from ..models.itinerary import ItineraryItemInput
from ..models.search import SearchTab
from ..models.session import Session, SessionStore, get_session_store
from ..services.booking_search import BookingSearch, get_booking_search
from ..services.catalog import DestinationCatalog, get_catalog
from ..services.checkout import CheckoutService, get_checkout_service
from ..services.exporter import ItineraryExporter
from ..services.session_lock import session_request_lock


router = APIRouter(prefix="/api", tags=["mytravel"])


# Request/Response Models
class CreateSessionResponse(BaseModel):
    session_id: str
    message: str


class ReorderRequest(BaseModel):
    source_index: int
    target_index: int


class SelectOfferRequest(BaseModel):
    tab: SearchTab
    offer_id: str


class TabRequest(BaseModel):
    tab: SearchTab


class DestinationRequest(BaseModel):
    tab: SearchTab
    destination: str = ""
    origin: bool = False


class PrefillRequest(BaseModel):
    destination: str


# Helpers

def load_session(session_id: str, store: SessionStore) -> Session:
    session = store.get(session_id)
    if not session:
        raise HTTPException(status_code=404, detail="Session not found")
    return session


# Sessions

@router.post("/session", response_model=CreateSessionResponse)
async def create_session(store: SessionStore = Depends(get_session_store)):
    """Create a new browsing session."""
    session = store.create()
    return CreateSessionResponse(
        session_id=session.session_id,
        message="Welcome to MyTravel! Start planning your trip."
    )


# Destinations

@router.get("/destinations")
async def list_destinations(
    q: Optional[str] = None,
    continent: Optional[Continent] = None,
    type: Optional[DestinationType] = None,
    popular: Optional[bool] = None,
    catalog: DestinationCatalog = Depends(get_catalog)
):
    """Search destinations, optionally narrowed by continent, type or popularity."""
    results = catalog.filter_destinations(q or "", continent, type, popular)
    return {"destinations": [d.model_dump() for d in results]}


@router.get("/destinations/{destination_id}")
async def get_destination(destination_id: str, catalog: DestinationCatalog = Depends(get_catalog)):
    destination = catalog.get_destination_by_id(destination_id)
    if not destination:
        raise HTTPException(status_code=404, detail="Destination not found")
    return destination.model_dump()


@router.get("/travel-destinations")
async def list_travel_destinations(catalog: DestinationCatalog = Depends(get_catalog)):
    return {"destinations": [d.model_dump() for d in catalog.list_travel_destinations()]}


@router.get("/travel-destinations/{destination_id}")
async def get_travel_destination(destination_id: str, catalog: DestinationCatalog = Depends(get_catalog)):
    destination = catalog.get_travel_destination(destination_id)
    if not destination:
        raise HTTPException(status_code=404, detail="Destination not found")
    return destination.model_dump()


# Itinerary

@router.get("/itinerary/{session_id}")
async def get_itinerary(session_id: str, store: SessionStore = Depends(get_session_store)):
    """Get the itinerary in planned order with its summary."""
    session = load_session(session_id, store)
    return session.itinerary.to_display_dict()


@router.post("/itinerary/{session_id}/items")
async def add_itinerary_item(
    session_id: str,
    request: ItineraryItemInput,
    store: SessionStore = Depends(get_session_store),
    catalog: DestinationCatalog = Depends(get_catalog)
):
    """Add an entry. Incomplete input is ignored and returns item=None."""
    session = load_session(session_id, store)
    item = session.itinerary.add(request, resolver=catalog)
    if item is not None:
        store.update(session)
    return {
        "item": item.model_dump() if item else None,
        "itinerary": session.itinerary.to_display_dict()
    }


@router.delete("/itinerary/{session_id}/items/{item_id}")
async def remove_itinerary_item(
    session_id: str,
    item_id: str,
    store: SessionStore = Depends(get_session_store)
):
    session = load_session(session_id, store)
    if session.itinerary.remove(item_id):
        store.update(session)
    return session.itinerary.to_display_dict()


@router.post("/itinerary/{session_id}/reorder")
async def reorder_itinerary(
    session_id: str,
    request: ReorderRequest,
    store: SessionStore = Depends(get_session_store)
):
    """Move an entry to a new position. Out-of-range indices change nothing."""
    session = load_session(session_id, store)
    if session.itinerary.reorder(request.source_index, request.target_index):
        store.update(session)
    return session.itinerary.to_display_dict()


@router.get("/itinerary/{session_id}/summary")
async def get_itinerary_summary(session_id: str, store: SessionStore = Depends(get_session_store)):
    session = load_session(session_id, store)
    return session.itinerary.aggregate().to_display_dict()


@router.get("/itinerary/{session_id}/export")
async def export_itinerary(session_id: str, store: SessionStore = Depends(get_session_store)):
    """Download the itinerary as a Markdown document."""
    session = load_session(session_id, store)
    exporter = ItineraryExporter()
    return Response(
        content=exporter.render_bytes(session.itinerary),
        media_type=exporter.media_type,
        headers={"Content-Disposition": f'attachment; filename="{exporter.filename()}"'}
    )


# Cart

@router.get("/cart/{session_id}")
async def get_cart(session_id: str, store: SessionStore = Depends(get_session_store)):
    session = load_session(session_id, store)
    return session.cart.to_display_dict()


@router.post("/cart/{session_id}/items")
async def add_cart_item(
    session_id: str,
    request: CartItemInput,
    store: SessionStore = Depends(get_session_store)
):
    session = load_session(session_id, store)
    item = session.cart.add_item(request)
    store.update(session)
    return {"item": item.model_dump(), "cart": session.cart.to_display_dict()}


@router.delete("/cart/{session_id}/items/{item_id}")
async def remove_cart_item(
    session_id: str,
    item_id: str,
    store: SessionStore = Depends(get_session_store)
):
    session = load_session(session_id, store)
    if session.cart.remove_item(item_id):
        store.update(session)
    return session.cart.to_display_dict()


@router.delete("/cart/{session_id}")
async def clear_cart(session_id: str, store: SessionStore = Depends(get_session_store)):
    session = load_session(session_id, store)
    session.cart.clear()
    store.update(session)
    return session.cart.to_display_dict()


# Booking search

@router.get("/booking/{session_id}/search")
async def search_offers(
    session_id: str,
    tab: SearchTab,
    q: Optional[str] = None,
    store: SessionStore = Depends(get_session_store),
    search: BookingSearch = Depends(get_booking_search)
):
    """Search flights, hotels or tours by destination."""
    session = load_session(session_id, store)
    results = search.search(session, tab, q)
    store.update(session)
    return {
        "tab": tab.value,
        "state": session.search.state.value,
        "results": [r.model_dump(by_alias=True) for r in results]
    }


@router.post("/booking/{session_id}/select")
async def select_offer(
    session_id: str,
    request: SelectOfferRequest,
    store: SessionStore = Depends(get_session_store),
    search: BookingSearch = Depends(get_booking_search)
):
    """Add an offer to the cart and move on to the next tab."""
    session = load_session(session_id, store)
    item = search.select(session, request.tab, request.offer_id)
    if item is None:
        raise HTTPException(status_code=404, detail="Offer not found")
    store.update(session)
    return {
        "item": item.model_dump(),
        "search": session.search.model_dump(),
        "cart": session.cart.to_display_dict()
    }


@router.get("/booking/{session_id}")
async def get_search_state(session_id: str, store: SessionStore = Depends(get_session_store)):
    session = load_session(session_id, store)
    return session.search.model_dump()


@router.put("/booking/{session_id}/tab")
async def set_tab(
    session_id: str,
    request: TabRequest,
    store: SessionStore = Depends(get_session_store),
    search: BookingSearch = Depends(get_booking_search)
):
    session = load_session(session_id, store)
    search.set_tab(session, request.tab)
    store.update(session)
    return session.search.model_dump()


@router.put("/booking/{session_id}/destination")
async def set_destination(
    session_id: str,
    request: DestinationRequest,
    store: SessionStore = Depends(get_session_store),
    search: BookingSearch = Depends(get_booking_search)
):
    session = load_session(session_id, store)
    search.set_destination(session, request.tab, request.destination, origin=request.origin)
    store.update(session)
    return session.search.model_dump()


@router.post("/booking/{session_id}/prefill")
async def prefill_destination(
    session_id: str,
    request: PrefillRequest,
    store: SessionStore = Depends(get_session_store),
    search: BookingSearch = Depends(get_booking_search)
):
    """Apply a destination hint from the browse pages."""
    session = load_session(session_id, store)
    matched = search.prefill(session, request.destination)
    store.update(session)
    return {"matched": matched, "search": session.search.model_dump()}


# Checkout

@router.post("/checkout/{session_id}")
async def checkout(
    session_id: str,
    request: CheckoutRequest,
    store: SessionStore = Depends(get_session_store),
    service: CheckoutService = Depends(get_checkout_service)
):
    """Pay for the cart and create the booking."""
    session = load_session(session_id, store)

    with session_request_lock(session_id) as acquired:
        if not acquired:
            raise HTTPException(status_code=409, detail="Checkout already in progress")
        result = await service.checkout(session, request)
        store.update(session)

    return {
        **result.model_dump(),
        "checkout": session.get_checkout_summary(),
        "cart": session.cart.to_display_dict()
    }
