"""
Booking Search - Offer filtering and the tab-advancing selection flow.
"""
import logging
from typing import List, Optional, Union

from .catalog import DestinationCatalog, get_catalog
from ..models.cart import CartItem, CartItemInput, CartItemType
from ..models.destination import Flight, Hotel, Tour
from ..models.search import SearchState, SearchTab
from ..models.session import Session

logger = logging.getLogger(__name__)

Offer = Union[Flight, Hotel, Tour]


class BookingSearch:
    """
    Drives the booking form for one session.

    Searching is a pure filter over the static offers. Selecting adds the
    offer to the cart and moves to the next tab; that move is only a hint,
    callers may switch tabs at any time.
    """

    def __init__(self, catalog: Optional[DestinationCatalog] = None):
        self.catalog = catalog or get_catalog()

    def resolve_query(self, query: Optional[str]) -> str:
        """Turn a destination id into its city; free text passes through."""
        if not query:
            return ""
        destination = self.catalog.get_destination_by_id(query)
        return destination.city if destination else query

    def search_flights(self, to: str) -> List[Flight]:
        if not to:
            return list(self.catalog.flights)
        q = to.lower()
        return [f for f in self.catalog.flights if q in f.to.lower()]

    def search_hotels(self, location: str) -> List[Hotel]:
        if not location:
            return list(self.catalog.hotels)
        q = location.lower()
        return [h for h in self.catalog.hotels if q in h.location.lower()]

    def search_tours(self, location: str) -> List[Tour]:
        if not location:
            return list(self.catalog.tours)
        q = location.lower()
        return [t for t in self.catalog.tours if q in t.location.lower()]

    def search(
        self,
        session: Session,
        tab: SearchTab,
        query: Optional[str] = None
    ) -> List[Offer]:
        """
        Search the offers of a tab.

        When no query is given, the destination stored for the tab is used.
        """
        state = session.search
        state.state = SearchState.SEARCHING
        state.active_tab = tab

        if query is None:
            query = state.destination_for(tab).value
        location = self.resolve_query(query)

        if tab == SearchTab.FLIGHTS:
            results = self.search_flights(location)
        elif tab == SearchTab.HOTELS:
            results = self.search_hotels(location)
        else:
            results = self.search_tours(location)

        state.last_query = query
        state.last_result_ids = [r.id for r in results]
        state.state = SearchState.RESULTS_SHOWN
        session.touch()
        return results

    def find_offer(self, tab: SearchTab, offer_id: str) -> Optional[Offer]:
        offers = {
            SearchTab.FLIGHTS: self.catalog.flights,
            SearchTab.HOTELS: self.catalog.hotels,
            SearchTab.TOURS: self.catalog.tours,
        }[tab]
        for offer in offers:
            if offer.id == offer_id:
                return offer
        return None

    def select(self, session: Session, tab: SearchTab, offer_id: str) -> Optional[CartItem]:
        """
        Add an offer to the cart and advance the form.

        Returns None when the offer does not exist.
        """
        offer = self.find_offer(tab, offer_id)
        if offer is None:
            return None

        cart_item = session.cart.add_item(self._to_cart_input(offer))
        state = session.search
        state.state = SearchState.ITEM_SELECTED

        if isinstance(offer, Flight):
            self._prefill(session, offer.to, [SearchTab.HOTELS, SearchTab.TOURS])
            state.active_tab = tab.next()
        elif isinstance(offer, Hotel):
            self._prefill(session, offer.location, [SearchTab.TOURS])
            state.active_tab = tab.next()
        else:
            state.state = SearchState.IDLE

        state.last_result_ids = []
        logger.info(f"Session {session.session_id} selected {tab.value} offer {offer_id}")
        session.touch()
        return cart_item

    def set_tab(self, session: Session, tab: SearchTab):
        session.search.active_tab = tab
        session.search.state = SearchState.IDLE
        session.touch()

    def set_destination(self, session: Session, tab: SearchTab, destination: str, origin: bool = False):
        """Record a destination the user picked for a tab."""
        if origin:
            target = session.search.flight_from
        else:
            target = session.search.destination_for(tab)
        target.value = destination
        target.manual = bool(destination)
        session.touch()

    def prefill(self, session: Session, destination_hint: str) -> bool:
        """
        Apply a destination hint coming from the browse pages.

        Pre-sets the flight, hotel and tour destinations and opens the
        hotels tab. Returns False when the hint matches no destination.
        """
        match = self.catalog.match_destination(destination_hint)
        if match is None:
            return False

        for tab in SearchTab:
            target = session.search.destination_for(tab)
            if not target.manual:
                target.value = match.id
        session.search.active_tab = SearchTab.HOTELS
        session.touch()
        return True

    def _prefill(self, session: Session, place: str, tabs: List[SearchTab]):
        # Manual choices win over values carried forward from a selection.
        destination = self.catalog.find_destination_by_city(place)
        value = destination.id if destination else place
        for tab in tabs:
            target = session.search.destination_for(tab)
            if not target.manual:
                target.value = value

    @staticmethod
    def _to_cart_input(offer: Offer) -> CartItemInput:
        if isinstance(offer, Flight):
            return CartItemInput(
                type=CartItemType.FLIGHT,
                title=f"{offer.airline} to {offer.to}",
                details=f"{offer.origin} - {offer.to} | {offer.departure_time}",
                price=offer.price,
            )
        if isinstance(offer, Hotel):
            return CartItemInput(
                type=CartItemType.HOTEL,
                title=offer.name,
                details=f"{offer.location} | {offer.rating:g} Stars",
                price=offer.price_per_night,
                image=offer.image,
            )
        return CartItemInput(
            type=CartItemType.TOUR,
            title=offer.title,
            details=f"{offer.duration} | {offer.type}",
            price=offer.price,
            image=offer.image,
        )


# Global search instance
booking_search: Optional[BookingSearch] = None


def get_booking_search() -> BookingSearch:
    """Get or create the global booking search."""
    global booking_search
    if booking_search is None:
        booking_search = BookingSearch()
    return booking_search
