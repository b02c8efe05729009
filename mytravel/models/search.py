"""
Booking search state - Active tab, per-tab destinations and the selection flow state.
"""
from pydantic import BaseModel, Field
from typing import Optional
from enum import Enum


class SearchTab(str, Enum):
    """Booking form tabs, in the order the flow advances through them."""
    FLIGHTS = "flights"
    HOTELS = "hotels"
    TOURS = "tours"

    def next(self) -> "SearchTab":
        order = list(SearchTab)
        index = order.index(self)
        return order[min(index + 1, len(order) - 1)]


class SearchState(str, Enum):
    """Where the user is in the search/selection flow."""
    IDLE = "idle"
    SEARCHING = "searching"
    RESULTS_SHOWN = "results_shown"
    ITEM_SELECTED = "item_selected"


class TabDestination(BaseModel):
    """Destination chosen for one tab and whether the user picked it."""
    value: str = ""
    manual: bool = False


class BookingSearchState(BaseModel):
    """Per-session view state of the booking form."""
    active_tab: SearchTab = SearchTab.FLIGHTS
    state: SearchState = SearchState.IDLE
    flight_from: TabDestination = Field(default_factory=TabDestination)
    destinations: dict[SearchTab, TabDestination] = Field(
        default_factory=lambda: {tab: TabDestination() for tab in SearchTab}
    )
    last_query: Optional[str] = None
    last_result_ids: list[str] = Field(default_factory=list)

    def destination_for(self, tab: SearchTab) -> TabDestination:
        if tab not in self.destinations:
            self.destinations[tab] = TabDestination()
        return self.destinations[tab]
