"""
Destination Catalog.
Read-only lookups over the static destination and offer data.
"""
import logging
from typing import List, Optional

from ..data import catalog as catalog_data
from ..models.destination import (
    Continent,
    Destination,
    DestinationType,
    Flight,
    Hotel,
    Tour,
    TravelDestination,
)

logger = logging.getLogger(__name__)


class DestinationCatalog:
    """Lookup service for destinations and bookable offers."""

    def __init__(
        self,
        destinations: Optional[List[Destination]] = None,
        travel_destinations: Optional[List[TravelDestination]] = None,
        flights: Optional[List[Flight]] = None,
        hotels: Optional[List[Hotel]] = None,
        tours: Optional[List[Tour]] = None,
    ):
        if destinations is None:
            destinations = [
                Destination(
                    id=row[0], name=row[1], city=row[2], country=row[3],
                    continent=row[4], code=row[5], type=row[6], popular=row[7],
                )
                for row in catalog_data.DESTINATION_ROWS
            ]
        if travel_destinations is None:
            travel_destinations = [
                TravelDestination.model_validate(d) for d in catalog_data.TRAVEL_DESTINATIONS
            ]
        if flights is None:
            flights = [Flight.model_validate(f) for f in catalog_data.FLIGHTS]
        if hotels is None:
            hotels = [Hotel.model_validate(h) for h in catalog_data.HOTELS]
        if tours is None:
            tours = [Tour.model_validate(t) for t in catalog_data.TOURS]

        self.destinations = destinations
        self.travel_destinations = travel_destinations
        self.flights = flights
        self.hotels = hotels
        self.tours = tours
        self._by_id = {d.id: d for d in destinations}

        logger.debug(
            f"Catalog loaded: {len(destinations)} destinations, "
            f"{len(flights)} flights, {len(hotels)} hotels, {len(tours)} tours"
        )

    # Destination lookups

    def get_destination_by_id(self, destination_id: str) -> Optional[Destination]:
        return self._by_id.get(destination_id)

    def get_destination_name(self, destination_id: str) -> Optional[str]:
        """Resolve a destination id to its display name."""
        destination = self.get_destination_by_id(destination_id)
        return destination.name if destination else None

    def search_destinations(self, query: str) -> List[Destination]:
        """Case-insensitive substring match on name, city, country or code."""
        q = (query or "").lower()
        return [
            d for d in self.destinations
            if q in d.name.lower()
            or q in d.city.lower()
            or q in d.country.lower()
            or q in d.code.lower()
        ]

    def get_popular_destinations(self) -> List[Destination]:
        return [d for d in self.destinations if d.popular]

    def get_destinations_by_continent(self, continent: Continent) -> List[Destination]:
        return [d for d in self.destinations if d.continent == continent]

    def get_destinations_by_type(self, destination_type: DestinationType) -> List[Destination]:
        return [d for d in self.destinations if d.type == destination_type]

    def filter_destinations(
        self,
        query: str = "",
        continent: Optional[Continent] = None,
        destination_type: Optional[DestinationType] = None,
        popular: Optional[bool] = None,
    ) -> List[Destination]:
        """Search, then narrow by continent, type and popularity. Keeps catalog order."""
        allowed = {d.id for d in self.search_destinations(query)}
        if continent is not None:
            allowed &= {d.id for d in self.get_destinations_by_continent(continent)}
        if destination_type is not None:
            allowed &= {d.id for d in self.get_destinations_by_type(destination_type)}
        if popular is not None:
            popular_ids = {d.id for d in self.get_popular_destinations()}
            allowed = allowed & popular_ids if popular else allowed - popular_ids
        return [d for d in self.destinations if d.id in allowed]

    def match_destination(self, text: str) -> Optional[Destination]:
        """
        Find the destination a free-text hint refers to.

        Matches when the hint contains the city or name, or the name
        contains the hint.
        """
        hint = (text or "").strip().lower()
        if not hint:
            return None
        for d in self.destinations:
            if d.city.lower() in hint or d.name.lower() in hint or hint in d.name.lower():
                return d
        return None

    def find_destination_by_city(self, place: str) -> Optional[Destination]:
        """First destination whose city appears in the given place name."""
        place = (place or "").lower()
        for d in self.destinations:
            if d.city.lower() in place:
                return d
        return None

    # Destination cards

    def list_travel_destinations(self) -> List[TravelDestination]:
        return list(self.travel_destinations)

    def get_travel_destination(self, destination_id: str) -> Optional[TravelDestination]:
        for d in self.travel_destinations:
            if d.id == destination_id:
                return d
        return None


# Global catalog instance
catalog: Optional[DestinationCatalog] = None


def get_catalog() -> DestinationCatalog:
    """Get or create the global catalog."""
    global catalog
    if catalog is None:
        catalog = DestinationCatalog()
    return catalog
