"""
Destination and offer models - Static reference data for browsing and booking search.
"""
from pydantic import BaseModel, Field
from typing import Optional
from enum import Enum


class Continent(str, Enum):
    """Continents used to group destinations."""
    EUROPE = "Europe"
    ASIA = "Asia"
    NORTH_AMERICA = "North America"
    SOUTH_AMERICA = "South America"
    AFRICA = "Africa"
    OCEANIA = "Oceania"


class DestinationType(str, Enum):
    """Kind of place a destination is."""
    CITY = "city"
    BEACH = "beach"
    MOUNTAIN = "mountain"
    ISLAND = "island"
    COUNTRYSIDE = "countryside"


class Destination(BaseModel):
    """A destination offered by location pickers and search boxes."""
    id: str = Field(..., description="Catalog identifier, e.g. 'eur-1'")
    name: str = Field(..., description="Display name, e.g. 'Paris, France'")
    city: str
    country: str
    continent: Continent
    code: str = Field(..., description="Airport or city code")
    type: DestinationType
    popular: bool = False


class Coordinates(BaseModel):
    lat: float
    lng: float


class DestinationDetails(BaseModel):
    """Long-form details shown on a destination page."""
    about: str
    highlights: list[str] = Field(default_factory=list)
    best_time: str
    language: str
    currency: str


class TravelDestination(BaseModel):
    """A destination card with price, rating and rich metadata."""
    id: str
    title: str
    location: str
    image: str = ""
    price: float = Field(..., ge=0, description="Starting price in the display currency")
    rating: float = Field(..., ge=0, le=5)
    reviews: int = Field(default=0, ge=0)
    tags: list[str] = Field(default_factory=list)
    description: str = ""
    continent: str
    activity: str
    coordinates: Coordinates
    details: DestinationDetails


class CabinClass(str, Enum):
    ECONOMY = "economy"
    BUSINESS = "business"
    FIRST = "first"


class Flight(BaseModel):
    """A bookable flight offer."""
    id: str
    airline: str
    origin: str = Field(..., alias="from")
    to: str
    price: float = Field(..., ge=0)
    duration: str
    departure_time: str
    arrival_time: str
    cabin_class: CabinClass = CabinClass.ECONOMY

    model_config = {"populate_by_name": True}


class Hotel(BaseModel):
    """A bookable hotel offer."""
    id: str
    name: str
    location: str
    price_per_night: float = Field(..., ge=0)
    rating: float = Field(..., ge=0, le=5)
    image: Optional[str] = None
    amenities: list[str] = Field(default_factory=list)


class Tour(BaseModel):
    """A bookable tour offer."""
    id: str
    title: str
    location: str
    price: float = Field(..., ge=0)
    duration: str
    rating: float = Field(..., ge=0, le=5)
    image: Optional[str] = None
    type: str
