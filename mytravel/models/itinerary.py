"""
Itinerary models - The ordered activity list and its aggregate statistics.
"""
from pydantic import BaseModel, Field
from typing import Iterator, Optional, Protocol
from enum import Enum
import math
import uuid

from ..services.durations import format_duration, parse_duration


MAX_TITLE_LENGTH = 50


class ItineraryCategory(str, Enum):
    """Kinds of planned entries."""
    ACTIVITY = "Activity"
    PLACE = "Place"
    FOOD = "Food"
    ACCOMMODATION = "Accommodation"


class LocationResolver(Protocol):
    """Anything that can turn a destination id into a destination name."""

    def get_destination_name(self, destination_id: str) -> Optional[str]:
        ...


class ItineraryItemInput(BaseModel):
    """User-supplied fields for a new itinerary entry."""
    title: str = ""
    category: ItineraryCategory = ItineraryCategory.ACTIVITY
    duration: str = ""
    travel_time: str = Field(
        default="",
        description="Estimated travel time to reach this entry, e.g. '15m'"
    )
    location: str = Field(
        default="",
        description="Free-text location, used when no location_id resolves"
    )
    location_id: Optional[str] = Field(
        None,
        description="Catalog destination id; its name takes precedence over location"
    )
    cost: float = 0


class ItineraryItem(BaseModel):
    """A single planned entry."""
    id: str = Field(default_factory=lambda: uuid.uuid4().hex[:9])
    title: str = Field(..., min_length=1, max_length=MAX_TITLE_LENGTH)
    category: ItineraryCategory = ItineraryCategory.ACTIVITY
    duration: str
    travel_time: str = "0m"
    location: str
    cost: float = Field(default=0, ge=0)

    @property
    def duration_minutes(self) -> int:
        return parse_duration(self.duration)

    @property
    def travel_minutes(self) -> int:
        return parse_duration(self.travel_time)


class ItinerarySummary(BaseModel):
    """Derived statistics over the current itinerary contents."""
    total_cost: float = 0
    total_activity_minutes: int = 0
    total_travel_minutes: int = 0
    total_minutes: int = 0
    location_count: int = 0
    item_count: int = 0

    @property
    def activity_time(self) -> str:
        return format_duration(self.total_activity_minutes)

    @property
    def travel_time(self) -> str:
        return format_duration(self.total_travel_minutes)

    @property
    def total_time(self) -> str:
        return format_duration(self.total_minutes)

    def to_display_dict(self) -> dict:
        """Convert to display-friendly dictionary."""
        return {
            **self.model_dump(),
            "activity_time": self.activity_time,
            "travel_time": self.travel_time,
            "total_time": self.total_time,
        }


class Itinerary(BaseModel):
    """
    Ordered sequence of planned entries.

    List order is the user's planned sequence. Invalid input never raises:
    add returns None, remove and reorder leave the list untouched.
    """
    items: list[ItineraryItem] = Field(
        default_factory=list,
        description="Entries in planned order"
    )

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self) -> Iterator[ItineraryItem]:
        return iter(self.items)

    def get(self, item_id: str) -> Optional[ItineraryItem]:
        """Get an entry by id."""
        for item in self.items:
            if item.id == item_id:
                return item
        return None

    def add(
        self,
        item: ItineraryItemInput,
        resolver: Optional[LocationResolver] = None
    ) -> Optional[ItineraryItem]:
        """
        Append a new entry built from user input.

        The location name comes from the catalog when ``location_id``
        resolves, otherwise from the free-text location. Missing title,
        duration or location, an over-long title, or a negative or
        non-finite cost make this a no-op returning None.
        """
        location = item.location.strip()
        if item.location_id and resolver is not None:
            resolved = resolver.get_destination_name(item.location_id)
            if resolved:
                location = resolved

        title = item.title.strip()
        duration = item.duration.strip()
        if not title or not duration or not location:
            return None
        if len(title) > MAX_TITLE_LENGTH:
            return None
        if not math.isfinite(item.cost) or item.cost < 0:
            return None

        new_item = ItineraryItem(
            id=self._new_id(),
            title=title,
            category=item.category,
            duration=duration,
            travel_time=item.travel_time.strip() or "0m",
            location=location,
            cost=item.cost or 0,
        )
        self.items.append(new_item)
        return new_item

    def remove(self, item_id: str) -> bool:
        """Remove the entry with the given id. Returns False if it was absent."""
        remaining = [i for i in self.items if i.id != item_id]
        if len(remaining) == len(self.items):
            return False
        self.items = remaining
        return True

    def reorder(self, source_index: int, target_index: int) -> bool:
        """
        Move the entry at source_index to target_index, shifting the rest.

        Returns False when either index is out of range or they are equal.
        """
        count = len(self.items)
        if not (0 <= source_index < count and 0 <= target_index < count):
            return False
        if source_index == target_index:
            return False

        moved = self.items.pop(source_index)
        self.items.insert(target_index, moved)
        return True

    def aggregate(self) -> ItinerarySummary:
        """Compute totals from the current contents."""
        activity = sum(i.duration_minutes for i in self.items)
        travel = sum(i.travel_minutes for i in self.items)

        return ItinerarySummary(
            total_cost=sum(i.cost for i in self.items),
            total_activity_minutes=activity,
            total_travel_minutes=travel,
            total_minutes=activity + travel,
            location_count=len({i.location for i in self.items}),
            item_count=len(self.items),
        )

    def _new_id(self) -> str:
        existing = {i.id for i in self.items}
        while True:
            candidate = uuid.uuid4().hex[:9]
            if candidate not in existing:
                return candidate

    def to_display_dict(self) -> dict:
        """Convert to display-friendly dictionary."""
        return {
            "items": [
                {
                    **item.model_dump(),
                    "category": item.category.value,
                    "duration_minutes": item.duration_minutes,
                    "travel_minutes": item.travel_minutes,
                }
                for item in self.items
            ],
            "summary": self.aggregate().to_display_dict(),
        }
