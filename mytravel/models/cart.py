"""
Cart models - Session-scoped accumulator of selected bookable items.
"""
from pydantic import BaseModel, Field
from typing import Optional
from enum import Enum
import uuid


class CartItemType(str, Enum):
    """Bookable item types."""
    FLIGHT = "flight"
    HOTEL = "hotel"
    TOUR = "tour"


class CartItemInput(BaseModel):
    """A cart entry before it has been assigned an id."""
    type: CartItemType
    title: str = Field(..., min_length=1)
    details: str = ""
    price: float = Field(..., ge=0, allow_inf_nan=False)
    image: Optional[str] = None


class CartItem(CartItemInput):
    """A selected bookable item."""
    id: str


class Cart(BaseModel):
    """
    Ordered list of selected items with a derived total.

    No de-duplication: adding the same item twice yields two entries.
    ``revision`` increases on every mutation.
    """
    items: list[CartItem] = Field(default_factory=list)
    revision: int = 0

    @property
    def total(self) -> float:
        """Sum of prices, recomputed on every read."""
        return sum(item.price for item in self.items)

    def __len__(self) -> int:
        return len(self.items)

    def is_empty(self) -> bool:
        return not self.items

    def add_item(self, item: CartItemInput) -> CartItem:
        """Append a new entry with a fresh id."""
        cart_item = CartItem(id=uuid.uuid4().hex[:9], **item.model_dump())
        self.items.append(cart_item)
        self.revision += 1
        return cart_item

    def remove_item(self, item_id: str) -> bool:
        """Remove the entry with the given id. Returns False if it was absent."""
        remaining = [i for i in self.items if i.id != item_id]
        if len(remaining) == len(self.items):
            return False
        self.items = remaining
        self.revision += 1
        return True

    def clear(self) -> None:
        """Empty the cart."""
        self.items = []
        self.revision += 1

    def to_display_dict(self) -> dict:
        """Convert to display-friendly dictionary."""
        return {
            "items": [
                {**item.model_dump(), "type": item.type.value}
                for item in self.items
            ],
            "total": self.total,
            "count": len(self.items),
        }
