"""Data models for the MyTravel planner service."""
from .cart import Cart, CartItem, CartItemInput, CartItemType
from .itinerary import Itinerary, ItineraryCategory, ItineraryItem, ItineraryItemInput, ItinerarySummary
from .session import Session, SessionStore

__all__ = [
    "Cart",
    "CartItem",
    "CartItemInput",
    "CartItemType",
    "Itinerary",
    "ItineraryCategory",
    "ItineraryItem",
    "ItineraryItemInput",
    "ItinerarySummary",
    "Session",
    "SessionStore",
]
