"""HTTP API for the MyTravel planner service."""
from .routes import router

__all__ = ["router"]
