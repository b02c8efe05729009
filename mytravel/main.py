"""
FastAPI Application Entry Point.
"""
import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .api import router
from .config import settings


logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s"
)

# Create FastAPI app
app = FastAPI(
    title="MyTravel Planner",
    description="Destination browsing, itinerary planning, booking cart and checkout",
    version="1.0.0"
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include API routes
app.include_router(router)


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {
        "status": "healthy",
        "booking_provider": settings.booking_provider,
        "session_backend": settings.session_backend
    }


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "mytravel.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug
    )
