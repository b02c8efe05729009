"""MyTravel planner service."""
