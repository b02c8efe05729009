"""Static reference data for destinations and bookable offers."""
