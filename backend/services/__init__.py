"""Services built on top of the building model."""
