"""Library module domain layer."""
