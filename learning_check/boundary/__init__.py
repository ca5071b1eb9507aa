"""External system boundaries."""
