"""Generate random GeoJSON feature collections for test data."""

__version__ = "0.1.4"