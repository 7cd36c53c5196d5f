"""Concept mind-map view for the reading companion."""
__version__ = "0.1.0"
