"""Ancestry map: tabular genealogy records to map markers and edges."""

__version__ = "0.1.0"
