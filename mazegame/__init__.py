"""A terminal maze game with events on the map, and a sentence-processing tool."""

__version__ = "0.1.0"