"""Calculator web service: four-operation JSON API and a static calculator page."""

__version__ = "0.1.0"
