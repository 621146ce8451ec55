"""Artisan Geo - proximity search for a service marketplace."""

__version__ = "0.1.0"
