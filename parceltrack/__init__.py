"""Parcel tracking on SQLite: a parcel store, a lifecycle service and a demonstration command."""

__version__ = "0.1.0"
__all__ = ["store", "service"]