"""Offline inspection of an edge node's persisted resource snapshot."""

__version__ = "0.1.0"
