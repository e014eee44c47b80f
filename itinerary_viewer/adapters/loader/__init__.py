"""Loader adapters - Implementations of ItineraryLoaderPort.

Available implementations:
- FileItineraryLoader: Reads a CSV file from disk
- HttpItineraryLoader: Downloads the CSV over HTTP(S)
- EmbeddedItineraryLoader: Serves text held in memory
"""

from .embedded_loader import EmbeddedItineraryLoader
from .file_loader import FileItineraryLoader
from .http_loader import HttpItineraryLoader

__all__ = ["FileItineraryLoader", "HttpItineraryLoader", "EmbeddedItineraryLoader"]
