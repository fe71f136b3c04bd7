"""Storage adapters - Implementations of ItineraryStorePort.

Available implementations:
- TextFileStore: Plain text files on the local filesystem
"""

from .text_file_store import TextFileStore

__all__ = ["TextFileStore"]
