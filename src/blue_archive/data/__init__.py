"""
Student data retrieval and querying.

Provides the fetcher service, the immutable dataset it builds and the
loader that decodes raw documents.
"""

from .service import BlueArchiveFetcher
from .dataset import StudentDataset
from .loaders import StudentLoader

__all__ = [
    # Main service
    "BlueArchiveFetcher",
    # Component classes (for advanced usage)
    "StudentDataset",
    "StudentLoader",
]
