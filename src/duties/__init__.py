"""
Duties Backend
GraphQL service for creating, listing, renaming and deleting duties
"""

__version__ = "0.1.0"

from .config import settings

__all__ = ["settings", "__version__"]
