"""
Hotspots API
GraphQL access to movies, users and video hotspots stored in Firebase
"""

__version__ = "0.1.0"

from .config import settings

__all__ = ["settings", "__version__"]
