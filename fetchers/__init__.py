# fetchers/__init__.py
from .search_api import fetch_matches

__all__ = ["fetch_matches"]
