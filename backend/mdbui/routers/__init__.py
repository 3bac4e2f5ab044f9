"""
API and page routers.
"""
from mdbui.routers import collections, connections, databases, documents, pages

__all__ = ["collections", "connections", "databases", "documents", "pages"]
