"""
Alternative storage backends.
"""

from lightbnb.stores.memory import InMemoryPropertyStore

__all__ = ["InMemoryPropertyStore"]
