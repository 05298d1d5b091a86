"""
Store package: explicit run state plus sample/CSV loaders.

Public API:
- DeliveryStore
- sample_store
- load_store
"""
from .memory import DeliveryStore, StoreStats, UNKNOWN_RESTAURANT
from .sample_data import sample_store
from .loaders import load_store

__all__ = [
    "DeliveryStore",
    "StoreStats",
    "UNKNOWN_RESTAURANT",
    "sample_store",
    "load_store",
]
