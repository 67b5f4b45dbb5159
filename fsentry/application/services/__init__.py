"""Application services for fsentry"""
from .base import ServiceBase
from .store_service import FSEntry, StoreService

__all__ = [
    'ServiceBase',
    'StoreService',
    'FSEntry',
]
