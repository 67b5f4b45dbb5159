"""Object managers for folders, entries and binaries"""
from .base import MetadataManager, ObjectManager
from .binary import BinaryManager
from .entry import EntryManager
from .folder import FolderManager

__all__ = [
    'ObjectManager',
    'MetadataManager',
    'FolderManager',
    'EntryManager',
    'BinaryManager',
]
