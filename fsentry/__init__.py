"""fsentry

Stores hierarchical data in files and folders on the filesystem, with JSON
descriptions and creation/update timestamps.
"""

from fsentry.application.services import FSEntry, StoreService
from fsentry.core.config import Settings, get_settings
from fsentry.core.exceptions import (
    BadNameError,
    BadPathError,
    CorruptedError,
    ErrorKind,
    ExistError,
    FSEntryError,
    InternalError,
    NotExistError,
    PermissionDeniedError,
)
from fsentry.core.identifier import IdentifierNormalizer, name_to_id
from fsentry.core.models import Binary, Entry, FolderInfo, ListResult

__version__ = "0.1.0"

__all__ = [
    "StoreService",
    "FSEntry",
    "Settings",
    "get_settings",
    "FolderInfo",
    "Entry",
    "Binary",
    "ListResult",
    "IdentifierNormalizer",
    "name_to_id",
    "ErrorKind",
    "FSEntryError",
    "BadNameError",
    "BadPathError",
    "ExistError",
    "NotExistError",
    "CorruptedError",
    "PermissionDeniedError",
    "InternalError",
    "__version__",
]
