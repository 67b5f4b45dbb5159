from fsentry.core.models.base import StoredObject, utcnow
from fsentry.core.models.binary import Binary
from fsentry.core.models.entry import Entry
from fsentry.core.models.folder import FolderInfo
from fsentry.core.models.listing import ListResult

__all__ = [
    "StoredObject",
    "FolderInfo",
    "Entry",
    "Binary",
    "ListResult",
    "utcnow",
]
