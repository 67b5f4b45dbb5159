from fsentry.core.models.base import StoredObject


class Entry(StoredObject):
    """A leaf record stored as a single JSON file"""
