from fsentry.core.models.base import StoredObject


class FolderInfo(StoredObject):
    """Contents of the .info.json file kept inside every folder

    Stores the original folder name, creation and update timestamps,
    and an optional custom payload.
    """
