"""Filesystem infrastructure module."""
from .directory_manager import DirectoryManager
from .errors import translate_os_error
from .file_reader import FileReader
from .file_writer import FileWriter
from .storage import FileStorage, Storage

__all__ = [
    'DirectoryManager',
    'FileReader',
    'FileWriter',
    'FileStorage',
    'Storage',
    'translate_os_error',
]
