"""Exception hierarchy for fsentry"""

from enum import Enum
from typing import Any, Dict, Optional


class ErrorKind(str, Enum):
    """Classification shared by every store failure"""

    BAD_NAME = "bad_name"
    BAD_PATH = "bad_path"
    EXIST = "exist"
    NOT_EXIST = "not_exist"
    CORRUPTED = "corrupted"
    PERMISSION = "permission"
    INTERNAL = "internal"


class FSEntryError(Exception):
    """Base exception for all fsentry errors"""

    kind: ErrorKind = ErrorKind.INTERNAL
    code: str = "FSE-500"
    default_message: str = "internal error"

    def __init__(
        self, message: Optional[str] = None, details: Optional[Dict[str, Any]] = None
    ):
        self.message = message or self.default_message
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "code": self.code,
            "kind": self.kind.value,
            "message": self.message,
            "details": {k: str(v) for k, v in self.details.items()},
        }


class BadNameError(FSEntryError):
    """Raised when a name cannot be turned into a valid identifier"""

    kind = ErrorKind.BAD_NAME
    code = "FSE-400"
    default_message = "bad name"

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"bad name: {name!r}", {"name": name})


class BadPathError(FSEntryError):
    """Raised when a required parent directory does not exist"""

    kind = ErrorKind.BAD_PATH
    code = "FSE-404P"
    default_message = "bad path"


class ExistError(FSEntryError):
    """Raised when the destination object already exists"""

    kind = ErrorKind.EXIST
    code = "FSE-409"
    default_message = "object exist"


class NotExistError(FSEntryError):
    """Raised when the requested object does not exist"""

    kind = ErrorKind.NOT_EXIST
    code = "FSE-404"
    default_message = "object not exist"


class CorruptedError(FSEntryError):
    """Raised when a folder directory exists without its info file"""

    kind = ErrorKind.CORRUPTED
    code = "FSE-422"
    default_message = "folder corrupted"


class PermissionDeniedError(FSEntryError):
    """Raised when the operating system refuses access"""

    kind = ErrorKind.PERMISSION
    code = "FSE-403"
    default_message = "not enough permissions"


class InternalError(FSEntryError):
    """Raised for any failure that fits no other kind"""

    kind = ErrorKind.INTERNAL
    code = "FSE-500"
    default_message = "internal error"


ERROR_CODES = {
    cls.code: f"{cls.kind.value} - {cls.default_message}"
    for cls in (
        BadNameError,
        BadPathError,
        ExistError,
        NotExistError,
        CorruptedError,
        PermissionDeniedError,
        InternalError,
    )
}
