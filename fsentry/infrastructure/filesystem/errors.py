"""Translation of OS errors into the store error taxonomy"""
import errno
from pathlib import Path
from typing import Type

from fsentry.core.exceptions import (
    ExistError,
    FSEntryError,
    InternalError,
    NotExistError,
    PermissionDeniedError,
)
from fsentry.infrastructure.logging import get_logger

logger = get_logger(__name__)


def translate_os_error(
    exc: OSError,
    operation: str,
    path: Path,
    missing: Type[FSEntryError] = NotExistError,
) -> FSEntryError:
    """
    Classify an OSError raised by a filesystem primitive

    Args:
        exc: Original error
        operation: Name of the primitive, used in messages and logs
        path: Path the primitive was working on
        missing: Error class used when something on the path is absent

    Returns:
        Store error with the original exception chained by the caller
    """
    details = {"operation": operation, "path": str(path)}

    if isinstance(exc, FileExistsError) or exc.errno in (errno.EEXIST, errno.ENOTEMPTY):
        return ExistError(f"{operation}: object exist: {path}", details)
    if isinstance(exc, (FileNotFoundError, NotADirectoryError)):
        return missing(f"{operation}: {missing.default_message}: {path}", details)
    if isinstance(exc, PermissionError):
        return PermissionDeniedError(f"{operation}: permission denied: {path}", details)

    logger.error(
        "filesystem_error",
        operation=operation,
        path=str(path),
        error_type=type(exc).__name__,
        error=str(exc),
    )
    return InternalError(f"{operation}: {exc}", details)
