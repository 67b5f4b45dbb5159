"""Shared plumbing for the folder, entry and binary managers"""
import json
from datetime import datetime
from pathlib import Path
from typing import Callable, Optional, Type, TypeVar

import structlog
from pydantic import ValidationError as PydanticValidationError

from fsentry.core.exceptions import BadPathError, FSEntryError, InternalError
from fsentry.core.identifier import IdentifierNormalizer
from fsentry.core.models.base import StoredObject, utcnow
from fsentry.infrastructure.filesystem import Storage
from fsentry.infrastructure.logging import get_logger

ModelT = TypeVar("ModelT", bound=StoredObject)

Clock = Callable[[], datetime]


class ObjectManager:
    """Base class for object managers

    Holds the collaborators every manager needs and the helpers that keep
    validation and compensation identical across object kinds.
    """

    kind: str = "object"

    def __init__(
        self,
        storage: Storage,
        normalizer: Optional[IdentifierNormalizer] = None,
        logger: Optional[structlog.stdlib.BoundLogger] = None,
    ):
        self.storage = storage
        self.normalizer = normalizer or IdentifierNormalizer()
        self.logger = (logger or get_logger(self.__class__.__module__)).bind(
            object_kind=self.kind
        )

    def _require_parent(self, parent: Path) -> None:
        """Fail with BadPathError unless the parent directory exists"""
        if not self.storage.dir_exists(parent):
            raise BadPathError(
                f"bad path: {parent}", {"path": str(parent), "kind": self.kind}
            )

    def _compensate(self, action: Callable[[], None], event: str, **fields) -> bool:
        """Run a best-effort cleanup step

        A failure here is logged and discarded; the caller re-raises the
        error that made the cleanup necessary.
        """
        try:
            action()
        except FSEntryError as e:
            self.logger.error(event, error=str(e), error_kind=e.kind.value, **fields)
            return False
        return True


class MetadataManager(ObjectManager):
    """Base class for objects described by a JSON metadata file"""

    def __init__(
        self,
        storage: Storage,
        normalizer: Optional[IdentifierNormalizer] = None,
        pretty: bool = False,
        clock: Clock = utcnow,
        logger: Optional[structlog.stdlib.BoundLogger] = None,
    ):
        super().__init__(storage, normalizer, logger)
        self.pretty = pretty
        self.clock = clock

    def _encode(self, obj: StoredObject) -> bytes:
        try:
            # NaN and Infinity have no JSON form and would be stored as null
            json.dumps(obj.data, allow_nan=False)
            return obj.to_json_bytes(pretty=self.pretty)
        except (TypeError, ValueError) as e:
            raise InternalError(
                f"payload is not JSON serializable: {e}", {"id": obj.id}
            ) from e

    def _decode(self, model: Type[ModelT], raw: bytes, path: Path) -> ModelT:
        try:
            return model.from_json_bytes(raw)
        except PydanticValidationError as e:
            self.logger.error("metadata_parse_failed", path=str(path), error=str(e))
            raise InternalError(
                f"invalid {self.kind} metadata: {path}", {"path": str(path)}
            ) from e
