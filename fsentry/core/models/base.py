import json
from datetime import datetime, timezone
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class StoredObject(BaseModel):
    """JSON envelope shared by folder info files and entries"""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: str = Field(..., description="Identifier derived from the name")
    name: str = Field(..., description="Original name without modification")
    created_at: datetime = Field(..., description="Timestamp of creation")
    updated_at: Optional[datetime] = Field(
        default=None, description="Timestamp of last update, unset until updated"
    )
    data: Any = Field(default=None, description="Custom JSON payload")

    def to_json_bytes(self, pretty: bool = False) -> bytes:
        payload = self.model_dump(mode="json", by_alias=True)
        if pretty:
            text = json.dumps(payload, indent="\t", ensure_ascii=False)
        else:
            text = json.dumps(payload, separators=(",", ":"), ensure_ascii=False)
        return (text + "\n").encode("utf-8")

    @classmethod
    def from_json_bytes(cls, raw: bytes):
        return cls.model_validate_json(raw)

    def renamed(self, identifier: str, name: str, updated_at: Optional[datetime]):
        """Copy with a new identity, keeping creation time and payload"""
        return self.model_copy(
            update={"id": identifier, "name": name, "updated_at": updated_at}
        )

    def reborn(self, identifier: str, name: str, now: datetime):
        """Copy with a new identity and a restarted lifecycle"""
        return self.model_copy(
            update={
                "id": identifier,
                "name": name,
                "created_at": now,
                "updated_at": None,
            }
        )
