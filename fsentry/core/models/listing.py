from typing import List

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class ListResult(BaseModel):
    """Snapshot of the immediate children of one directory"""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    folders: List[str] = Field(default_factory=list)
    entries: List[str] = Field(default_factory=list)
    corrupted_folders: List[str] = Field(
        default_factory=list, description="Directories without an info file"
    )
