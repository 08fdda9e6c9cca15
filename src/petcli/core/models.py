"""Pet record model and its JSON array codec."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter


class Pet(BaseModel):
    """
    One persisted pet.

    Identity is ``id``; the store does not enforce uniqueness. Instances are
    frozen, so every consumer holds a read-only view.
    """

    model_config = ConfigDict(frozen=True, strict=True)

    id: int = Field(ge=0)
    name: str
    category: str
    age: int = Field(ge=0)
    created_at: datetime

    def created_label(self) -> str:
        return self.created_at.strftime("%Y-%m-%d %H:%M:%S %Z").strip()


PET_LIST = TypeAdapter(list[Pet])
