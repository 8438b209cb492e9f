# app/models/document.py
from typing import Optional
from bson import ObjectId
from bson.errors import InvalidId
from pydantic import BaseModel


def parse_object_id(value: str) -> Optional[ObjectId]:
    """`ObjectId(value)`, or None when `value` is not a valid id."""
    try:
        return ObjectId(value)
    except (InvalidId, TypeError):
        return None


class DocumentModel(BaseModel):
    """Base for models persisted as MongoDB documents; `_id` is exposed as string `id`."""

    id: Optional[str] = None

    @classmethod
    def from_document(cls, doc: dict):
        data = dict(doc)
        if "_id" in data:
            data["id"] = str(data.pop("_id"))
        return cls.model_validate(data)

    def to_document(self) -> dict:
        return self.model_dump(exclude={"id"})
