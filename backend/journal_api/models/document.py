"""
Journal API: Document Base Model
=================================

What:  Pydantic base class for everything stored in MongoDB.
How:   Models keep `id` as a 24-character hex string; the conversion to and
       from the stored `_id` ObjectId happens only in to_document() and
       from_document(), so nothing above the repository sees bson types.
"""

from typing import Any, Dict, Mapping, Optional

from bson import ObjectId
from pydantic import BaseModel, ConfigDict


def object_id_or_none(value: Optional[str]) -> Optional[ObjectId]:
    """Parses a hex id, returning None for absent or malformed values."""
    if value is None or not ObjectId.is_valid(value):
        return None
    return ObjectId(value)


class MongoDocument(BaseModel):
    """Base for stored documents: an optional store-generated id."""

    model_config = ConfigDict(populate_by_name=True)

    id: Optional[str] = None

    def to_document(self) -> Dict[str, Any]:
        """Serializes to the stored shape (camelCase keys, `_id` ObjectId)."""
        doc = self.model_dump(by_alias=True, exclude={"id"})
        if self.id is not None:
            doc["_id"] = ObjectId(self.id)
        return doc

    @classmethod
    def from_document(cls, doc: Mapping[str, Any]):
        data = dict(doc)
        raw_id = data.pop("_id", None)
        if raw_id is not None:
            data["id"] = str(raw_id)
        return cls.model_validate(data)
