from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel
from typing import Any, Dict, Optional

class DocumentModel(BaseModel):
    """Base for payloads stored as-is: camelCase keys, extra fields kept."""
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="allow",
    )

    def to_document(self) -> Dict[str, Any]:
        """Payload ready for insert; the store assigns `_id`."""
        document = self.model_dump(by_alias=True)
        document.pop("_id", None)
        return document

class WriteResult(BaseModel):
    """Acknowledgement of a single-document write, camelCase on the wire."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    acknowledged: bool = True

class UpdateResult(WriteResult):
    matched_count: int = 0
    modified_count: int = 0
    upserted_count: int = 0
    upserted_id: Optional[str] = None

    @classmethod
    def from_pymongo(cls, result) -> "UpdateResult":
        upserted_id = result.upserted_id
        return cls(
            acknowledged=result.acknowledged,
            matched_count=result.matched_count,
            modified_count=result.modified_count,
            upserted_count=0 if upserted_id is None else 1,
            upserted_id=None if upserted_id is None else str(upserted_id),
        )

class InsertResult(WriteResult):
    inserted_id: str

    @classmethod
    def from_pymongo(cls, result) -> "InsertResult":
        return cls(acknowledged=result.acknowledged, inserted_id=str(result.inserted_id))

class DeleteResult(WriteResult):
    deleted_count: int = 0

    @classmethod
    def from_pymongo(cls, result) -> "DeleteResult":
        return cls(acknowledged=result.acknowledged, deleted_count=result.deleted_count)
