"""
Document model and the transform between it and its stored payload.

A stored payload holds the fields plus the ``type`` discriminator. The id
and version are metadata the backend tracks on its own, so they only ever
appear on the Document.
"""
from typing import Any, Mapping

from pydantic import BaseModel, Field

# Keys that describe a document rather than belong to its fields
RESERVED_KEYS = frozenset({"id", "_id", "type", "version", "cas", "_cas"})


def clean_fields(fields: Mapping[str, Any]) -> dict[str, Any]:
    """Copy of fields without any metadata keys."""
    return {k: v for k, v in fields.items() if k not in RESERVED_KEYS}


def to_storage(fields: Mapping[str, Any], doc_type: str) -> dict[str, Any]:
    """
    Build the payload to write for a document.

    The caller's mapping is left untouched; any id/version/type it carries is
    dropped and ``type`` is set to doc_type.
    """
    payload = clean_fields(fields)
    payload["type"] = doc_type
    return payload


def from_storage(doc_id: str, version: str, value: Mapping[str, Any]) -> "Document":
    """Build a Document from what the backend returned."""
    return Document(
        id=doc_id,
        type=value.get("type", ""),
        version=version,
        fields=clean_fields(value),
    )


class Document(BaseModel):
    """
    A stored record: identity, concurrency version and field payload.
    """
    id: str = Field(..., description="Unique document id")
    type: str = Field(..., description="Schema discriminator")
    version: str = Field(..., description="Opaque cas token from the last read or write")
    fields: dict[str, Any] = Field(default_factory=dict, description="Schema-specific values")

    def with_fields(self, **changes: Any) -> "Document":
        """Copy of this document with some fields replaced, same id and version."""
        return self.model_copy(update={"fields": {**self.fields, **changes}})

    def to_flat(self) -> dict[str, Any]:
        """Single mapping with id and cas next to the fields."""
        return {"id": self.id, "cas": self.version, **self.fields, "type": self.type}

    @classmethod
    def from_flat(cls, data: Mapping[str, Any], doc_type: str = "") -> "Document":
        """
        Inverse of to_flat; accepts either ``version`` or ``cas``.

        Raises:
            ValueError: If the mapping has no id or no version
        """
        doc_id = data.get("id")
        version = data.get("version", data.get("cas"))
        if not doc_id:
            raise ValueError("Document id is required")
        if version is None or version == "":
            raise ValueError("Document version (cas) is required")

        return cls(
            id=str(doc_id),
            type=data.get("type") or doc_type,
            version=str(version),
            fields=clean_fields(data),
        )
