"""
Pydantic schemas for documents.

A document is a flat object with an immutable ``id`` and two mutable
string fields, ``name`` and ``description``.  ``DocumentReplace`` is
the body of a full replacement (PUT) and ``DocumentPatch`` the
resolved form of a partial update (PATCH).

A JSON ``null`` for a mutable field on create or replace is stored as
the empty string.
"""

from typing import Any, ClassVar, Dict, Mapping, Optional

from pydantic import BaseModel, Field, field_validator


class Document(BaseModel):
    """A stored document and its wire representation."""

    id: str = Field(..., min_length=1, description="Unique document identifier")
    name: str = Field("", description="Document name")
    description: str = Field("", description="Free‑form description")

    @field_validator("name", "description", mode="before")
    @classmethod
    def null_to_empty(cls, value: Any) -> Any:
        return "" if value is None else value


class DocumentReplace(BaseModel):
    """Schema for replacing every mutable field of a document.

    ``id`` is accepted for compatibility with clients that send the
    whole document back, but the stored id always comes from the path.
    Omitted fields are reset to the empty string.
    """

    id: Optional[str] = Field(None, description="Ignored; the path id wins")
    name: str = ""
    description: str = ""

    @field_validator("name", "description", mode="before")
    @classmethod
    def null_to_empty(cls, value: Any) -> Any:
        return "" if value is None else value

    def to_document(self, document_id: str) -> Document:
        return Document(id=document_id, name=self.name, description=self.description)


class DocumentPatch(BaseModel):
    """A partial update with per-field presence.

    Only fields that were explicitly set are applied.  Build instances
    from raw request bodies with :meth:`from_wire`.
    """

    name: Optional[str] = None
    description: Optional[str] = None

    # Wire key -> field.  Both the JSON name and the capitalised field
    # name are accepted; when both are sent the JSON name wins.
    FIELD_ALIASES: ClassVar[Dict[str, str]] = {
        "name": "name",
        "description": "description",
        "Name": "name",
        "Description": "description",
    }

    @classmethod
    def from_wire(cls, updates: Mapping[str, Any]) -> "DocumentPatch":
        """Resolve a raw JSON object into a patch.

        Recognised fields are kept only when their value is a string.
        Values of any other JSON type, unknown keys and the identifier
        (``id`` or ``ID``) are dropped without raising.
        """
        present: Dict[str, str] = {}
        for key, field_name in cls.FIELD_ALIASES.items():
            if field_name in present or key not in updates:
                continue
            if type(updates[key]) is str:
                present[field_name] = updates[key]
        return cls(**present)

    def present_fields(self) -> Dict[str, str]:
        """Return only the fields that are present in this patch."""
        return self.model_dump(exclude_unset=True, exclude_none=True)
