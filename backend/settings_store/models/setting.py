"""
Setting document model.
"""
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field

from settings_store.models.document import Document

DOC_TYPE = "setting"


class SettingFields(BaseModel):
    """
    Field set of an application-wide ``setting`` document.

    Stored keys are camelCase, as the HTTP layer exchanges them.
    """
    model_config = ConfigDict(populate_by_name=True, extra="allow")

    language: Optional[str] = Field(None, description="Default app language")
    avatar: Optional[str] = Field(None, description="Default app avatar")
    currency_code: Optional[str] = Field(
        None, alias="currencyCode", description="Default app currency code"
    )
    currency_symbol: Optional[str] = Field(
        None, alias="currencySymbol", description="Default app currency symbol"
    )

    def to_fields(self) -> dict[str, Any]:
        """Stored representation; unset values are left out."""
        return self.model_dump(by_alias=True, exclude_none=True)

    @classmethod
    def from_document(cls, document: Document) -> "SettingFields":
        return cls.model_validate(document.fields)
