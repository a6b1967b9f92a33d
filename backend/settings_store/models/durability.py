"""
Write durability requirements.
"""
from typing import Optional, Union

from pydantic import BaseModel, Field, field_validator
from pymongo import WriteConcern


class Durability(BaseModel):
    """
    How many acknowledgements a write needs before it is reported done.

    All fields left unset means the server default applies.
    """
    w: Optional[Union[int, str]] = Field(None, description="Replica acknowledgement count or tag")
    journal: Optional[bool] = Field(None, description="Wait for the on-disk journal")
    timeout_ms: Optional[int] = Field(None, description="Give up waiting after this many ms")

    @field_validator("w", mode="before")
    @classmethod
    def numeric_w_as_count(cls, value):
        # "2" from the environment means two acknowledgements, not a tag named "2"
        if isinstance(value, str) and value.isdigit():
            return int(value)
        return value

    def is_default(self) -> bool:
        return self.w is None and self.journal is None and self.timeout_ms is None

    def write_concern(self) -> WriteConcern:
        return WriteConcern(w=self.w, j=self.journal, wtimeout=self.timeout_ms)
