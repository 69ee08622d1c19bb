from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class FilterField(BaseModel):
    """A profile attribute exposed as a directory filter, keyed by its request parameter"""
    model_config = ConfigDict(frozen=True)

    param_name: str = Field(..., min_length=1)
    attribute_key: str = Field(..., min_length=1)
    label: Optional[str] = None
    placeholder: str = ""

    @property
    def display_label(self) -> str:
        return self.label or self.attribute_key


class MemberQueryResponse(BaseModel):
    """Response model for member listing results"""
    count: int
    members: Optional[List[Dict[str, Any]]]
    message: Optional[str] = None
