"""Enquiry Pydantic schemas."""

from datetime import datetime
from typing import Any, Optional

from pydantic import BaseModel

from buildezy.schemas.common import RequestBody, RowModel


class EnquiryCreate(RequestBody):
    name: Optional[str] = None
    email: Optional[str] = None
    mobile: Optional[str] = None
    message: Optional[str] = None

    def to_row(self) -> dict[str, Any]:
        values = self.model_dump()
        values["message"] = self.message or ""
        return values


class EnquiryOut(RowModel):
    id: int
    name: Optional[str] = None
    email: Optional[str] = None
    mobile: Optional[str] = None
    message: Optional[str] = None
    created_at: datetime


class EnquiryDeleted(BaseModel):
    message: str = "Enquiry deleted successfully"
    enquiry: EnquiryOut
