"""Vendor Pydantic schemas (request DTOs and response models)."""

from datetime import datetime
from typing import Any, Optional

from pydantic import BaseModel

from buildezy.schemas.common import RequestBody, RowModel


class VendorCreate(RequestBody):
    # Missing values are passed through; NOT NULL is enforced by the database.
    name: Optional[str] = None
    email: Optional[str] = None
    mobile: Optional[str] = None
    service: Optional[str] = None
    description: Optional[str] = None

    def to_row(self) -> dict[str, Any]:
        values = self.model_dump()
        values["description"] = self.description or ""
        return values


class VendorUpdate(VendorCreate):
    """PUT body: all five mutable fields are replaced together."""


class VendorOut(RowModel):
    id: int
    name: Optional[str] = None
    email: Optional[str] = None
    mobile: Optional[str] = None
    service: Optional[str] = None
    description: Optional[str] = None
    created_at: datetime


class VendorDeleted(BaseModel):
    message: str = "Vendor deleted successfully"
    vendor: VendorOut
