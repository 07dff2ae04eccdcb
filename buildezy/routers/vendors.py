"""Vendor CRUD router.

Pattern:
  1. Declare a router with prefix and tags
  2. Inject a DB session via Depends(get_db)
  3. Instantiate the service with the session
  4. Call one service method and shape the response
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from buildezy.db.base import get_db
from buildezy.schemas.common import ErrorResponse
from buildezy.schemas.vendor import VendorCreate, VendorDeleted, VendorOut, VendorUpdate
from buildezy.services.vendor import VendorService

router = APIRouter(prefix="/vendors", tags=["Vendors"])

_NOT_FOUND = {status.HTTP_404_NOT_FOUND: {"model": ErrorResponse}}


@router.post("", response_model=VendorOut, status_code=status.HTTP_201_CREATED)
async def create_vendor(
    body: VendorCreate | None = None,
    session: AsyncSession = Depends(get_db),
):
    """Create a new vendor."""
    return await VendorService(session).create_vendor(body or VendorCreate())


@router.get("", response_model=list[VendorOut])
async def list_vendors(session: AsyncSession = Depends(get_db)):
    """List all vendors, newest first."""
    return await VendorService(session).list_vendors()


@router.put("/{vendor_id}", response_model=VendorOut, responses=_NOT_FOUND)
async def update_vendor(
    vendor_id: str,
    body: VendorUpdate | None = None,
    session: AsyncSession = Depends(get_db),
):
    return await VendorService(session).update_vendor(vendor_id, body or VendorUpdate())


@router.delete("/{vendor_id}", response_model=VendorDeleted, responses=_NOT_FOUND)
async def delete_vendor(
    vendor_id: str,
    session: AsyncSession = Depends(get_db),
):
    vendor = await VendorService(session).delete_vendor(vendor_id)
    return VendorDeleted(vendor=VendorOut.model_validate(vendor))
