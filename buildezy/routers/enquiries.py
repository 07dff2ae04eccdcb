"""Enquiry router — create, list and delete."""

from __future__ import annotations

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from buildezy.db.base import get_db
from buildezy.schemas.common import ErrorResponse
from buildezy.schemas.enquiry import EnquiryCreate, EnquiryDeleted, EnquiryOut
from buildezy.services.enquiry import EnquiryService

router = APIRouter(prefix="/enquiries", tags=["Enquiries"])


@router.post("", response_model=EnquiryOut, status_code=status.HTTP_201_CREATED)
async def create_enquiry(
    body: EnquiryCreate | None = None,
    session: AsyncSession = Depends(get_db),
):
    return await EnquiryService(session).create_enquiry(body or EnquiryCreate())


@router.get("", response_model=list[EnquiryOut])
async def list_enquiries(session: AsyncSession = Depends(get_db)):
    """List all enquiries, newest first."""
    return await EnquiryService(session).list_enquiries()


@router.delete(
    "/{enquiry_id}",
    response_model=EnquiryDeleted,
    responses={status.HTTP_404_NOT_FOUND: {"model": ErrorResponse}},
)
async def delete_enquiry(
    enquiry_id: str,
    session: AsyncSession = Depends(get_db),
):
    enquiry = await EnquiryService(session).delete_enquiry(enquiry_id)
    return EnquiryDeleted(enquiry=EnquiryOut.model_validate(enquiry))
