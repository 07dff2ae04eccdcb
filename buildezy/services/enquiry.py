"""Enquiry service — create, list and delete; enquiries are never edited."""

import logging
from typing import Any

from sqlalchemy.ext.asyncio import AsyncSession

from buildezy.core.exceptions import NotFoundError, ServerError
from buildezy.repositories.enquiry import EnquiryRepository
from buildezy.schemas.enquiry import EnquiryCreate
from buildezy.services import DB_ERRORS

logger = logging.getLogger(__name__)


class EnquiryService:
    def __init__(self, session: AsyncSession):
        self._repo = EnquiryRepository(session)

    async def list_enquiries(self) -> list[dict[str, Any]]:
        try:
            return await self._repo.list_newest_first()
        except DB_ERRORS as exc:
            logger.error("Enquiry fetch error: %s", exc)
            raise ServerError("Server error while fetching enquiries") from exc

    async def create_enquiry(self, data: EnquiryCreate) -> dict[str, Any]:
        try:
            return await self._repo.create(**data.to_row())
        except DB_ERRORS as exc:
            logger.error("Enquiry insert error: %s", exc)
            raise ServerError("Server error while adding enquiry") from exc

    async def delete_enquiry(self, enquiry_id: str) -> dict[str, Any]:
        try:
            enquiry = await self._repo.delete(enquiry_id)
        except DB_ERRORS as exc:
            logger.error("Enquiry delete error: %s", exc)
            raise ServerError("Server error while deleting enquiry") from exc
        if enquiry is None:
            raise NotFoundError("Enquiry")
        return enquiry
