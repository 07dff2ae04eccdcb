"""Vendor service — maps repository results and failures onto app exceptions.

Rule: No FastAPI here. Database failures are logged with their cause and
re-raised as ServerError carrying an operation-specific message only.
"""

import logging
from typing import Any

from sqlalchemy.ext.asyncio import AsyncSession

from buildezy.core.exceptions import NotFoundError, ServerError
from buildezy.repositories.vendor import VendorRepository
from buildezy.schemas.vendor import VendorCreate, VendorUpdate
from buildezy.services import DB_ERRORS

logger = logging.getLogger(__name__)


class VendorService:
    def __init__(self, session: AsyncSession):
        self._repo = VendorRepository(session)

    async def list_vendors(self) -> list[dict[str, Any]]:
        try:
            return await self._repo.list_newest_first()
        except DB_ERRORS as exc:
            logger.error("Vendor fetch error: %s", exc)
            raise ServerError("Server error while fetching vendors") from exc

    async def create_vendor(self, data: VendorCreate) -> dict[str, Any]:
        try:
            return await self._repo.create(**data.to_row())
        except DB_ERRORS as exc:
            logger.error("Vendor insert error: %s", exc)
            raise ServerError("Server error while adding vendor") from exc

    async def update_vendor(self, vendor_id: str, data: VendorUpdate) -> dict[str, Any]:
        try:
            vendor = await self._repo.update(vendor_id, **data.to_row())
        except DB_ERRORS as exc:
            logger.error("Vendor update error: %s", exc)
            raise ServerError("Server error while updating vendor") from exc
        if vendor is None:
            raise NotFoundError("Vendor")
        return vendor

    async def delete_vendor(self, vendor_id: str) -> dict[str, Any]:
        try:
            vendor = await self._repo.delete(vendor_id)
        except DB_ERRORS as exc:
            logger.error("Vendor delete error: %s", exc)
            raise ServerError("Server error while deleting vendor") from exc
        if vendor is None:
            raise NotFoundError("Vendor")
        return vendor
