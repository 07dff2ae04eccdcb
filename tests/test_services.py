"""Service-layer tests: database failures become ServerError, misses become NotFoundError."""

import logging
from unittest.mock import AsyncMock, MagicMock

import pytest
from sqlalchemy.exc import DataError, IntegrityError, OperationalError

from buildezy.core.exceptions import NotFoundError, ServerError
from buildezy.schemas.enquiry import EnquiryCreate
from buildezy.schemas.vendor import VendorCreate, VendorUpdate
from buildezy.services.enquiry import EnquiryService
from buildezy.services.vendor import VendorService


def _result_with(row):
    result = MagicMock()
    result.mappings.return_value.first.return_value = row
    return result


class TestVendorService:

    @pytest.mark.asyncio
    async def test_fetch_failure_hides_cause(self, mock_db_session, caplog):
        mock_db_session.execute.side_effect = OperationalError(
            "SELECT", {}, Exception("connection refused")
        )

        with caplog.at_level(logging.ERROR, logger="buildezy.services.vendor"):
            with pytest.raises(ServerError) as exc_info:
                await VendorService(mock_db_session).list_vendors()

        assert exc_info.value.status_code == 500
        assert exc_info.value.message == "Server error while fetching vendors"
        assert "connection refused" not in exc_info.value.message
        assert "connection refused" in caplog.text

    @pytest.mark.asyncio
    async def test_insert_failure(self, mock_db_session):
        mock_db_session.execute.side_effect = IntegrityError(
            "INSERT", {}, Exception("NOT NULL constraint failed: vendors.name")
        )

        with pytest.raises(ServerError, match="Server error while adding vendor"):
            await VendorService(mock_db_session).create_vendor(VendorCreate())

        mock_db_session.commit.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_connection_refused_is_server_error(self, mock_db_session):
        mock_db_session.execute.side_effect = ConnectionRefusedError("refused")

        with pytest.raises(ServerError, match="Server error while deleting vendor"):
            await VendorService(mock_db_session).delete_vendor("1")

    @pytest.mark.asyncio
    async def test_update_miss_is_not_found(self, mock_db_session):
        mock_db_session.execute.return_value = _result_with(None)

        with pytest.raises(NotFoundError) as exc_info:
            await VendorService(mock_db_session).update_vendor(
                "42", VendorUpdate(name="x", email="y", mobile="z", service="s")
            )

        assert exc_info.value.message == "Vendor not found"
        assert exc_info.value.status_code == 404

    @pytest.mark.asyncio
    async def test_update_failure(self, mock_db_session):
        mock_db_session.execute.side_effect = OperationalError("UPDATE", {}, Exception("boom"))

        with pytest.raises(ServerError, match="Server error while updating vendor"):
            await VendorService(mock_db_session).update_vendor("1", VendorUpdate())

    @pytest.mark.asyncio
    async def test_delete_hit_returns_row(self, mock_db_session):
        row = {"id": 7, "name": "V"}
        mock_db_session.execute.return_value = _result_with(row)

        result = await VendorService(mock_db_session).delete_vendor("7")

        assert result == row
        mock_db_session.execute.assert_awaited_once()
        mock_db_session.commit.assert_awaited_once()


class TestEnquiryService:

    @pytest.mark.asyncio
    async def test_insert_failure(self, mock_db_session):
        mock_db_session.execute.side_effect = OperationalError("INSERT", {}, Exception("down"))

        with pytest.raises(ServerError, match="Server error while adding enquiry"):
            await EnquiryService(mock_db_session).create_enquiry(EnquiryCreate(name="Jo"))

    @pytest.mark.asyncio
    async def test_fetch_failure(self, mock_db_session):
        mock_db_session.execute.side_effect = OperationalError("SELECT", {}, Exception("down"))

        with pytest.raises(ServerError, match="Server error while fetching enquiries"):
            await EnquiryService(mock_db_session).list_enquiries()

    @pytest.mark.asyncio
    async def test_delete_miss_is_not_found(self, mock_db_session):
        mock_db_session.execute.return_value = _result_with(None)

        with pytest.raises(NotFoundError, match="Enquiry not found"):
            await EnquiryService(mock_db_session).delete_enquiry("1")

    @pytest.mark.asyncio
    async def test_malformed_id_rejected_by_database(self, mock_db_session):
        mock_db_session.execute.side_effect = DataError(
            "DELETE", {}, Exception("invalid input syntax for type integer: \"abc\"")
        )

        with pytest.raises(ServerError, match="Server error while deleting enquiry"):
            await EnquiryService(mock_db_session).delete_enquiry("abc")

    @pytest.mark.asyncio
    async def test_delete_failure(self, mock_db_session):
        mock_db_session.execute.side_effect = OperationalError("DELETE", {}, Exception("down"))

        with pytest.raises(ServerError, match="Server error while deleting enquiry"):
            await EnquiryService(mock_db_session).delete_enquiry("1")


class TestRequestBodies:

    def test_vendor_description_defaults_to_empty(self):
        row = VendorCreate(name="a", email="b", mobile="c", service="d").to_row()

        assert row == {
            "name": "a",
            "email": "b",
            "mobile": "c",
            "service": "d",
            "description": "",
        }

    def test_enquiry_message_defaults_to_empty(self):
        assert EnquiryCreate(name="Jo").to_row()["message"] == ""

    def test_numbers_are_coerced_to_text(self):
        row = VendorCreate(name="a", email="b", mobile=9876543210, service="d").to_row()

        assert row["mobile"] == "9876543210"
