"""Enquiry endpoint tests."""

import pytest


class TestEnquiryLifecycle:

    @pytest.mark.asyncio
    async def test_create_then_delete_twice(self, test_client, enquiry_payload):
        created = await test_client.post("/api/enquiries", json=enquiry_payload)

        assert created.status_code == 201
        enquiry = created.json()
        assert enquiry["name"] == "Jo"
        assert enquiry["message"] == "hi"
        assert enquiry["id"] is not None
        assert enquiry["created_at"]

        deleted = await test_client.delete(f"/api/enquiries/{enquiry['id']}")
        assert deleted.status_code == 200
        assert deleted.json()["message"] == "Enquiry deleted successfully"
        assert deleted.json()["enquiry"]["id"] == enquiry["id"]

        again = await test_client.delete(f"/api/enquiries/{enquiry['id']}")
        assert again.status_code == 404
        assert again.json() == {"error": "Enquiry not found"}

    @pytest.mark.asyncio
    async def test_message_defaults_to_empty_string(self, test_client, enquiry_payload):
        enquiry_payload.pop("message")

        response = await test_client.post("/api/enquiries", json=enquiry_payload)

        assert response.status_code == 201
        assert response.json()["message"] == ""

    @pytest.mark.asyncio
    async def test_list_newest_first(self, test_client, enquiry_payload):
        for name in ("A", "B", "C"):
            await test_client.post("/api/enquiries", json={**enquiry_payload, "name": name})

        response = await test_client.get("/api/enquiries")

        assert response.status_code == 200
        assert [e["name"] for e in response.json()] == ["C", "B", "A"]

    @pytest.mark.asyncio
    async def test_enquiries_have_no_update(self, test_client, enquiry_payload):
        created = (await test_client.post("/api/enquiries", json=enquiry_payload)).json()

        response = await test_client.put(f"/api/enquiries/{created['id']}", json=enquiry_payload)

        assert response.status_code == 405
        assert response.json() == {"error": "Method not allowed"}

    @pytest.mark.asyncio
    async def test_numeric_mobile_is_accepted(self, test_client, enquiry_payload):
        response = await test_client.post(
            "/api/enquiries", json={**enquiry_payload, "mobile": 123}
        )

        assert response.status_code == 201
        assert response.json()["mobile"] == "123"

    @pytest.mark.asyncio
    async def test_non_numeric_id_deletes_nothing(self, test_client, enquiry_payload):
        created = (await test_client.post("/api/enquiries", json=enquiry_payload)).json()

        response = await test_client.delete("/api/enquiries/abc")

        # SQLite casts "abc" to 0 (no row); Postgres rejects the cast (500)
        assert response.status_code == 404
        assert (await test_client.get("/api/enquiries")).json() == [created]
