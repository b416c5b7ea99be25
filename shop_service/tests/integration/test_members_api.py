import pytest


class TestMembersApi:
    @pytest.mark.asyncio
    async def test_save_member_v2_returns_id(self, client):
        response = await client.post("/api/v2/members", json={"name": "kim"})

        assert response.status_code == 200
        assert isinstance(response.json()["id"], int)

    @pytest.mark.asyncio
    async def test_duplicate_name_is_rejected(self, client):
        first = await client.post("/api/v2/members", json={"name": "kim"})
        assert first.status_code == 200

        second = await client.post("/api/v2/members", json={"name": "kim"})

        assert second.status_code == 409
        error = second.json()["error"]
        assert error["type"] == "illegal_state"
        assert error["message"] == "Member already exists."

    @pytest.mark.asyncio
    async def test_save_member_v1_with_address(self, client):
        response = await client.post(
            "/api/v1/members",
            json={
                "name": "park",
                "address": {"city": "Busan", "street": "Beach", "zipcode": "48000"},
            },
        )
        assert response.status_code == 200
        member_id = response.json()["id"]

        members = (await client.get("/api/v1/members")).json()

        assert members == [
            {
                "id": member_id,
                "name": "park",
                "address": {"city": "Busan", "street": "Beach", "zipcode": "48000"},
            }
        ]

    @pytest.mark.asyncio
    async def test_empty_name_fails_validation(self, client):
        response = await client.post("/api/v2/members", json={"name": ""})

        assert response.status_code == 422
        assert response.json()["error"]["type"] == "validation_error"

    @pytest.mark.asyncio
    async def test_update_member_v2(self, client):
        member_id = (await client.post("/api/v2/members", json={"name": "kim"})).json()[
            "id"
        ]

        response = await client.put(
            f"/api/v2/members/{member_id}", json={"name": "lee"}
        )

        assert response.status_code == 200
        assert response.json() == {"id": member_id, "name": "lee"}

    @pytest.mark.asyncio
    async def test_rename_to_taken_name_is_rejected(self, client):
        await client.post("/api/v2/members", json={"name": "kim"})
        lee_id = (await client.post("/api/v2/members", json={"name": "lee"})).json()[
            "id"
        ]

        response = await client.put(f"/api/v2/members/{lee_id}", json={"name": "kim"})

        assert response.status_code == 409
        assert response.json()["error"]["type"] == "illegal_state"

    @pytest.mark.asyncio
    async def test_update_missing_member_returns_404(self, client):
        response = await client.put("/api/v2/members/999", json={"name": "lee"})

        assert response.status_code == 404
        assert response.json()["error"]["message"] == "Member not found"

    @pytest.mark.asyncio
    async def test_members_v2_wraps_names(self, client):
        await client.post("/api/v2/members", json={"name": "kim"})
        await client.post("/api/v2/members", json={"name": "lee"})

        response = await client.get("/api/v2/members")

        assert response.status_code == 200
        assert response.json() == {
            "count": 2,
            "data": [{"name": "kim"}, {"name": "lee"}],
        }
