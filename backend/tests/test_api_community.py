"""
Rural Sports Backend: Community API Integration Tests
======================================================

Interactions, sports-expert consultation, participation statistics and the
plain CRUD resources (donations, loans, teams).
"""

from unittest.mock import AsyncMock, patch

import pytest

from app.exceptions import CircuitBreakerOpenError, LLMServiceError
from app.services.consult_service import consult_service


async def _post(client, user_id, type_, title, content="text"):
    response = await client.post(
        "/api/interactions",
        json={"userId": user_id, "type": type_, "title": title, "content": content},
    )
    assert response.status_code == 201, response.text
    return response.json()


class TestInteractionsApi:

    @pytest.mark.asyncio
    async def test_filter_forms(self, authed_client, session_user):
        uid = session_user["id"]
        await _post(authed_client, uid, "BOARD", "Lost ball")
        await _post(authed_client, uid, "COMMENT", "Nice match")
        await _post(authed_client, uid, "NOTICE", "Field closed")

        comma = await authed_client.get("/api/interactions", params={"types": "BOARD,NOTICE"})
        repeated = await authed_client.get(
            "/api/interactions", params=[("types", "board"), ("types", "notice")]
        )
        everything = await authed_client.get("/api/interactions")

        assert [i["title"] for i in comma.json()] == ["Field closed", "Lost ball"]
        assert [i["title"] for i in repeated.json()] == ["Field closed", "Lost ball"]
        assert len(everything.json()) == 3

    @pytest.mark.asyncio
    async def test_unknown_type_is_bad_request(self, authed_client):
        response = await authed_client.get("/api/interactions", params={"types": "BOARD,SPAM"})

        assert response.status_code == 400
        assert response.json()["details"]["field"] == "types"

    @pytest.mark.asyncio
    async def test_edit_reply_delete(self, authed_client, session_user):
        post = await _post(authed_client, session_user["id"], "CONSULT", "Knee pain", "Knee hurts after running")

        edited = await authed_client.put(
            f"/api/interactions/{post['id']}", json={"title": "Knee pain (update)", "content": "Better now"}
        )
        assert edited.json()["content"] == "Better now"

        replied = await authed_client.post(
            f"/api/interactions/{post['id']}/reply", json={"replyText": "Rest two days."}
        )
        assert replied.json()["replyContent"] == "Rest two days."

        legacy = await authed_client.post(
            f"/api/interactions/{post['id']}/reply", json={"replyContent": "Ice it too."}
        )
        assert legacy.json()["replyContent"] == "Ice it too."

        assert (await authed_client.delete(f"/api/interactions/{post['id']}")).status_code == 204
        missing = await authed_client.post(
            f"/api/interactions/{post['id']}/reply", json={"replyText": "?"}
        )
        assert missing.status_code == 404


class TestConsultApi:

    @pytest.mark.asyncio
    async def test_consult_stores_exchange(self, authed_client, session_user):
        with patch.object(consult_service, "llm") as mock_llm:
            mock_llm.generate = AsyncMock(return_value="Do squats twice a week.")

            response = await authed_client.post(
                "/api/consult",
                json={"prompt": "How can I build leg strength?", "userId": session_user["id"]},
            )

        assert response.status_code == 200
        body = response.json()
        assert body["answer"] == "Do squats twice a week."
        assert body["interaction"]["type"] == "CONSULT"
        assert body["interaction"]["replyContent"] == "Do squats twice a week."

        board = await authed_client.get("/api/interactions", params={"types": "CONSULT"})
        assert len(board.json()) == 1

    @pytest.mark.asyncio
    async def test_consult_without_user(self, authed_client):
        with patch.object(consult_service, "llm") as mock_llm:
            mock_llm.generate = AsyncMock(return_value="Drink water.")

            response = await authed_client.post("/api/consult", json={"prompt": "Hot day tips?"})

        assert response.json() == {"answer": "Drink water.", "interaction": None}

    @pytest.mark.asyncio
    async def test_llm_failure_is_503(self, authed_client):
        with patch.object(consult_service, "llm") as mock_llm:
            mock_llm.generate = AsyncMock(side_effect=LLMServiceError(retry_after=60))

            response = await authed_client.post("/api/consult", json={"prompt": "Hello"})

        assert response.status_code == 503
        assert response.headers["retry-after"] == "60"
        assert response.json()["error"] == "llm_service_error"

    @pytest.mark.asyncio
    async def test_open_circuit_is_503(self, authed_client):
        with patch.object(consult_service, "llm") as mock_llm:
            mock_llm.generate = AsyncMock(side_effect=CircuitBreakerOpenError(recovery_time=30))

            response = await authed_client.post("/api/consult", json={"prompt": "Hello"})

        assert response.status_code == 503
        assert response.json()["details"] == {"recovery_time": 30}

    @pytest.mark.asyncio
    async def test_blank_prompt_rejected(self, authed_client):
        response = await authed_client.post("/api/consult", json={"prompt": "   "})
        assert response.status_code == 422


class TestStatsApi:

    @pytest.mark.asyncio
    async def test_participation(self, authed_client, session_user):
        first = (await authed_client.post("/api/events", json={"name": "Relay"})).json()
        await authed_client.post("/api/events", json={"name": "Kite flying"})
        await authed_client.post(f"/api/events/{first['id']}/register", json={"userId": session_user["id"]})

        response = await authed_client.get("/api/stats/participation")

        assert response.json() == [{"name": "Relay", "value": 1}, {"name": "Kite flying", "value": 0}]


class TestCrudResourcesApi:

    @pytest.mark.asyncio
    async def test_donations(self, authed_client, session_user):
        created = await authed_client.post(
            "/api/donations",
            json={"materialType": "clothing", "condition": "worn", "donatorId": session_user["id"]},
        )
        assert created.status_code == 201
        donation_id = created.json()["id"]

        updated = await authed_client.put(f"/api/donations/{donation_id}", json={"status": "APPROVED"})
        assert updated.json()["status"] == "APPROVED"

        bad = await authed_client.post("/api/donations", json={"donatorId": 999})
        assert bad.status_code == 400

        assert (await authed_client.delete(f"/api/donations/{donation_id}")).status_code == 204
        assert (await authed_client.get("/api/donations")).json() == []

    @pytest.mark.asyncio
    async def test_loans_filtered_by_borrower(self, authed_client, session_user):
        uid = session_user["id"]
        other = (await authed_client.post("/api/users", json={"username": "qian", "password": "pw"})).json()
        await authed_client.post("/api/loans", json={"materialType": "ball", "borrowerId": uid})
        await authed_client.post("/api/loans", json={"materialType": "bat", "borrowerId": other["id"]})

        mine = await authed_client.get("/api/loans", params={"borrowerId": uid})
        everyone = await authed_client.get("/api/loans")

        assert [loan["materialType"] for loan in mine.json()] == ["ball"]
        assert len(everyone.json()) == 2
        assert (await authed_client.get("/api/loans/999")).status_code == 404

    @pytest.mark.asyncio
    async def test_teams(self, authed_client, session_user):
        created = await authed_client.post(
            "/api/teams",
            json={"name": "East Village Eagles", "sport": "basketball", "captainId": session_user["id"]},
        )
        team_id = created.json()["id"]

        renamed = await authed_client.put(f"/api/teams/{team_id}", json={"villageName": "East Village"})
        assert renamed.json()["villageName"] == "East Village"
        assert renamed.json()["captainId"] == session_user["id"]

        assert (await authed_client.get(f"/api/teams/{team_id}")).json()["name"] == "East Village Eagles"
        assert (await authed_client.delete(f"/api/teams/{team_id}")).status_code == 204
        assert (await authed_client.get(f"/api/teams/{team_id}")).status_code == 404
