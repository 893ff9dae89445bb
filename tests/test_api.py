"""Tests for the HTTP API."""

import pytest


def visit_payload(**overrides) -> dict:
    payload = {
        "durationMinutes": 30,
        "procedures": [],
        "preparations": [],
        "travelMinutes": 15,
        "windowDays": 3,
    }
    payload.update(overrides)
    return payload


@pytest.mark.asyncio
async def test_health_check(client):
    response = await client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "healthy"}


class TestCalculateEndpoint:
    @pytest.mark.asyncio
    async def test_single_visit(self, client):
        response = await client.post("/burden-score/calculate", json={"visits": [visit_payload()]})
        assert response.status_code == 200
        data = response.json()
        assert data["overallScore"] == 4
        assert data["category"] == "low"
        assert data["totalRawBurden"] == 1.0
        assert data["maxPossibleBurden"] == 25
        assert data["visits"][0]["visitNumber"] == 1
        assert data["visits"][0]["breakdown"] == {
            "timeOnSite": 0.5,
            "procedures": 0.0,
            "preparation": 0.0,
            "travel": 0.5,
            "windowTightness": 0.0,
        }

    @pytest.mark.asyncio
    async def test_empty_visits_rejected(self, client):
        response = await client.post("/burden-score/calculate", json={"visits": []})
        assert response.status_code == 422
        assert response.json()["detail"] == "No visits provided"

    @pytest.mark.asyncio
    async def test_duplicate_preparations_rejected(self, client):
        response = await client.post(
            "/burden-score/calculate",
            json={"visits": [visit_payload(preparations=["fasting", "fasting"])]},
        )
        assert response.status_code == 422

    @pytest.mark.asyncio
    @pytest.mark.parametrize("literal", ["Infinity", "-Infinity", "NaN"])
    async def test_non_finite_numbers_rejected(self, client, literal):
        # the json module parses these literals, so they reach validation
        body = '{"visits": [{"durationMinutes": 30, "travelMinutes": %s, "windowDays": 3}]}' % literal
        response = await client.post(
            "/burden-score/calculate",
            content=body,
            headers={"Content-Type": "application/json"},
        )
        assert response.status_code == 422

    @pytest.mark.asyncio
    async def test_overflowing_burden_rejected(self, client):
        response = await client.post(
            "/burden-score/calculate",
            json={"visits": [visit_payload(travelMinutes=1.7e308) for _ in range(40)]},
        )
        assert response.status_code == 422
        assert "finite" in response.json()["detail"]

    @pytest.mark.asyncio
    async def test_unknown_procedure_type_accepted(self, client):
        response = await client.post(
            "/burden-score/calculate",
            json={"visits": [visit_payload(procedures=[{"type": "acupuncture", "name": "Acupuncture"}])]},
        )
        assert response.status_code == 200
        assert response.json()["visits"][0]["breakdown"]["procedures"] == 1.0

    @pytest.mark.asyncio
    async def test_demo_payload_round_trip(self, client):
        demo = await client.get("/demo/visits")
        assert demo.status_code == 200
        assert len(demo.json()["visits"]) == 4

        response = await client.post("/burden-score/calculate", json=demo.json())
        assert response.status_code == 200
        assert response.json()["overallScore"] == 39
        assert response.json()["category"] == "medium"


class TestPatientEndpoint:
    @pytest.mark.asyncio
    async def test_scores_appointments(self, client):
        response = await client.post(
            "/burden-score/patient/p1",
            json={
                "appointments": [
                    {"id": "a1", "procedures": [{"name": "Blood Draw"}, {"name": "MRI with contrast"}]}
                ]
            },
        )
        assert response.status_code == 200
        data = response.json()
        assert data["patientId"] == "p1"
        assert data["overallScore"] == 48
        assert data["category"] == "medium"

    @pytest.mark.asyncio
    async def test_options(self, client):
        response = await client.post(
            "/burden-score/patient/p2",
            json={
                "appointments": [{"durationMinutes": 30, "procedures": []}],
                "options": {"travelMinutes": 15, "windowDays": 3},
            },
        )
        assert response.status_code == 200
        assert response.json()["overallScore"] == 4

    @pytest.mark.asyncio
    async def test_no_appointments(self, client):
        response = await client.post("/burden-score/patient/p3", json={"appointments": []})
        assert response.status_code == 200
        assert response.json()["overallScore"] == 0
        assert response.json()["visits"] == []


@pytest.mark.asyncio
async def test_categories(client):
    response = await client.get("/burden-score/categories")
    assert response.status_code == 200
    data = response.json()
    assert set(data) == {"low", "medium", "high"}
    assert data["low"]["label"] == "Low Burden"
    assert data["medium"]["bgColor"] == "bg-yellow-50"
    assert data["high"]["borderColor"] == "border-red-200"
