import pytest
from httpx import ASGITransport, AsyncClient

from main import app
from app.api.api_v1.endpoints import product_schedule

PRODUCT_ID = "665f1c2a9b1e8a3d4c5b6a71"

# Test data
stored_schedule = {
    "availableTimeSlots": [
        {"day": 3, "start": "10:00", "end": "17:00", "mode": "custom", "customSlots": ["14:30", "10:00"]},
        {"day": 1, "start": "09:00", "end": "11:00"},
    ],
    "unavailableDates": [{"date": "2025-06-01", "reason": "휴무"}],
}

@pytest.fixture
def fake_store(monkeypatch):
    store = {PRODUCT_ID: dict(stored_schedule)}

    async def fake_get(product_id):
        return store.get(product_id)

    async def fake_save(product_id, schedule):
        if product_id not in store:
            return False
        store[product_id] = schedule
        return True

    monkeypatch.setattr(product_schedule, "get_product_schedule", fake_get)
    monkeypatch.setattr(product_schedule, "save_product_schedule", fake_save)
    return store

def _client():
    return AsyncClient(transport=ASGITransport(app=app), base_url="http://test")

@pytest.mark.asyncio
async def test_get_schedule_normalizes_stored_value(fake_store):
    async with _client() as client:
        response = await client.get(f"/api/v1/products/{PRODUCT_ID}/schedule")

    assert response.status_code == 200
    assert response.json() == {
        "availableTimeSlots": [
            {"day": 1, "start": "09:00", "end": "11:00", "mode": "auto", "interval": 60},
            {"day": 3, "start": "10:00", "end": "17:00", "mode": "custom", "customSlots": ["10:00", "14:30"]},
        ],
        "unavailableDates": [{"date": "2025-06-01", "reason": "휴무"}],
    }

@pytest.mark.asyncio
async def test_get_schedule_missing_product(fake_store):
    async with _client() as client:
        response = await client.get("/api/v1/products/000000000000000000000000/schedule")
    assert response.status_code == 404

@pytest.mark.asyncio
async def test_put_schedule_stores_serialized_output(fake_store):
    payload = {
        "availableTimeSlots": [
            {"day": 6, "start": "10:00", "end": "12:00", "mode": "auto", "interval": 30, "customSlots": ["11:00"]},
        ],
        "unavailableDates": [],
    }
    async with _client() as client:
        response = await client.put(f"/api/v1/products/{PRODUCT_ID}/schedule", json=payload)

    expected = {
        "availableTimeSlots": [
            {"day": 6, "start": "10:00", "end": "12:00", "mode": "auto", "interval": 30},
        ],
        "unavailableDates": None,
    }
    assert response.status_code == 200
    assert response.json() == expected
    assert fake_store[PRODUCT_ID] == expected

@pytest.mark.asyncio
async def test_put_schedule_rejects_malformed_time(fake_store):
    payload = {"availableTimeSlots": [{"day": 1, "start": "9am", "end": "18:00"}]}
    async with _client() as client:
        response = await client.put(f"/api/v1/products/{PRODUCT_ID}/schedule", json=payload)

    assert response.status_code == 400
    assert fake_store[PRODUCT_ID] == stored_schedule

@pytest.mark.asyncio
async def test_put_schedule_missing_product(fake_store):
    async with _client() as client:
        response = await client.put("/api/v1/products/000000000000000000000000/schedule", json={})
    assert response.status_code == 404

@pytest.mark.asyncio
async def test_preview():
    async with _client() as client:
        response = await client.post(
            "/api/v1/schedule/preview",
            json={"start": "09:00", "end": "18:00", "interval": 60}
        )

    assert response.status_code == 200
    data = response.json()
    assert len(data["slots"]) == 9
    assert data["preview"] == data["slots"][:6]
    assert data["hasMore"] is True

@pytest.mark.asyncio
async def test_preview_rejects_bad_input():
    async with _client() as client:
        bad_time = await client.post(
            "/api/v1/schedule/preview",
            json={"start": "09:00", "end": "25:00", "interval": 60}
        )
        bad_interval = await client.post(
            "/api/v1/schedule/preview",
            json={"start": "09:00", "end": "18:00", "interval": 0}
        )
    assert bad_time.status_code == 400
    assert bad_interval.status_code == 400

@pytest.mark.asyncio
async def test_options():
    async with _client() as client:
        response = await client.get("/api/v1/schedule/options")

    assert response.status_code == 200
    data = response.json()
    assert [d["day"] for d in data["days"]] == [0, 1, 2, 3, 4, 5, 6]
    assert data["days"][0]["label"] == "일"
    assert 60 in data["intervals"]
    assert data["defaultInterval"] == 60
