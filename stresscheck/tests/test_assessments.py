# stresscheck/tests/test_assessments.py
import pytest

pytestmark = pytest.mark.asyncio

async def test_health(async_client):
    r = await async_client.get("/health")
    assert r.status_code == 200
    assert r.json() == {"ok": True}

async def test_stress_check_sumup(async_client):
    r = await async_client.post("/assessments/stress-check", json={"answers": [4] * 57})
    assert r.status_code == 200
    data = r.json()
    assert data["method"] == "sumup"
    assert (data["sum_a"], data["sum_b"], data["sum_c"]) == (35, 107, 36)
    assert data["high_stress"] is True
    assert data["evaluation_points"] is None

async def test_stress_check_conversion(async_client):
    r = await async_client.post("/assessments/stress-check", json={"answers": [1] * 57, "method": "conversion"})
    assert r.status_code == 200
    data = r.json()
    assert (data["sum_a"], data["sum_b"], data["sum_c"]) == (22, 26, 15)
    assert data["high_stress"] is False
    assert data["evaluation_points"]["work_control"] == 5

async def test_stress_check_by_question(async_client):
    payload = {"answers_by_question": {str(no): 1 for no in range(1, 58)}}
    r = await async_client.post("/assessments/stress-check", json=payload)
    assert r.status_code == 200
    assert (r.json()["sum_a"], r.json()["sum_b"], r.json()["sum_c"]) == (50, 38, 9)

@pytest.mark.parametrize("payload, code", [
    ({"answers": [1] * 56}, "not_fulfilled"),
    ({"answers": [1] * 58}, "illegal_question"),
    ({"answers": [1] * 56 + [7]}, "illegal_answer"),
    ({"answers_by_question": {"0": 1}}, "illegal_question"),
    ({"answers_by_question": {"1": 1}}, "not_fulfilled"),
])
async def test_stress_check_errors(async_client, payload, code):
    r = await async_client.post("/assessments/stress-check", json=payload)
    assert r.status_code == 422
    assert r.json()["detail"]["error"] == code

async def test_stress_check_needs_exactly_one_source(async_client):
    r = await async_client.post("/assessments/stress-check", json={})
    assert r.status_code == 422
    r = await async_client.post(
        "/assessments/stress-check",
        json={"answers": [1] * 57, "answers_by_question": {"1": 1}},
    )
    assert r.status_code == 422

async def test_stress_check_batch(async_client):
    payload = {
        "method": "sumup",
        "records": [
            {"id": "e1", "answers": [1] * 57},
            {"id": "e2", "answers": [1] * 30},
            {"id": "e3", "answers": [4] * 57},
        ],
    }
    r = await async_client.post("/assessments/stress-check/batch", json=payload)
    assert r.status_code == 200
    out = {row["id"]: row for row in r.json()}
    assert out["e1"]["result"]["high_stress"] is False
    assert out["e2"]["error"] == "not_fulfilled"
    assert out["e2"]["result"] is None
    assert out["e3"]["result"]["sum_b"] == 107

async def test_stress_check_batch_limit(async_client, monkeypatch):
    from stresscheck.core.config import settings
    monkeypatch.setattr(settings, "BULK_MAX_RECORDS", 1)
    payload = {"records": [{"id": "a", "answers": [1] * 57}, {"id": "b", "answers": [1] * 57}]}
    r = await async_client.post("/assessments/stress-check/batch", json=payload)
    assert r.status_code == 413

@pytest.mark.parametrize("payload", [
    {"answers": [True] * 57},
    {"answers": ["2"] * 57},
    {"answers": [2.0] * 57},
    {"answers_by_question": {str(no): True for no in range(1, 58)}},
])
async def test_stress_check_rejects_non_integer_answers(async_client, payload):
    r = await async_client.post("/assessments/stress-check", json=payload)
    assert r.status_code == 422
    assert "detail" in r.json()

async def test_stress_check_batch_rejects_boolean_answers(async_client):
    payload = {"records": [{"id": "e1", "answers": [True] * 57}]}
    r = await async_client.post("/assessments/stress-check/batch", json=payload)
    assert r.status_code == 422
