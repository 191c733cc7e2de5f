# stresscheck/tests/test_questions.py
import pytest

pytestmark = pytest.mark.asyncio

async def test_catalog(async_client):
    r = await async_client.get("/questions")
    assert r.status_code == 200
    themes = r.json()["simple_stress"]
    assert len(themes) == 4
    ids = [q["id"] for t in themes for block in t["questions"] for q in block["questions"]]
    assert ids == list(range(1, 58))

async def test_single_question(async_client):
    r = await async_client.get("/questions/14")
    assert r.status_code == 200
    q = r.json()
    assert q["id"] == 14
    assert q["reverse"] is False
    assert [c["score"] for c in q["scores"]] == [1, 2, 3, 4]

async def test_unknown_question(async_client):
    r = await async_client.get("/questions/58")
    assert r.status_code == 404
