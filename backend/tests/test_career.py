from httpx import AsyncClient
from sqlalchemy import func, select

from scholarfolio.models import StageHistory


async def _goal(client: AsyncClient, **overrides) -> dict:
    payload = {"user_email": "ada@example.com", "title": "Tenure", **overrides}
    response = await client.post("/career_goals", json=payload)
    assert response.status_code == 200, response.text
    return response.json()


async def test_goal_defaults(client: AsyncClient) -> None:
    goal = await _goal(client)
    assert goal["progress"] == 0
    assert goal["goal_type"] == "general"
    assert goal["total_stages"] == 5
    assert goal["current_stage"] == 0


async def test_career_alias_lists_newest_first(client: AsyncClient) -> None:
    older = await _goal(client, created_date="2023-01-01T00:00:00.000Z")
    newer = await _goal(client, created_date="2024-01-01T00:00:00.000Z")

    listed = (await client.get("/career/ada@example.com")).json()
    assert [g["id"] for g in listed] == [newer["id"], older["id"]]
    assert listed == (await client.get("/career_goals/ada@example.com")).json()


async def test_stage_history_ordering(client: AsyncClient) -> None:
    goal = await _goal(client)
    url = f"/career_goals/{goal['id']}/history"
    await client.post(url, json={"stage": 2, "description": "Second"})
    await client.post(url, json={"stage": 1, "description": "First"})

    history = (await client.get(url)).json()
    assert [h["stage"] for h in history] == [1, 2]
    assert history[0]["goal_id"] == goal["id"]
    assert history[0]["updated_date"]


async def test_stage_is_required(client: AsyncClient) -> None:
    goal = await _goal(client)
    response = await client.post(f"/career_goals/{goal['id']}/history", json={"description": "?"})
    assert response.status_code == 400


async def test_history_delete_needs_matching_goal(client: AsyncClient) -> None:
    goal = await _goal(client)
    other = await _goal(client, title="Other")
    entry = (await client.post(f"/career_goals/{goal['id']}/history", json={"stage": 1})).json()

    assert (await client.delete(f"/career_goals/{other['id']}/history/{entry['id']}")).json() == {"deleted": 0}
    assert (await client.delete(f"/career_goals/{goal['id']}/history/{entry['id']}")).json() == {"deleted": 1}


async def test_goal_delete_removes_history(client: AsyncClient, db) -> None:
    goal = await _goal(client)
    keep = await _goal(client, title="Keep")
    for stage in (1, 2, 3):
        await client.post(f"/career_goals/{goal['id']}/history", json={"stage": stage})
    await client.post(f"/career_goals/{keep['id']}/history", json={"stage": 1})

    assert (await client.delete(f"/career_goals/{goal['id']}")).json() == {"deleted": 1}

    remaining = await db.scalar(select(func.count()).select_from(StageHistory))
    assert remaining == 1
    assert (await client.get(f"/career_goals/{goal['id']}/history")).json() == []


async def test_goal_update(client: AsyncClient) -> None:
    goal = await _goal(client)
    response = await client.put(
        f"/career_goals/{goal['id']}", json={"title": "Full professor", "progress": 60, "current_stage": 3}
    )
    assert response.json() == {"updated": 1}
    (row,) = (await client.get("/career_goals/ada@example.com")).json()
    assert row["title"] == "Full professor"
    assert row["current_stage"] == 3
    assert row["description"] is None
