"""Ideas, notes, future work and deadlines share one owner-scoped CRUD contract."""
import pytest
from httpx import AsyncClient
from sqlalchemy import text


async def test_idea_defaults_and_newest_first(client: AsyncClient) -> None:
    older = (await client.post(
        "/ideas",
        json={"user_email": "ada@example.com", "title": "Old", "created_date": "2024-01-01T00:00:00.000Z"},
    )).json()
    newer = (await client.post(
        "/ideas",
        json={"user_email": "ada@example.com", "title": "New", "created_date": "2024-06-01T00:00:00.000Z"},
    )).json()
    assert older["category"] == "general"

    listed = (await client.get("/ideas/ada@example.com")).json()
    assert [i["id"] for i in listed] == [newer["id"], older["id"]]


async def test_idea_gets_server_timestamp(client: AsyncClient) -> None:
    idea = (await client.post("/ideas", json={"user_email": "ada@example.com"})).json()
    assert idea["created_date"].endswith("Z")


async def test_idea_update_clears_omitted_fields(client: AsyncClient) -> None:
    idea = (await client.post(
        "/ideas", json={"user_email": "ada@example.com", "title": "T", "content": "C"}
    )).json()
    assert (await client.put(f"/ideas/{idea['id']}", json={"title": "T2"})).json() == {"updated": 1}

    (row,) = (await client.get("/ideas/ada@example.com")).json()
    assert row["title"] == "T2"
    assert row["content"] is None
    assert row["category"] is None


async def test_note_lifecycle(client: AsyncClient) -> None:
    note = (await client.post(
        "/notes", json={"user_email": "ada@example.com", "title": "Reading", "content": "Ch. 3"}
    )).json()
    assert note["title"] == "Reading"
    assert (await client.put(f"/notes/{note['id']}", json={"content": "Ch. 4"})).json() == {"updated": 1}
    assert (await client.delete(f"/notes/{note['id']}")).json() == {"deleted": 1}
    assert (await client.get("/notes/ada@example.com")).json() == []


async def test_future_work_alias(client: AsyncClient) -> None:
    item = (await client.post(
        "/future_work", json={"user_email": "ada@example.com", "title": "Extend model"}
    )).json()
    assert item["priority"] == "medium"

    assert (await client.get("/future/ada@example.com")).json() == (
        await client.get("/future_work/ada@example.com")
    ).json()


async def test_deadlines_soonest_first(client: AsyncClient) -> None:
    for title, due in [("Camera ready", "2024-09-01"), ("Abstract", "2024-03-01"), ("Paper", "2024-04-15")]:
        await client.post("/deadlines", json={"user_email": "ada@example.com", "title": title, "due_date": due})

    listed = (await client.get("/deadlines/ada@example.com")).json()
    assert [d["title"] for d in listed] == ["Abstract", "Paper", "Camera ready"]
    assert listed[0]["status"] == "pending"
    assert listed[0]["priority"] == "medium"


@pytest.mark.parametrize("collection", ["ideas", "notes", "future_work", "deadlines"])
async def test_user_email_is_required(client: AsyncClient, collection: str) -> None:
    response = await client.post(f"/{collection}", json={"title": "orphan"})
    assert response.status_code == 400
    assert "user_email" in response.json()["error"]


@pytest.mark.parametrize("collection", ["ideas", "notes", "future_work", "deadlines"])
async def test_missing_ids_report_zero(client: AsyncClient, collection: str) -> None:
    assert (await client.put(f"/{collection}/12345", json={})).json() == {"updated": 0}
    assert (await client.delete(f"/{collection}/12345")).json() == {"deleted": 0}


async def test_database_failure_is_reported_generically(client: AsyncClient, app) -> None:
    async with app.state.engine.begin() as conn:
        await conn.execute(text("DROP TABLE ideas"))

    response = await client.post("/ideas", json={"user_email": "ada@example.com"})
    assert response.status_code == 500
    assert response.json() == {"error": "Error creating idea."}

    response = await client.get("/ideas/ada@example.com")
    assert response.json() == {"error": "Error fetching ideas."}
