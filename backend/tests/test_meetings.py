from httpx import AsyncClient


async def test_meeting_lifecycle(client: AsyncClient) -> None:
    first = (await client.post(
        "/meetings",
        json={"colleague_email": "bob@example.com", "date": "2024-05-01", "description": "Kickoff"},
    )).json()
    second = (await client.post(
        "/meetings", json={"colleague_email": "bob@example.com", "date": "2024-04-01"}
    )).json()

    listed = (await client.get("/meetings/bob@example.com")).json()
    assert [m["id"] for m in listed] == [first["id"], second["id"]]
    assert listed[1]["description"] is None

    response = await client.put(f"/meetings/{first['id']}", json={"description": "Moved"})
    assert response.json() == {"updated": 1}
    moved = (await client.get("/meetings/bob@example.com")).json()[0]
    assert moved["description"] == "Moved"
    assert moved["date"] is None

    assert (await client.delete(f"/meetings/{second['id']}")).json() == {"deleted": 1}
    assert len((await client.get("/meetings/bob@example.com")).json()) == 1


async def test_meeting_requires_colleague_email(client: AsyncClient) -> None:
    response = await client.post("/meetings", json={"date": "2024-05-01"})
    assert response.status_code == 400
