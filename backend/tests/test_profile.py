from types import SimpleNamespace

import pytest
from httpx import AsyncClient
from sqlalchemy import text

from scholarfolio.core import StoreError
from scholarfolio.services.profile_store import _insert_for

PROFILE = {
    "userEmail": "ada@example.com",
    "fullName": "Ada Lovelace",
    "designation": "Professor",
    "department": "Mathematics",
    "institution": "University of London",
    "officialEmail": "ada@uni.example",
    "researchKeywords": "analysis, engines , ",
    "researchDescription": "Computing machinery",
    "degrees": [{"degree": "PhD", "specialization": "Mathematics", "year": "1840", "institution": "UoL"}],
    "awards": '[{"title": "Medal", "year": "1843"}]',
    "skills": "Notes, Translation",
}


async def test_missing_profile_is_null(client: AsyncClient) -> None:
    response = await client.get("/profile/nobody@example.com")
    assert response.status_code == 200
    assert response.json() is None


async def test_upsert_creates_then_updates(client: AsyncClient) -> None:
    created = (await client.post("/profile", json=PROFILE)).json()
    assert created["message"] == "Profile created successfully"

    updated = (await client.post("/profile", json={**PROFILE, "designation": "Fellow", "awards": None})).json()
    assert updated == {"message": "Profile updated successfully", "id": created["id"]}

    profile = (await client.get("/profile/ada@example.com")).json()
    assert profile["designation"] == "Fellow"
    assert profile["userEmail"] == "ada@example.com"
    assert profile["degrees"][0]["degree"] == "PhD"
    assert profile["awards"] == []
    assert profile["courses"] == []


async def test_list_fields_accept_json_text(client: AsyncClient) -> None:
    await client.post("/profile", json=PROFILE)
    profile = (await client.get("/profile/ada@example.com")).json()
    assert profile["awards"] == [{"title": "Medal", "year": "1843"}]


async def test_invalid_list_field_is_rejected(client: AsyncClient) -> None:
    response = await client.post("/profile", json={**PROFILE, "grants": "{not json"})
    assert response.status_code == 400


async def test_user_email_is_required(client: AsyncClient) -> None:
    response = await client.post("/profile", json={"fullName": "Anonymous"})
    assert response.status_code == 400


async def test_delete_profile(client: AsyncClient) -> None:
    await client.post("/profile", json=PROFILE)
    response = await client.delete("/profile/ada@example.com")
    assert response.json() == {"deleted": 1, "message": "Profile deleted successfully"}
    assert (await client.delete("/profile/ada@example.com")).json()["deleted"] == 0


async def test_generate_resume(client: AsyncClient) -> None:
    await client.post("/profile", json=PROFILE)
    response = await client.get("/generate-resume/ada@example.com")
    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/html")
    page = response.text
    assert "Ada Lovelace" in page
    assert "Professor | Mathematics" in page
    assert "Research Interests" in page
    assert '<span class="keyword">engines</span>' in page
    assert "PhD in Mathematics" in page
    assert "Awards &amp; Achievements" in page
    assert "Teaching" not in page


async def test_generate_resume_unknown_profile(client: AsyncClient) -> None:
    response = await client.get("/generate-resume/nobody@example.com")
    assert response.status_code == 404
    assert "Profile Not Found" in response.text


async def test_generate_resume_store_failure(client: AsyncClient, app) -> None:
    async with app.state.engine.begin() as conn:
        await conn.execute(text("DROP TABLE profiles"))

    response = await client.get("/generate-resume/ada@example.com")
    assert response.status_code == 500
    assert "Error Generating Resume" in response.text
    assert "profiles" not in response.text


def test_unsupported_dialect_is_a_store_error() -> None:
    session = SimpleNamespace(bind=SimpleNamespace(dialect=SimpleNamespace(name="mysql")))
    with pytest.raises(StoreError) as excinfo:
        _insert_for(session)
    assert excinfo.value.message == "Error saving profile."
    assert excinfo.value.status_code == 500
