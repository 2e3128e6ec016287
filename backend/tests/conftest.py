"""
Shared fixtures: every test gets a fresh application bound to its own SQLite
file under tmp_path, with a cheap bcrypt cost factor.
"""
import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from scholarfolio.core import Settings, init_models
from scholarfolio.main import create_app


@pytest.fixture
def settings(tmp_path) -> Settings:
    static_dir = tmp_path / "static"
    static_dir.mkdir()
    (static_dir / "index.html").write_text("<html>index</html>")
    (static_dir / "dashboard.html").write_text("<html>dashboard</html>")
    (static_dir / "app.js").write_text("console.log('app');")
    return Settings(
        database_url=f"sqlite+aiosqlite:///{tmp_path / 'scholarfolio.db'}",
        static_dir=str(static_dir),
        password_hash_rounds=4,
    )


@pytest_asyncio.fixture
async def app(settings):
    application = create_app(settings)
    assert await init_models(application.state.engine)
    yield application
    await application.state.engine.dispose()


@pytest_asyncio.fixture
async def client(app):
    """Async httpx client using ASGI transport, no live server needed."""
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac


@pytest_asyncio.fixture
async def db(app):
    async with app.state.session_maker() as session:
        yield session
