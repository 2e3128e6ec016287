"""Static single-page frontend.

Registered after every API router so the catch-all only sees paths nothing
else claimed.
"""
from pathlib import Path

from fastapi import APIRouter, HTTPException, status
from fastapi.responses import FileResponse

from scholarfolio.api.deps import AppSettings

router = APIRouter()


def _page(static_root: Path, name: str) -> FileResponse:
    page = static_root / name
    if not page.is_file():
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Page not found")
    return FileResponse(page)


@router.get("/", include_in_schema=False)
async def index(settings: AppSettings):
    return _page(Path(settings.static_dir).resolve(), "index.html")


@router.get("/dashboard", include_in_schema=False)
async def dashboard(settings: AppSettings):
    return _page(Path(settings.static_dir).resolve(), "dashboard.html")


@router.get("/{full_path:path}", include_in_schema=False)
async def spa_fallback(full_path: str, settings: AppSettings):
    static_root = Path(settings.static_dir).resolve()
    candidate = (static_root / full_path).resolve()
    if not candidate.is_relative_to(static_root):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="File not found")
    if candidate.is_file():
        return FileResponse(candidate)
    if candidate.suffix.lower() == ".html":
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Page not found")
    return _page(static_root, "index.html")
