from fastapi import APIRouter, status
from fastapi.responses import HTMLResponse

from scholarfolio.api.deps import DbSession
from scholarfolio.core import StoreError
from scholarfolio.schemas import ProfileResponse, ProfileUpsert
from scholarfolio.services import profile_store, resume

router = APIRouter()


@router.get("/profile/{email}")
async def get_profile(email: str, db: DbSession):
    profile = await profile_store.get_profile(db, email)
    if profile is None:
        return None
    return ProfileResponse.model_validate(profile).model_dump(by_alias=True)


@router.post("/profile")
async def save_profile(data: ProfileUpsert, db: DbSession):
    profile_id, created = await profile_store.upsert_profile(db, data)
    message = "Profile created successfully" if created else "Profile updated successfully"
    return {"message": message, "id": profile_id}


@router.delete("/profile/{email}")
async def delete_profile(email: str, db: DbSession):
    deleted = await profile_store.delete_profile(db, email)
    return {"deleted": deleted, "message": "Profile deleted successfully"}


@router.get("/generate-resume/{email}", response_class=HTMLResponse)
async def generate_resume(email: str, db: DbSession):
    try:
        profile = await profile_store.get_profile(db, email)
    except StoreError:
        return HTMLResponse(resume.render_error(), status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)
    if profile is None:
        return HTMLResponse(resume.render_not_found(), status_code=status.HTTP_404_NOT_FOUND)
    return HTMLResponse(resume.render_resume(profile))
