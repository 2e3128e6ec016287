from fastapi import APIRouter
from fastapi.responses import JSONResponse
from scholarfolio.api.deps import AppSettings, AuthBody, DbSession
from scholarfolio.core import AppError
from scholarfolio.services import identity_store

router = APIRouter()


def _failure(exc: AppError) -> JSONResponse:
    """Auth routes answer every failure as {success: false, message}."""
    return JSONResponse(status_code=exc.status_code, content={"success": False, "message": exc.message})


@router.post("/register")
async def register(credentials: AuthBody, db: DbSession, settings: AppSettings):
    try:
        user = await identity_store.register(
            db, credentials.email, credentials.password, rounds=settings.password_hash_rounds
        )
    except AppError as exc:
        return _failure(exc)
    return {
        "success": True,
        "id": user.id,
        "email": user.email,
        "message": "Account created successfully!",
    }


# Older clients still post to /signup
router.add_api_route("/signup", register, methods=["POST"])


@router.post("/login")
async def login(credentials: AuthBody, db: DbSession):
    try:
        user = await identity_store.login(db, credentials.email, credentials.password)
    except AppError as exc:
        return _failure(exc)
    return {"success": True, "email": user.email, "message": "Login successful!"}
