from typing import Annotated

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from scholarfolio.core import Settings, get_db
from scholarfolio.schemas import Credentials


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


async def read_credentials(request: Request) -> Credentials:
    """Auth bodies never fail validation: an empty, malformed or non-object body
    reads as missing fields so the route can answer in its own envelope."""
    try:
        payload = await request.json()
        return Credentials.model_validate(payload)
    except ValueError:
        return Credentials()


DbSession = Annotated[AsyncSession, Depends(get_db)]
AppSettings = Annotated[Settings, Depends(get_app_settings)]
AuthBody = Annotated[Credentials, Depends(read_credentials)]
