from scholarfolio.core.config import Settings, get_settings
from scholarfolio.core.database import Base, get_db, create_engine, create_session_maker, init_models
from scholarfolio.core.errors import AppError, ValidationError, ConflictError, AuthError, StoreError
from scholarfolio.core.security import verify_password, get_password_hash

__all__ = [
    "Settings",
    "get_settings",
    "Base",
    "get_db",
    "create_engine",
    "create_session_maker",
    "init_models",
    "AppError",
    "ValidationError",
    "ConflictError",
    "AuthError",
    "StoreError",
    "verify_password",
    "get_password_hash",
]
