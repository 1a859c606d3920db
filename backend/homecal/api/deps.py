"""
Shared API dependencies: password hashing, JWT tokens, current user and zone.
"""
from datetime import datetime, timedelta, timezone, tzinfo
from typing import Optional

import bcrypt
import jwt
from fastapi import Depends, HTTPException, Query, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from homecal.config import settings
from homecal.core.dates import resolve_zone
from homecal.core.models import UserProfile
from homecal.database import get_db
from homecal.models.user import User
from homecal.services.feed import feed
from homecal.services.repository import HouseholdRepository, ensure_profile

bearer_scheme = HTTPBearer(auto_error=False)


def get_password_hash(password: str) -> str:
    return bcrypt.hashpw(password.encode("utf-8"), bcrypt.gensalt()).decode("utf-8")


def verify_password(password: str, password_hash: str) -> bool:
    try:
        return bcrypt.checkpw(password.encode("utf-8"), password_hash.encode("utf-8"))
    except ValueError:
        return False


def _create_token(user_id: str, token_type: str, lifetime: timedelta) -> str:
    payload = {
        "sub": str(user_id),
        "type": token_type,
        "exp": datetime.now(timezone.utc) + lifetime,
    }
    return jwt.encode(payload, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def create_access_token(user_id: str) -> str:
    return _create_token(user_id, "access", timedelta(minutes=settings.access_token_expire_minutes))


def create_refresh_token(user_id: str) -> str:
    return _create_token(user_id, "refresh", timedelta(days=settings.refresh_token_expire_days))


def decode_token(token: str) -> dict:
    try:
        return jwt.decode(token, settings.jwt_secret, algorithms=[settings.jwt_algorithm])
    except jwt.PyJWTError:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid or expired token",
            headers={"WWW-Authenticate": "Bearer"},
        )


async def user_from_token(token: str, db: AsyncSession) -> User:
    """Resolve an access token to its user, or raise 401."""
    payload = decode_token(token)
    if payload.get("type") != "access" or not payload.get("sub"):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid token payload",
        )

    result = await db.execute(select(User).where(User.id == payload["sub"]))
    user = result.scalar_one_or_none()
    if not user:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="User not found",
        )
    return user


async def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    db: AsyncSession = Depends(get_db),
) -> User:
    if credentials is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return await user_from_token(credentials.credentials, db)


async def get_profile(
    db: AsyncSession = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> UserProfile:
    return await ensure_profile(db, current_user)


def get_repository(db: AsyncSession = Depends(get_db)) -> HouseholdRepository:
    return HouseholdRepository(db, feed)


def zone_for(tz: Optional[str], user: Optional[User]) -> tzinfo:
    """Explicit ``tz`` wins, then the user's stored zone, then the configured default."""
    name = tz or (user.timezone if user else None) or settings.default_timezone
    try:
        return resolve_zone(name)
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )


def get_zone(
    tz: Optional[str] = Query(None, description="IANA zone or offset, e.g. Europe/Berlin"),
    current_user: User = Depends(get_current_user),
) -> tzinfo:
    return zone_for(tz, current_user)
