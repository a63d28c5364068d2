from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.auth.schemas import AuthResponse, LoginRequest, RefreshRequest, TokenResponse
from app.auth.service import (
    EmailAlreadyRegistered,
    authenticate_organizer,
    issue_tokens,
    organizer_for_refresh,
    register_organizer,
)
from app.database import get_db
from app.dependencies import get_current_organizer
from app.organizers.models import Organizer
from app.organizers.schemas import OrganizerCreate, OrganizerResponse

router = APIRouter(prefix="/auth", tags=["auth"])


def _auth_response(organizer: Organizer) -> AuthResponse:
    access_token, refresh_token = issue_tokens(organizer)
    return AuthResponse(
        organizer=OrganizerResponse.model_validate(organizer),
        access_token=access_token,
        refresh_token=refresh_token,
    )


@router.post("/register", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
async def register(data: OrganizerCreate, db: AsyncSession = Depends(get_db)):
    try:
        organizer = await register_organizer(db, data)
    except EmailAlreadyRegistered as exc:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail="Email already registered") from exc
    return _auth_response(organizer)


@router.post("/login", response_model=AuthResponse)
async def login(data: LoginRequest, db: AsyncSession = Depends(get_db)):
    organizer = await authenticate_organizer(db, data.email, data.password)
    if organizer is None:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid email or password")
    return _auth_response(organizer)


@router.post("/refresh", response_model=TokenResponse)
async def refresh(data: RefreshRequest, db: AsyncSession = Depends(get_db)):
    organizer = await organizer_for_refresh(db, data.refresh_token)
    if organizer is None:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid refresh token")

    access_token, refresh_token = issue_tokens(organizer)
    return TokenResponse(access_token=access_token, refresh_token=refresh_token)


@router.get("/me", response_model=OrganizerResponse)
async def me(organizer: Organizer = Depends(get_current_organizer)):
    return organizer
