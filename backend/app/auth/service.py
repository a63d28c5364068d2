from uuid import UUID

import structlog
from passlib.context import CryptContext
from sqlalchemy.ext.asyncio import AsyncSession

from app.auth.jwt import create_access_token, create_refresh_token, decode_token
from app.organizers.models import Organizer
from app.organizers.schemas import OrganizerCreate
from app.organizers.service import get_organizer_by_email, get_organizer_by_id

logger = structlog.get_logger()

pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")


class EmailAlreadyRegistered(Exception):
    def __init__(self, email: str):
        super().__init__(f"Email already registered: {email}")
        self.email = email


def hash_password(password: str) -> str:
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    return pwd_context.verify(plain_password, hashed_password)


def issue_tokens(organizer: Organizer) -> tuple[str, str]:
    """Access and refresh token for ``organizer``."""
    subject = str(organizer.id)
    return create_access_token(subject), create_refresh_token(subject)


async def register_organizer(db: AsyncSession, data: OrganizerCreate) -> Organizer:
    if await get_organizer_by_email(db, data.email):
        raise EmailAlreadyRegistered(data.email)

    organizer = Organizer(
        password_hash=hash_password(data.password),
        **data.model_dump(exclude={"password"}),
    )
    db.add(organizer)
    await db.commit()
    await db.refresh(organizer)
    logger.info("organizer_registered", organizer_id=str(organizer.id))
    return organizer


async def authenticate_organizer(db: AsyncSession, email: str, password: str) -> Organizer | None:
    """The active organizer owning ``email`` if ``password`` matches, else None."""
    organizer = await get_organizer_by_email(db, email)
    if organizer is None or not organizer.is_active:
        logger.info("login_rejected", reason="unknown_or_inactive")
        return None
    if not verify_password(password, organizer.password_hash):
        logger.info("login_rejected", reason="bad_password", organizer_id=str(organizer.id))
        return None
    return organizer


async def organizer_for_refresh(db: AsyncSession, refresh_token: str) -> Organizer | None:
    """Resolve a refresh token to a still-active organizer."""
    payload = decode_token(refresh_token)
    if payload is None or payload.get("type") != "refresh" or not payload.get("sub"):
        return None

    try:
        organizer_id = UUID(payload["sub"])
    except ValueError:
        return None

    organizer = await get_organizer_by_id(db, organizer_id)
    if organizer is None or not organizer.is_active:
        return None
    return organizer
