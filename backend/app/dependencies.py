from uuid import UUID

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncSession

from app.auth.jwt import decode_token
from app.database import get_db
from app.events.models import Event
from app.events.service import get_event_by_id
from app.organizers.models import Organizer
from app.organizers.service import get_organizer_by_id

security = HTTPBearer()


async def get_current_organizer(
    credentials: HTTPAuthorizationCredentials = Depends(security),
    db: AsyncSession = Depends(get_db),
) -> Organizer:
    payload = decode_token(credentials.credentials)
    if payload is None or payload.get("type") != "access":
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid or expired token")

    organizer_id = payload.get("sub")
    if not organizer_id:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid token payload")

    organizer = await get_organizer_by_id(db, UUID(organizer_id))
    if not organizer or not organizer.is_active:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Organizer not found or inactive")

    return organizer


async def get_owned_event(
    event_id: UUID,
    organizer: Organizer = Depends(get_current_organizer),
    db: AsyncSession = Depends(get_db),
) -> Event:
    """Resolve ``event_id`` to an event the caller owns (admins see every event)."""
    event = await get_event_by_id(db, event_id)
    if not event or (event.owner_id != organizer.id and organizer.role != "admin"):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Event not found")
    return event
