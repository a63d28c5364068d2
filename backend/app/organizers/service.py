from uuid import UUID

import structlog
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.organizers.models import Organizer
from app.organizers.schemas import OrganizerUpdate

logger = structlog.get_logger()


async def get_organizer_by_id(db: AsyncSession, organizer_id: UUID) -> Organizer | None:
    return await db.get(Organizer, organizer_id)


async def get_organizer_by_email(db: AsyncSession, email: str) -> Organizer | None:
    """Emails are stored lowercased, so lookups ignore case."""
    result = await db.execute(select(Organizer).where(Organizer.email == email.lower()))
    return result.scalar_one_or_none()


async def update_organizer(db: AsyncSession, organizer: Organizer, data: OrganizerUpdate) -> Organizer:
    changes = data.model_dump(exclude_unset=True)
    for field, value in changes.items():
        setattr(organizer, field, value)
    await db.commit()
    await db.refresh(organizer)
    logger.info("organizer_updated", organizer_id=str(organizer.id), fields=sorted(changes))
    return organizer
