import uuid

import structlog
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.events.models import Event
from app.events.schemas import EventCreate

logger = structlog.get_logger()


async def create_event(db: AsyncSession, owner_id: uuid.UUID, data: EventCreate) -> Event:
    event = Event(owner_id=owner_id, **data.model_dump())
    db.add(event)
    await db.commit()
    await db.refresh(event)
    logger.info("event_created", event_id=str(event.id), owner_id=str(owner_id))
    return event


async def get_event_by_id(db: AsyncSession, event_id: uuid.UUID) -> Event | None:
    result = await db.execute(select(Event).where(Event.id == event_id))
    return result.scalar_one_or_none()


async def list_events(db: AsyncSession, owner_id: uuid.UUID) -> list[Event]:
    result = await db.execute(
        select(Event)
        .where(Event.owner_id == owner_id)
        .order_by(Event.start_date.desc())
    )
    return list(result.scalars().all())
