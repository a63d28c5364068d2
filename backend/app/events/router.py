from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_db
from app.dependencies import get_current_organizer, get_owned_event
from app.events.models import Event
from app.events.schemas import EventCreate, EventResponse
from app.events.service import create_event, list_events
from app.organizers.models import Organizer

router = APIRouter(prefix="/events", tags=["events"])


@router.post("", response_model=EventResponse, status_code=status.HTTP_201_CREATED)
async def create(
    data: EventCreate,
    organizer: Organizer = Depends(get_current_organizer),
    db: AsyncSession = Depends(get_db),
):
    event = await create_event(db, organizer.id, data)
    return EventResponse.model_validate(event)


@router.get("", response_model=list[EventResponse])
async def list_owned(
    organizer: Organizer = Depends(get_current_organizer),
    db: AsyncSession = Depends(get_db),
):
    events = await list_events(db, organizer.id)
    return [EventResponse.model_validate(e) for e in events]


@router.get("/{event_id}", response_model=EventResponse)
async def get_event(event: Event = Depends(get_owned_event)):
    return EventResponse.model_validate(event)
