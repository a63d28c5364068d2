from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_db
from app.dependencies import get_current_organizer
from app.organizers.models import Organizer
from app.organizers.schemas import OrganizerResponse, OrganizerUpdate
from app.organizers.service import get_organizer_by_id, update_organizer

router = APIRouter(prefix="/organizers", tags=["organizers"])


@router.get("/{organizer_id}", response_model=OrganizerResponse)
async def get_organizer(
    organizer_id: UUID,
    current_organizer: Organizer = Depends(get_current_organizer),
    db: AsyncSession = Depends(get_db),
):
    if current_organizer.id != organizer_id and current_organizer.role != "admin":
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Access denied")

    organizer = await get_organizer_by_id(db, organizer_id)
    if not organizer:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Organizer not found")

    return OrganizerResponse.model_validate(organizer)


@router.patch("/{organizer_id}", response_model=OrganizerResponse)
async def update(
    organizer_id: UUID,
    data: OrganizerUpdate,
    current_organizer: Organizer = Depends(get_current_organizer),
    db: AsyncSession = Depends(get_db),
):
    if current_organizer.id != organizer_id:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Access denied")

    updated = await update_organizer(db, current_organizer, data)
    return OrganizerResponse.model_validate(updated)
