from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from tourops.database import get_db
from tourops.schemas import (
    MessageResponse,
    ParticipantCreate,
    ParticipantResponse,
    ParticipantSegments,
    ParticipantUpdate,
)
from tourops.services import ParticipantRoster

router = APIRouter()


@router.get("/{route_id}/participants", response_model=List[ParticipantResponse])
async def list_participants(route_id: str, db: Session = Depends(get_db)):
    return ParticipantRoster(db).list_participants(route_id)


@router.post("/{route_id}/participants", response_model=ParticipantResponse, status_code=201)
async def create_participant(route_id: str, participant: ParticipantCreate, db: Session = Depends(get_db)):
    return ParticipantRoster(db).create_participant(route_id, participant)


@router.put("/{route_id}/participants/{participant_id}", response_model=ParticipantResponse)
async def update_participant(
    route_id: str,
    participant_id: str,
    participant: ParticipantUpdate,
    db: Session = Depends(get_db)
):
    return ParticipantRoster(db).update_participant(route_id, participant_id, participant)


@router.delete("/{route_id}/participants/{participant_id}", response_model=MessageResponse)
async def delete_participant(route_id: str, participant_id: str, db: Session = Depends(get_db)):
    ParticipantRoster(db).delete_participant(route_id, participant_id)
    return MessageResponse(message="Participant deleted")


@router.put("/{route_id}/participants/{participant_id}/segments", response_model=ParticipantSegments)
async def set_participant_segments(
    route_id: str,
    participant_id: str,
    body: ParticipantSegments,
    db: Session = Depends(get_db)
):
    """Replaces the set of segments the participant takes part in."""
    segment_ids = ParticipantRoster(db).set_participant_segments(route_id, participant_id, body.segment_ids)
    return ParticipantSegments(segment_ids=segment_ids)
